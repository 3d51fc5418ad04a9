"""
Centralized settings, data paths and user-facing labels for region pricing.

Every field can be overridden from the environment (or a `.env` file) with
the REGION_PRICING_ prefix, e.g. REGION_PRICING_DATA_DIR.
"""
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Get the packaged sample data directory."""
    return Path(__file__).resolve().parent.parent / 'data' / 'sample'


class Labels(BaseModel):
    """
    User-facing messages, injected into each lookup service.

    Recognized keys: missing_context, not_found, general_error, no_pricing,
    invalid_ids.
    """
    model_config = ConfigDict(frozen=True)

    missing_context: str = "Product or Home Region is missing"
    not_found: str = "No Contact found"
    general_error: str = "An unexpected error occurred while retrieving pricing."
    no_pricing: str = "No pricing found for the selected product and region."
    invalid_ids: str = "Invalid or missing UUID(s)."

    def missing_context_message(self) -> str:
        """Message shown when the case's Contact lacks product or region."""
        return f"{self.missing_context} on the associated Contact."


class Settings(BaseSettings):
    """Application settings loaded from environment variables or `.env`."""

    model_config = SettingsConfigDict(
        env_prefix="REGION_PRICING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Data directory holding the catalog, directory and case CSVs
    data_dir: Path = Field(default_factory=get_default_data_dir)

    # Error log sink, defaults to <data_dir>/error_log.csv
    error_log: Optional[Path] = None

    labels: Labels = Field(default_factory=Labels)

    # Itemize ids with complete context but no matching entries as bulk errors
    report_unpriced_ids: bool = False

    # Append raw fault text to the bulk top-level error message
    expose_fault_detail: bool = True

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator('log_level', mode='before')
    @classmethod
    def _upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @model_validator(mode='after')
    def _default_error_log(self) -> 'Settings':
        if self.error_log is None:
            self.error_log = self.data_dir / 'error_log.csv'
        return self

    # Catalog files
    @property
    def products_csv(self) -> Path:
        return self.data_dir / 'products.csv'

    @property
    def price_catalogs_csv(self) -> Path:
        return self.data_dir / 'price_catalogs.csv'

    @property
    def price_entries_csv(self) -> Path:
        return self.data_dir / 'price_entries.csv'

    # Customer directory and case store files
    @property
    def contacts_csv(self) -> Path:
        return self.data_dir / 'contacts.csv'

    @property
    def cases_csv(self) -> Path:
        return self.data_dir / 'cases.csv'

    @classmethod
    def load(cls, data_dir: Optional[Path] = None) -> 'Settings':
        """Load settings from the environment, optionally pinning the data directory."""
        if data_dir is not None:
            return cls(data_dir=Path(data_dir))
        return cls()


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
