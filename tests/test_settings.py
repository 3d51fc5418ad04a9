"""
Tests for environment-driven settings.
"""
import pytest
from pydantic import ValidationError

from region_pricing.config.settings import Settings


def test_defaults(settings, data_dir):
    assert settings.data_dir == data_dir
    assert settings.error_log == data_dir / "error_log.csv"
    assert settings.report_unpriced_ids is False
    assert settings.expose_fault_detail is True
    assert settings.log_level == "INFO"
    assert settings.products_csv == data_dir / "products.csv"


def test_env_overrides(settings, data_dir, tmp_path, monkeypatch):
    monkeypatch.setenv("REGION_PRICING_REPORT_UNPRICED_IDS", "true")
    monkeypatch.setenv("REGION_PRICING_EXPOSE_FAULT_DETAIL", "false")
    monkeypatch.setenv("REGION_PRICING_LOG_LEVEL", "debug")
    monkeypatch.setenv("REGION_PRICING_ERROR_LOG", str(tmp_path / "errors.csv"))

    loaded = Settings.load(data_dir)

    assert loaded.report_unpriced_ids is True
    assert loaded.expose_fault_detail is False
    assert loaded.log_level == "DEBUG"
    assert loaded.error_log == tmp_path / "errors.csv"


def test_data_dir_from_env(settings, data_dir, monkeypatch):
    monkeypatch.setenv("REGION_PRICING_DATA_DIR", str(data_dir))
    assert Settings.load().contacts_csv == data_dir / "contacts.csv"


@pytest.mark.parametrize("name, value", [
    ("REGION_PRICING_REPORT_UNPRICED_IDS", "ture"),
    ("REGION_PRICING_EXPOSE_FAULT_DETAIL", "maybe"),
    ("REGION_PRICING_LOG_LEVEL", "verbose"),
])
def test_invalid_env_value_is_rejected(settings, data_dir, monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings.load(data_dir)


def test_labels_are_frozen(settings):
    with pytest.raises(ValidationError):
        settings.labels.not_found = "Nobody home"
    assert settings.labels.missing_context_message() == (
        "Product or Home Region is missing on the associated Contact."
    )
