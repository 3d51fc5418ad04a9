"""
Catalog Store - read-only access to products, price catalogs and entries.

Backed by three CSV exports read with pandas on every query, so callers
always see the current snapshot of the catalog.
"""
import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from ..engine.formatting import to_decimal
from ..engine.models import PriceCatalog, PriceEntry, Product

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = ['id', 'name', 'is_active']
CATALOG_COLUMNS = ['id', 'name', 'is_active', 'region']
ENTRY_COLUMNS = [
    'id', 'product_id', 'catalog_id', 'unit_price', 'currency',
    'contract_length', 'atm_fee_percent', 'card_replacement_cost', 'is_active'
]


def read_table(path: Path, required: Iterable[str]) -> pd.DataFrame:
    """
    Read a CSV as all-string columns with blanks kept as ''.

    Raises FileNotFoundError if the file is missing and KeyError if a
    required column is absent.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [c.strip() for c in df.columns]
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()

    missing = [c for c in required if c not in df.columns]
    if missing:
        raise KeyError(f"{path.name} is missing column(s): {', '.join(missing)}")
    return df


def is_true(series: pd.Series) -> pd.Series:
    return series.str.lower() == 'true'


def _optional(value: str):
    return value or None


class CatalogStore:
    """
    Read-only catalog access.

    An entry is returned only when the entry, its product and its catalog
    are all active. No results is an empty list, never an error.
    """

    def __init__(self, products_csv: Path, catalogs_csv: Path, entries_csv: Path):
        self.products_csv = Path(products_csv)
        self.catalogs_csv = Path(catalogs_csv)
        self.entries_csv = Path(entries_csv)

    @classmethod
    def from_settings(cls, settings) -> 'CatalogStore':
        return cls(settings.products_csv, settings.price_catalogs_csv, settings.price_entries_csv)

    def read_products(self) -> dict[str, Product]:
        """Read every product, keyed by id. The first row wins on duplicate ids."""
        df = read_table(self.products_csv, PRODUCT_COLUMNS)
        df = df.assign(active=is_true(df['is_active']))

        products: dict[str, Product] = {}
        for row in df.to_dict(orient='records'):
            products.setdefault(row['id'], Product(
                product_id=row['id'],
                name=row['name'],
                active=bool(row['active']),
            ))
        return products

    def read_catalogs(self) -> dict[str, PriceCatalog]:
        """Read every price catalog, keyed by id. Blank regions are None."""
        df = read_table(self.catalogs_csv, CATALOG_COLUMNS)
        df = df.assign(active=is_true(df['is_active']))

        catalogs: dict[str, PriceCatalog] = {}
        for row in df.to_dict(orient='records'):
            catalogs.setdefault(row['id'], PriceCatalog(
                catalog_id=row['id'],
                name=row['name'],
                active=bool(row['active']),
                region_code=_optional(row['region']),
            ))
        return catalogs

    def find_active_entries(self, product_ids: set[str], region_codes: set[str]) -> list[PriceEntry]:
        """
        Find active entries for any of the given products in any of the given regions.

        Both filters are sets so a whole batch of customers is served by
        one read. Entries come back in file order.
        """
        if not product_ids or not region_codes:
            return []

        products = {
            pid: p for pid, p in self.read_products().items()
            if p.active and pid in product_ids
        }
        catalogs = {
            cid: c for cid, c in self.read_catalogs().items()
            if c.active and c.region_code in region_codes
        }
        entries = read_table(self.entries_csv, ENTRY_COLUMNS)
        entries = entries[
            is_true(entries['is_active'])
            & entries['product_id'].isin(list(products))
            & entries['catalog_id'].isin(list(catalogs))
        ]

        logger.debug("Catalog query matched %d active entr(ies)", len(entries))

        return [
            PriceEntry(
                entry_id=row['id'],
                product_id=row['product_id'],
                catalog_id=row['catalog_id'],
                product_name=products[row['product_id']].name,
                region_code=catalogs[row['catalog_id']].region_code,
                unit_price=to_decimal(row['unit_price']),
                currency_code=row['currency'],
                contract_length=_optional(row['contract_length']),
                atm_fee_percent=to_decimal(row['atm_fee_percent']),
                replacement_cost=to_decimal(row['card_replacement_cost']),
                active=True,
            )
            for row in entries.to_dict(orient='records')
        ]
