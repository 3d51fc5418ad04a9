"""
Resolution Engine - maps (product, region) pairs to formatted price rows.

The batch path collects the union of products and regions across every
context and issues a single catalog query, then filters in memory per
customer. A bulk call therefore costs one query no matter how many
customers it carries.
"""
import logging
from typing import Iterable, Protocol

from .errors import CatalogUnavailable
from .formatting import format_amount, format_fee_percent
from .models import PriceEntry, PricingContext, PricingData, PricingRow

logger = logging.getLogger(__name__)


class EntrySource(Protocol):
    """Anything that can answer an active-entry query (see CatalogStore)."""

    def find_active_entries(self, product_ids: set[str], region_codes: set[str]) -> list[PriceEntry]:
        ...


def build_row(entry: PriceEntry) -> PricingRow:
    """Format one catalog entry as a display row."""
    return PricingRow(
        product_name=entry.product_name,
        cost_per_month=format_amount(entry.unit_price, entry.currency_code),
        atm_fee=format_fee_percent(entry.atm_fee_percent),
        card_replacement_cost=format_amount(entry.replacement_cost, entry.currency_code),
        contract_length=entry.contract_length,
    )


class ResolutionEngine:
    """
    Core engine that resolves price rows for one or many pricing contexts.

    Resolution:
    1. Query the catalog for active entries matching the product/region sets
    2. Keep entries matching each context exactly (product AND region)
    3. Build one row per entry, in the order the store returned them
    4. Group the rows under the context's region code

    Entries that differ only by contract length all become separate rows.
    """

    def __init__(self, catalog: EntrySource):
        self.catalog = catalog

    def _query(self, product_ids: set[str], region_codes: set[str]) -> list[PriceEntry]:
        logger.debug(
            "Catalog query: %d product(s), %d region(s)",
            len(product_ids), len(region_codes)
        )
        try:
            return list(self.catalog.find_active_entries(product_ids, region_codes))
        except Exception as e:
            raise CatalogUnavailable(f"Catalog query failed: {e}") from e

    def resolve(self, product_id: str, region_code: str) -> PricingData:
        """
        Resolve price rows for a single product in a single region.

        Returns {region_code: [rows]}, or an empty dict when nothing is
        configured. Raises CatalogUnavailable if the query fails.
        """
        entries = self._query({product_id}, {region_code})
        rows = [
            build_row(entry) for entry in entries
            if entry.product_id == product_id and entry.region_code == region_code
        ]
        if not rows:
            return {}
        return {region_code: rows}

    def resolve_batch(self, contexts: Iterable[PricingContext]) -> dict[str, PricingData]:
        """
        Resolve price rows for many contexts with one catalog query.

        Returns {customer_key: {region_code: [rows]}}. Contexts without any
        matching entry are left out of the mapping. Incomplete contexts are
        skipped.
        """
        contexts = [c for c in contexts if c.is_complete]
        if not contexts:
            return {}

        product_ids = {c.product_id for c in contexts}
        region_codes = {c.region_code for c in contexts}
        entries = self._query(product_ids, region_codes)

        # Bucket once so each context is a dict lookup, not a scan
        by_pair: dict[tuple[str, str], list[PriceEntry]] = {}
        for entry in entries:
            by_pair.setdefault((entry.product_id, entry.region_code), []).append(entry)

        resolved: dict[str, PricingData] = {}
        for context in contexts:
            matches = by_pair.get((context.product_id, context.region_code))
            if not matches:
                continue
            resolved[context.customer_key] = {
                context.region_code: [build_row(entry) for entry in matches]
            }

        logger.debug("Resolved pricing for %d of %d context(s)", len(resolved), len(contexts))
        return resolved
