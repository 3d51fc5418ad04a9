"""
Customer directory and case store, backed by CSV exports.
"""
import logging
from pathlib import Path
from typing import Iterable, Optional

from ..engine.models import CustomerRecord
from .catalog_store import read_table

logger = logging.getLogger(__name__)

CONTACT_COLUMNS = ['id', 'external_id', 'name', 'product_id', 'home_region']
CASE_COLUMNS = ['id', 'contact_id']


def _record(row: dict) -> CustomerRecord:
    return CustomerRecord(
        customer_id=row['id'],
        external_id=row['external_id'] or None,
        display_name=row['name'],
        product_id=row['product_id'] or None,
        home_region=row['home_region'] or None,
    )


class CustomerDirectory:
    """Looks up contacts by internal id or by external UUID."""

    def __init__(self, contacts_csv: Path):
        self.contacts_csv = Path(contacts_csv)

    def get_by_id(self, customer_id: str) -> Optional[CustomerRecord]:
        """Get a single contact by internal id."""
        contacts = read_table(self.contacts_csv, CONTACT_COLUMNS)
        match = contacts[contacts['id'] == str(customer_id).strip()]
        if match.empty:
            return None
        return _record(match.iloc[0].to_dict())

    def find_by_external_ids(self, external_ids: Iterable[str]) -> dict[str, CustomerRecord]:
        """
        Resolve many external ids in one read.

        Returns {external_id: record} for the ids that matched; unknown ids
        are simply absent. When an id is duplicated, the first row wins.
        """
        wanted = {str(i).strip() for i in external_ids if str(i).strip()}
        if not wanted:
            return {}

        contacts = read_table(self.contacts_csv, CONTACT_COLUMNS)
        contacts = contacts[contacts['external_id'].isin(wanted)]
        contacts = contacts.drop_duplicates('external_id')

        return {
            row['external_id']: _record(row)
            for row in contacts.to_dict(orient='records')
        }


class CaseStore:
    """Resolves a case (ticket) reference to the contact it belongs to."""

    def __init__(self, cases_csv: Path, directory: CustomerDirectory):
        self.cases_csv = Path(cases_csv)
        self.directory = directory

    def get_customer(self, case_id: str) -> Optional[CustomerRecord]:
        """Get the contact attached to a case, or None if either is missing."""
        cases = read_table(self.cases_csv, CASE_COLUMNS)
        match = cases[cases['id'] == str(case_id).strip()]
        if match.empty:
            logger.info("Case %s not found", case_id)
            return None

        contact_id = match.iloc[0]['contact_id']
        if not contact_id:
            return None
        return self.directory.get_by_id(contact_id)
