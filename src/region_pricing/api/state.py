"""
Service wiring for the API: builds the lookup services from settings once.
"""
from dataclasses import dataclass
from typing import Optional

from ..config.settings import Settings, get_settings
from ..data.catalog_store import CatalogStore
from ..data.directory import CaseStore, CustomerDirectory
from ..data.error_log import CsvErrorLogSink
from ..engine.resolver import ResolutionEngine
from ..services.bulk_lookup import BulkLookupService
from ..services.error_reporter import ErrorReporter
from ..services.single_lookup import SingleLookupService


@dataclass
class Services:
    single: SingleLookupService
    bulk: BulkLookupService


def build_services(settings: Optional[Settings] = None) -> Services:
    """Wire stores, engine and reporter into both lookup services."""
    settings = settings or get_settings()

    engine = ResolutionEngine(CatalogStore.from_settings(settings))
    reporter = ErrorReporter(CsvErrorLogSink(settings.error_log))
    directory = CustomerDirectory(settings.contacts_csv)
    cases = CaseStore(settings.cases_csv, directory)

    return Services(
        single=SingleLookupService(cases, engine, reporter, settings.labels),
        bulk=BulkLookupService.from_settings(settings, directory, engine, reporter),
    )


_services: Optional[Services] = None


def get_services() -> Services:
    """Get the global services instance."""
    global _services
    if _services is None:
        _services = build_services()
    return _services


def get_single_lookup() -> SingleLookupService:
    return get_services().single


def get_bulk_lookup() -> BulkLookupService:
    return get_services().bulk
