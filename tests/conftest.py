"""
Shared fixtures: a small catalog, directory and case store written to tmp_path.
"""
import pytest

from region_pricing.config.settings import Settings
from region_pricing.data.catalog_store import CatalogStore
from region_pricing.data.directory import CaseStore, CustomerDirectory
from region_pricing.engine.resolver import ResolutionEngine
from region_pricing.services.bulk_lookup import BulkLookupService
from region_pricing.services.error_reporter import ErrorReporter
from region_pricing.services.single_lookup import SingleLookupService


PRODUCTS = """id,name,is_active
P1,Smart,true
P2,You,true
P3,Old Card,false
"""

CATALOGS = """id,name,is_active,region
PB-STD,Standard,true,
PB-DE,Germany,true,DE
PB-FR,France,TRUE,FR
PB-UK,United Kingdom,false,UK
"""

ENTRIES = """id,product_id,catalog_id,unit_price,currency,contract_length,atm_fee_percent,card_replacement_cost,is_active
E1,P1,PB-STD,0,EUR,,1.7,10,true
E2,P1,PB-DE,4.90,EUR,1 Month,1.7,10,true
E3,P2,PB-DE,11.90,EUR,1 Month,0,10,true
E4,P2,PB-DE,9.9,EUR,12 Months,,,true
E5,P1,PB-FR,4.90,EUR,1 Month,1.7,10,true
E6,P1,PB-FR,3.90,EUR,12 Months,1.7,10,false
E7,P2,PB-UK,9.99,GBP,1 Month,0,8,true
E8,P3,PB-DE,5.90,EUR,,1.7,10,true
"""

CONTACTS = """id,external_id,name,product_id,home_region
C1,uuid-a,Anna Schmidt,P2,DE
C2,uuid-c,Carl Weber,,DE
C3,uuid-d,Dora Smith,P2,UK
C4,uuid-e,Emil Roux,P1,FR
C5,uuid-f,Fay Martin,P1,
"""

CASES = """id,contact_id
CS-1,C1
CS-2,C5
CS-3,C3
CS-4,C404
CS-5,C4
"""


ENV_OVERRIDES = (
    "REGION_PRICING_DATA_DIR",
    "REGION_PRICING_ERROR_LOG",
    "REGION_PRICING_REPORT_UNPRICED_IDS",
    "REGION_PRICING_EXPOSE_FAULT_DETAIL",
    "REGION_PRICING_LOG_LEVEL",
)


class MemorySink:
    """Error log sink that keeps records in a list."""

    def __init__(self):
        self.records = []

    def write(self, record: dict):
        self.records.append(record)


class BrokenSink:
    """Error log sink whose writes always fail."""

    def write(self, record: dict):
        raise IOError("error log is read-only")


class CountingStore:
    """Wraps a catalog store and counts the queries it answers."""

    def __init__(self, store):
        self.store = store
        self.calls = []

    def find_active_entries(self, product_ids, region_codes):
        self.calls.append((set(product_ids), set(region_codes)))
        return self.store.find_active_entries(product_ids, region_codes)


class FailingStore:
    """Catalog store whose queries always fail."""

    def find_active_entries(self, product_ids, region_codes):
        raise RuntimeError("catalog database offline")


@pytest.fixture
def data_dir(tmp_path):
    for name, content in (
        ('products.csv', PRODUCTS),
        ('price_catalogs.csv', CATALOGS),
        ('price_entries.csv', ENTRIES),
        ('contacts.csv', CONTACTS),
        ('cases.csv', CASES),
    ):
        (tmp_path / name).write_text(content, encoding='utf-8')
    return tmp_path


@pytest.fixture
def settings(data_dir, monkeypatch):
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    return Settings.load(data_dir)


@pytest.fixture
def store(settings):
    return CountingStore(CatalogStore.from_settings(settings))


@pytest.fixture
def engine(store):
    return ResolutionEngine(store)


@pytest.fixture
def sink():
    return MemorySink()


@pytest.fixture
def reporter(sink):
    return ErrorReporter(sink)


@pytest.fixture
def directory(settings):
    return CustomerDirectory(settings.contacts_csv)


@pytest.fixture
def single_service(settings, directory, engine, reporter):
    cases = CaseStore(settings.cases_csv, directory)
    return SingleLookupService(cases, engine, reporter, settings.labels)


@pytest.fixture
def bulk_service(settings, directory, engine, reporter):
    return BulkLookupService.from_settings(settings, directory, engine, reporter)
