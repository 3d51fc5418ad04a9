"""Data subpackage - CSV-backed catalog, customer directory and error log."""
from .catalog_store import CatalogStore
from .directory import CustomerDirectory, CaseStore
from .error_log import CsvErrorLogSink

__all__ = ['CatalogStore', 'CustomerDirectory', 'CaseStore', 'CsvErrorLogSink']
