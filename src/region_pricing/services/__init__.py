"""Services subpackage - single and bulk pricing lookups."""
from .error_reporter import ErrorReporter
from .single_lookup import SingleLookupService
from .bulk_lookup import BulkLookupService

__all__ = ['ErrorReporter', 'SingleLookupService', 'BulkLookupService']
