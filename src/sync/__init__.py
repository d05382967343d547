"""Batch synchronization of local postmeta with the Apple News API.

Example:
    >>> from sync import ApiDataSync, RunContext, SearchPredicate, SearchTerm, run_bulk_task
    >>>
    >>> context = RunContext(adapter)
    >>> predicate = SearchPredicate("postmeta", [SearchTerm("meta_key", "apple_news_api_id")])
    >>> run_bulk_task(context, predicate, ApiDataSync(context), extra_args=(True,))
"""

from .context import RunContext
from .errors import ConfigurationError, SyncError
from .predicate import Comparator, Relation, SearchPredicate, SearchTerm, validate_column
from .reconcile import ApiDataSync
from .runner import RecordProcessor, run_bulk_task
from .scanner import BatchScanner, ScanCursor

__all__ = [
    "ApiDataSync",
    "BatchScanner",
    "Comparator",
    "ConfigurationError",
    "RecordProcessor",
    "Relation",
    "RunContext",
    "ScanCursor",
    "SearchPredicate",
    "SearchTerm",
    "SyncError",
    "run_bulk_task",
    "validate_column",
]
