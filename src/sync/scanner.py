"""Paginated scan for IDs matching a search predicate.

Matches may be sparse, so each query probes a wide ID range
(page_size * probe_multiplier IDs) while returning at most page_size rows.
Empty probes slide the range forward until a page is found or the range
passes the largest ID of the table.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from common.constants import BATCH_SIZE, PROBE_MULTIPLIER
from common.logger import get_logger
from store.db import RecordId

from .context import RunContext
from .predicate import SearchPredicate

logger = get_logger(__name__)


@dataclass
class ScanCursor:
    """Position of a scan.

    Attributes:
        table: Table partial being scanned
        min_id: Smallest ID the next page may contain
        page_size: Maximum IDs per page
        probe_multiplier: Range width of one probe, in pages
    """

    table: str
    min_id: RecordId = 1
    page_size: int = BATCH_SIZE
    probe_multiplier: int = PROBE_MULTIPLIER

    @property
    def probe_width(self) -> int:
        return self.page_size * self.probe_multiplier


class BatchScanner:
    """Find matching IDs page by page, in ascending order.

    Example:
        >>> scanner = BatchScanner(context)
        >>> for page in scanner.scan(predicate, start_id=1):
        ...     print(page)
    """

    def __init__(
        self,
        context: RunContext,
        page_size: int = BATCH_SIZE,
        probe_multiplier: int = PROBE_MULTIPLIER,
    ):
        self.context = context
        self.page_size = page_size
        self.probe_multiplier = probe_multiplier

    def get_batch(self, predicate: SearchPredicate, min_id: RecordId = 1) -> list[RecordId]:
        """Get the next page of matching IDs at or above min_id.

        Args:
            predicate: Search predicate; validated before any query runs
            min_id: Smallest ID to consider

        Returns:
            Up to page_size IDs in ascending order, empty if no more matches

        Raises:
            ConfigurationError: If the predicate is invalid
        """
        adapter = self.context.adapter
        fragment, params = predicate.to_sql(adapter.esc_like)
        id_column = predicate.id_column

        cursor = ScanCursor(
            table=predicate.table,
            min_id=min_id,
            page_size=self.page_size,
            probe_multiplier=self.probe_multiplier,
        )
        where = f"{id_column} >= ? AND {id_column} < ? AND ( {fragment} )"

        max_id = self.context.max_id(cursor.table)
        while cursor.min_id <= max_id:
            ids = adapter.select_distinct(
                id_column,
                cursor.table,
                where,
                (cursor.min_id, cursor.min_id + cursor.probe_width, *params),
                cursor.page_size,
            )
            if ids:
                return ids
            cursor.min_id += cursor.probe_width

        return []

    def scan(self, predicate: SearchPredicate, start_id: RecordId = 1) -> Iterator[list[RecordId]]:
        """Iterate over every page of matching IDs.

        The predicate is validated immediately, so configuration errors are
        raised by this call rather than on first iteration.

        Args:
            predicate: Search predicate
            start_id: Smallest ID to consider

        Returns:
            Iterator of non-empty pages
        """
        predicate.validate()
        return self._pages(predicate, start_id)

    def _pages(self, predicate: SearchPredicate, min_id: RecordId) -> Iterator[list[RecordId]]:
        while ids := self.get_batch(predicate, min_id):
            yield ids
            min_id = ids[-1] + 1
