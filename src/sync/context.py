"""Per-run state shared by the scanner, runner and reconciler."""

from collections.abc import Callable
from dataclasses import dataclass, field

from common.logger import get_logger
from remote.clients.apple_news import AppleNewsClient
from remote.clients.base import APIClient
from remote.settings import Settings, fetch_settings
from store.db import DatabaseAdapter, RecordId
from store.meta import MetaStore

from .predicate import get_id_column

logger = get_logger(__name__)


@dataclass
class RunContext:
    """State scoped to one command invocation.

    Holds the connected adapter and memoizes everything that must be
    computed at most once per run: the maximum ID of each scanned table,
    the channel settings and the API client.

    Attributes:
        adapter: Connected database adapter
        meta: Postmeta accessor over the same adapter
        settings_provider: Called once, on first use of settings()
        client_factory: Builds the API client from the settings
    """

    adapter: DatabaseAdapter
    meta: MetaStore | None = None
    settings_provider: Callable[[], Settings] = fetch_settings
    client_factory: Callable[[Settings], APIClient] = AppleNewsClient
    _max_ids: dict[str, RecordId] = field(default_factory=dict, init=False, repr=False)
    _settings: Settings | None = field(default=None, init=False, repr=False)
    _client: APIClient | None = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if self.meta is None:
            self.meta = MetaStore(self.adapter)

    def max_id(self, table: str) -> RecordId:
        """Get the largest ID of a table, querying it only once per run.

        Returns:
            Largest ID, or 0 for an empty table

        Raises:
            UnsupportedTableError: If the table is not supported
        """
        if table not in self._max_ids:
            id_column = get_id_column(table)
            self._max_ids[table] = self.adapter.select_max(id_column, table) or 0
            logger.debug(f"Max {id_column} in {table}: {self._max_ids[table]}")
        return self._max_ids[table]

    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = self.settings_provider()
        return self._settings

    def client(self) -> APIClient:
        if self._client is None:
            self._client = self.client_factory(self.settings())
        return self._client

    def flush_caches(self) -> None:
        """Drop the query log and the postmeta object cache.

        Keeps memory flat over long scans; memoized run state is kept.
        """
        self.adapter.flush_queries()
        self.meta.flush()
