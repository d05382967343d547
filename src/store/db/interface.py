"""Abstract database adapter interface.

Adapters expose the handful of operations the sync commands need from a
WordPress-shaped datastore: prefixed table names, parameterized queries,
LIKE escaping and the SELECT DISTINCT / SELECT MAX helpers used by the
batch scanner.
"""

from abc import ABC, abstractmethod
from typing import Any

from .types import CORE_TABLES, MissingTablesError, RecordId, Row, TablePartial


class DatabaseAdapter(ABC):
    """Abstract database adapter interface.

    Queries are written with '?' placeholders; backends that use a different
    paramstyle convert them in execute().

    Attributes:
        table_prefix: WordPress table prefix (e.g. 'wp_')
        save_queries: Keep every executed query in `queries`
        queries: Executed queries, when save_queries is enabled
    """

    table_prefix: str = "wp_"
    save_queries: bool = False

    def __init__(self, table_prefix: str = "wp_", save_queries: bool = False):
        self.table_prefix = table_prefix
        self.save_queries = save_queries
        self.queries: list[str] = []

    @abstractmethod
    def connect(self) -> None:
        """Establish database connection.

        Raises:
            ConnectionError: If connection fails
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close database connection."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """Commit current transaction.

        Raises:
            DatabaseError: If commit fails
        """
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Rollback current transaction.

        Raises:
            DatabaseError: If rollback fails
        """
        pass

    @abstractmethod
    def create_schema(self) -> None:
        """Create the posts and postmeta tables for the configured prefix.

        Raises:
            SchemaError: If schema creation fails
        """
        pass

    @abstractmethod
    def get_tables(self) -> list[str]:
        """Get list of all tables in database.

        Raises:
            DatabaseError: If query fails
        """
        pass

    @abstractmethod
    def execute(self, query: str, params: tuple | None = None) -> Any:
        """Execute a query and return cursor.

        Args:
            query: SQL query to execute
            params: Query parameters (optional)

        Returns:
            Database cursor

        Raises:
            DatabaseError: If execution fails
            IntegrityError: If integrity constraint violated
        """
        pass

    @abstractmethod
    def fetchone(self, query: str, params: tuple | None = None) -> Row | None:
        """Execute query and fetch one result as dictionary."""
        pass

    @abstractmethod
    def fetchall(self, query: str, params: tuple | None = None) -> list[Row]:
        """Execute query and fetch all results as list of dictionaries."""
        pass

    @abstractmethod
    def fetchscalar(self, query: str, params: tuple | None = None) -> Any:
        """Execute query and return first column of first row, or None."""
        pass

    @property
    @abstractmethod
    def placeholder(self) -> str:
        """Get database-specific parameter placeholder."""
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Check if database exists and is accessible."""
        pass

    def table(self, partial: TablePartial) -> str:
        """Get the full table name for a table partial.

        Example:
            >>> adapter.table("postmeta")
            'wp_postmeta'
        """
        return f"{self.table_prefix}{partial}"

    def require_tables(self, partials: tuple[TablePartial, ...] = CORE_TABLES) -> None:
        """Raise MissingTablesError unless every prefixed table exists."""
        present = set(self.get_tables())
        missing = sorted(self.table(p) for p in partials if self.table(p) not in present)
        if missing:
            raise MissingTablesError(missing)

    def log_query(self, query: str) -> None:
        """Remember an executed query when save_queries is enabled."""
        if self.save_queries:
            self.queries.append(query)

    def flush_queries(self) -> None:
        """Drop the executed query log."""
        self.queries = []

    @staticmethod
    def esc_like(text: str) -> str:
        """Escape LIKE wildcards so the value matches literally.

        Backslash is the escape character; queries using the result must
        carry an ESCAPE '\\' clause.

        Example:
            >>> DatabaseAdapter.esc_like("100%_sure")
            '100\\\\%\\\\_sure'
        """
        return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")

    def select_distinct(
        self,
        id_column: str,
        table: TablePartial,
        where: str,
        params: tuple,
        limit: int,
    ) -> list[RecordId]:
        """Select one page of distinct IDs in ascending order.

        Args:
            id_column: Validated identifier column
            table: Table partial (e.g. 'postmeta')
            where: WHERE clause with '?' placeholders; column names must
                already be validated against an allow-list
            params: Values for the placeholders in `where`
            limit: Maximum number of IDs to return

        Returns:
            List of IDs, empty if nothing matched
        """
        query = (
            f"SELECT DISTINCT {id_column} FROM {self.table(table)} "
            f"WHERE {where} ORDER BY {id_column} ASC LIMIT ?"
        )
        rows = self.fetchall(query, (*params, limit))
        return [int(next(iter(row.values()))) for row in rows]

    def select_max(self, id_column: str, table: TablePartial) -> RecordId | None:
        """Get the largest ID in a table, or None for an empty table."""
        value = self.fetchscalar(f"SELECT MAX({id_column}) FROM {self.table(table)}")
        return int(value) if value is not None else None

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        self.close()
        return False
