"""SQLite database adapter implementation.

Used for local copies of a WordPress database and for tests.
"""

import sqlite3
from pathlib import Path
from typing import Any

from .interface import DatabaseAdapter
from .types import ConnectionError as DBConnectionError
from .types import DatabaseError, Row, SchemaError
from .types import IntegrityError as DBIntegrityError


class SQLiteAdapter(DatabaseAdapter):
    """Adapter for a WordPress database exported to a single SQLite file.

    Rows come back as plain dicts keyed by column name, so callers see the
    same shape as from PostgreSQLAdapter.
    """

    def __init__(
        self,
        db_path: str | Path,
        table_prefix: str = "wp_",
        save_queries: bool = False,
    ):
        """Initialize SQLite adapter.

        Args:
            db_path: Path to SQLite database file
            table_prefix: WordPress table prefix
            save_queries: Keep a log of executed queries
        """
        super().__init__(table_prefix=table_prefix, save_queries=save_queries)
        self.db_path = Path(db_path)
        self._conn: sqlite3.Connection | None = None
        self._schema_file = Path(__file__).parent / "schema_sqlite.sql"

    def connect(self) -> None:
        """Open the SQLite file, creating parent directories as needed."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self.db_path))
            self._conn.row_factory = sqlite3.Row
        except sqlite3.Error as e:
            raise DBConnectionError(f"Failed to connect to SQLite database: {e}") from e

    def close(self) -> None:
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def _require_connection(self) -> sqlite3.Connection:
        if not self._conn:
            raise DatabaseError("No active connection")
        return self._conn

    def commit(self) -> None:
        """Commit current transaction."""
        conn = self._require_connection()
        try:
            conn.commit()
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to commit transaction: {e}") from e

    def rollback(self) -> None:
        """Rollback current transaction."""
        conn = self._require_connection()
        try:
            conn.rollback()
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to rollback transaction: {e}") from e

    def create_schema(self) -> None:
        """Create the posts and postmeta tables from the SQL file."""
        conn = self._require_connection()

        if not self._schema_file.exists():
            raise SchemaError(f"Schema file not found: {self._schema_file}")

        try:
            schema_sql = self._schema_file.read_text().replace("{prefix}", self.table_prefix)
            conn.executescript(schema_sql)
            conn.commit()
        except sqlite3.Error as e:
            raise SchemaError(f"Failed to create schema: {e}") from e
        except OSError as e:
            raise SchemaError(f"Failed to read schema file: {e}") from e

    def get_tables(self) -> list[str]:
        """List user tables, without SQLite bookkeeping tables."""
        rows = self.fetchall("SELECT name FROM sqlite_master WHERE type='table' ORDER BY name")
        return [row["name"] for row in rows if row["name"] != "sqlite_sequence"]

    def execute(self, query: str, params: tuple | None = None) -> Any:
        """Run one statement, logging it when save_queries is set."""
        conn = self._require_connection()
        self.log_query(query)

        try:
            cursor = conn.cursor()
            if params:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
            return cursor
        except sqlite3.IntegrityError as e:
            raise DBIntegrityError(f"Integrity constraint violation: {e}") from e
        except sqlite3.Error as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    def fetchone(self, query: str, params: tuple | None = None) -> Row | None:
        """Execute query and fetch one result as dictionary."""
        row = self.execute(query, params).fetchone()
        return dict(row) if row is not None else None

    def fetchall(self, query: str, params: tuple | None = None) -> list[Row]:
        """Execute query and fetch all results as list of dictionaries."""
        return [dict(row) for row in self.execute(query, params).fetchall()]

    def fetchscalar(self, query: str, params: tuple | None = None) -> Any:
        """Execute query and return first column of first row."""
        row = self.execute(query, params).fetchone()
        return row[0] if row is not None else None

    @property
    def placeholder(self) -> str:
        """'?' for SQLite."""
        return "?"

    def exists(self) -> bool:
        """True once the database file is on disk."""
        return self.db_path.exists()

    def __repr__(self) -> str:
        status = "connected" if self._conn else "disconnected"
        return (
            f"SQLiteAdapter(db_path={self.db_path}, prefix={self.table_prefix}, "
            f"status={status})"
        )
