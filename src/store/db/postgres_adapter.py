"""PostgreSQL database adapter implementation.

This adapter wraps psycopg3 so the sync commands can run against a
PostgreSQL copy of the WordPress tables.
"""

from pathlib import Path
from typing import Any

try:
    import psycopg
    from psycopg.rows import dict_row
    from psycopg_pool import ConnectionPool
except ImportError as e:
    raise ImportError(
        "PostgreSQL dependencies not installed. "
        "Install with: pip install '.[postgresql]'"
    ) from e

from .interface import DatabaseAdapter
from .types import ConnectionError as DBConnectionError
from .types import DatabaseError, Row, SchemaError
from .types import IntegrityError as DBIntegrityError


class PostgreSQLAdapter(DatabaseAdapter):
    """PostgreSQL database adapter.

    Holds one pooled connection for the lifetime of a command run.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 5432,
        database: str = "wordpress",
        user: str = "wordpress",
        password: str = "",
        pool_size: int = 1,
        pool_max_overflow: int = 2,
        table_prefix: str = "wp_",
        save_queries: bool = False,
    ):
        """Initialize PostgreSQL adapter.

        Args:
            host: PostgreSQL server host
            port: PostgreSQL server port
            database: Database name
            user: Database user
            password: Database password
            pool_size: Minimum number of connections in pool
            pool_max_overflow: Maximum overflow connections beyond pool_size
            table_prefix: WordPress table prefix
            save_queries: Keep a log of executed queries
        """
        super().__init__(table_prefix=table_prefix, save_queries=save_queries)
        self.host = host
        self.port = port
        self.database = database
        self.user = user
        self.password = password
        self.pool_size = pool_size
        self.pool_max_overflow = pool_max_overflow

        self._pool: ConnectionPool | None = None
        self._conn: Any = None  # psycopg.Connection
        self._schema_file = Path(__file__).parent / "schema_postgresql.sql"

    def connect(self) -> None:
        """Open the connection pool and check out a connection."""
        try:
            conninfo = (
                f"host={self.host} port={self.port} dbname={self.database} "
                f"user={self.user} password={self.password}"
            )
            self._pool = ConnectionPool(
                conninfo,
                min_size=self.pool_size,
                max_size=self.pool_size + self.pool_max_overflow,
                open=True,
            )
            self._conn = self._pool.getconn()
            self._conn.row_factory = dict_row
        except psycopg.Error as e:
            raise DBConnectionError(f"Failed to connect to PostgreSQL database: {e}") from e

    def close(self) -> None:
        """Return the connection and close the pool."""
        if self._conn and self._pool:
            self._pool.putconn(self._conn)
            self._conn = None

        if self._pool:
            self._pool.close()
            self._pool = None

    def _require_connection(self) -> Any:
        if not self._conn:
            raise DatabaseError("No active connection")
        return self._conn

    def commit(self) -> None:
        """Commit current transaction."""
        conn = self._require_connection()
        try:
            conn.commit()
        except psycopg.Error as e:
            raise DatabaseError(f"Failed to commit transaction: {e}") from e

    def rollback(self) -> None:
        """Rollback current transaction."""
        conn = self._require_connection()
        try:
            conn.rollback()
        except psycopg.Error as e:
            raise DatabaseError(f"Failed to rollback transaction: {e}") from e

    def create_schema(self) -> None:
        """Create the posts and postmeta tables from the SQL file."""
        conn = self._require_connection()

        if not self._schema_file.exists():
            raise SchemaError(f"Schema file not found: {self._schema_file}")

        try:
            schema_sql = self._schema_file.read_text().replace("{prefix}", self.table_prefix)
            with conn.cursor() as cursor:
                cursor.execute(schema_sql)
            conn.commit()
        except psycopg.Error as e:
            raise SchemaError(f"Failed to create schema: {e}") from e
        except OSError as e:
            raise SchemaError(f"Failed to read schema file: {e}") from e

    def get_tables(self) -> list[str]:
        """Get list of all tables in the public schema."""
        rows = self.fetchall(
            """
            SELECT table_name
            FROM information_schema.tables
            WHERE table_schema = 'public'
            AND table_type = 'BASE TABLE'
            ORDER BY table_name
            """
        )
        return [row["table_name"] for row in rows]

    def execute(self, query: str, params: tuple | None = None) -> Any:
        """Execute a query and return cursor.

        Queries are written with ? placeholders and converted to %s here.
        """
        conn = self._require_connection()
        self.log_query(query)

        try:
            pg_query = query.replace("?", "%s")
            cursor = conn.cursor()
            if params:
                cursor.execute(pg_query, params)
            else:
                cursor.execute(pg_query)
            return cursor
        except psycopg.errors.IntegrityError as e:
            raise DBIntegrityError(f"Integrity constraint violation: {e}") from e
        except psycopg.Error as e:
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
        row = self.fetchone(query, params)
        if row is None:
            return None
        return next(iter(row.values()))

    @property
    def placeholder(self) -> str:
        """'%s' for PostgreSQL (queries with ? are auto-converted)."""
        return "%s"

    def exists(self) -> bool:
        """Check that the posts table exists for the configured prefix."""
        return self.table("posts") in self.get_tables()

    def __repr__(self) -> str:
        status = "connected" if self._conn else "disconnected"
        return (
            f"PostgreSQLAdapter(host={self.host}, port={self.port}, "
            f"database={self.database}, prefix={self.table_prefix}, status={status})"
        )
