"""Datastore layer for WordPress-shaped posts and postmeta tables.

Example:
    >>> from store.db import DatabaseConfig, create_database
    >>>
    >>> config = DatabaseConfig(db_type="sqlite", db_path="data/wordpress.db")
    >>> with create_database(config) as adapter:
    ...     adapter.create_schema()
    ...     adapter.select_max("post_id", "postmeta")
"""

from .factory import DatabaseConfig, create_database, get_adapter
from .interface import DatabaseAdapter
from .types import (
    ConnectionError,
    DatabaseError,
    DatabaseType,
    IntegrityError,
    MissingTablesError,
    RecordId,
    Row,
    SchemaError,
)

__all__ = [
    # Factory
    "DatabaseConfig",
    "create_database",
    "get_adapter",
    # Interface
    "DatabaseAdapter",
    # Types and exceptions
    "DatabaseType",
    "DatabaseError",
    "ConnectionError",
    "IntegrityError",
    "SchemaError",
    "MissingTablesError",
    "RecordId",
    "Row",
]
