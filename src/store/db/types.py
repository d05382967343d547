"""Types and exceptions shared by the WordPress datastore adapters."""

from enum import Enum
from typing import Any

# A row as returned by fetchone()/fetchall(): column name -> value
Row = dict[str, Any]

# wp_posts.ID and wp_postmeta.post_id
RecordId = int

# Unprefixed table name, e.g. "posts" for "wp_posts"
TablePartial = str

# Tables every sync command needs
CORE_TABLES: tuple[TablePartial, ...] = ("posts", "postmeta")


class DatabaseType(str, Enum):
    """Backends a WordPress copy can live in."""

    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


class DatabaseError(Exception):
    """Base exception for datastore failures."""


class ConnectionError(DatabaseError):
    """The database could not be opened."""


class IntegrityError(DatabaseError):
    """A write violated a key or NOT NULL constraint."""


class SchemaError(DatabaseError):
    """The schema file could not be read or applied."""


class MissingTablesError(SchemaError):
    """The database does not hold the WordPress core tables."""

    def __init__(self, tables: list[str]):
        self.tables = tables
        super().__init__(f"Database is missing tables: {', '.join(tables)}")
