"""Shared fixtures: a throwaway WordPress database in SQLite."""

import logging

import pytest

from store.db.sqlite_adapter import SQLiteAdapter


@pytest.fixture(autouse=True)
def restore_loggers():
    """setup_logging() rewires root and module loggers; put them back afterwards."""
    loggers = [logging.getLogger()] + [
        lg for lg in logging.Logger.manager.loggerDict.values() if isinstance(lg, logging.Logger)
    ]
    saved = [(lg, list(lg.handlers), lg.level) for lg in loggers]
    yield
    for lg, handlers, level in saved:
        lg.handlers[:] = handlers
        lg.setLevel(level)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "wordpress.db"


@pytest.fixture
def adapter(db_path):
    """Connected SQLite adapter with posts and postmeta tables."""
    adapter = SQLiteAdapter(db_path)
    adapter.connect()
    adapter.create_schema()
    yield adapter
    adapter.close()


@pytest.fixture
def add_post(adapter):
    """Insert a post and return its ID."""

    def _add_post(title: str = "Post", post_id: int | None = None, status: str = "publish") -> int:
        table = adapter.table("posts")
        if post_id is None:
            cursor = adapter.execute(
                f"INSERT INTO {table} (post_title, post_status) VALUES (?, ?)",
                (title, status),
            )
        else:
            cursor = adapter.execute(
                f"INSERT INTO {table} (ID, post_title, post_status) VALUES (?, ?, ?)",
                (post_id, title, status),
            )
        adapter.commit()
        return cursor.lastrowid

    return _add_post


@pytest.fixture
def add_meta(adapter):
    """Insert a postmeta row."""

    def _add_meta(post_id: int, key: str, value: str) -> None:
        adapter.execute(
            f"INSERT INTO {adapter.table('postmeta')} (post_id, meta_key, meta_value) "
            "VALUES (?, ?, ?)",
            (post_id, key, value),
        )
        adapter.commit()

    return _add_meta


@pytest.fixture
def count_meta(adapter):
    """Count postmeta rows, optionally for one key."""

    def _count_meta(key: str | None = None) -> int:
        table = adapter.table("postmeta")
        if key is None:
            return adapter.fetchscalar(f"SELECT COUNT(*) FROM {table}")
        return adapter.fetchscalar(f"SELECT COUNT(*) FROM {table} WHERE meta_key = ?", (key,))

    return _count_meta
