"""Post metadata accessor with a per-post object cache.

Values are stored the way WordPress stores scalar postmeta: as strings.
"""

import json
from typing import Any

from common.logger import get_logger

from .db import DatabaseAdapter, RecordId

logger = get_logger(__name__)


def to_meta_value(value: Any) -> str:
    """Serialize a value to its stored postmeta form.

    Args:
        value: Any JSON-compatible value

    Returns:
        String as WordPress would store it

    Example:
        >>> to_meta_value(True), to_meta_value(False), to_meta_value(3)
        ('1', '', '3')
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, sort_keys=True)


def is_empty(value: Any) -> bool:
    """Emptiness as WordPress code checks it ("0" counts as empty)."""
    return not value or value == "0"


class MetaStore:
    """Get and set postmeta values for posts.

    All meta rows of a post are loaded with one query on first access and
    cached until the post is written or the cache is flushed.
    """

    def __init__(self, adapter: DatabaseAdapter):
        self.adapter = adapter
        self._cache: dict[RecordId, dict[str, list[str]]] = {}

    def _load(self, post_id: RecordId) -> dict[str, list[str]]:
        if post_id not in self._cache:
            rows = self.adapter.fetchall(
                f"SELECT meta_key, meta_value FROM {self.adapter.table('postmeta')} "
                "WHERE post_id = ? ORDER BY meta_id ASC",
                (post_id,),
            )
            values: dict[str, list[str]] = {}
            for row in rows:
                values.setdefault(row["meta_key"], []).append(row["meta_value"] or "")
            self._cache[post_id] = values
        return self._cache[post_id]

    def get(self, post_id: RecordId, key: str) -> str:
        """Get the first value stored under a key, or "" if there is none."""
        values = self._load(post_id).get(key)
        return values[0] if values else ""

    def set(self, post_id: RecordId, key: str, value: Any) -> None:
        """Store a value, updating existing rows for the key or inserting one.

        Args:
            post_id: Post ID
            key: Meta key
            value: Value to store; serialized with to_meta_value()
        """
        stored = to_meta_value(value)
        table = self.adapter.table("postmeta")

        existing = self.adapter.fetchscalar(
            f"SELECT COUNT(*) FROM {table} WHERE post_id = ? AND meta_key = ?",
            (post_id, key),
        )
        if existing:
            self.adapter.execute(
                f"UPDATE {table} SET meta_value = ? WHERE post_id = ? AND meta_key = ?",
                (stored, post_id, key),
            )
        else:
            self.adapter.execute(
                f"INSERT INTO {table} (post_id, meta_key, meta_value) VALUES (?, ?, ?)",
                (post_id, key, stored),
            )
        logger.debug(f"Stored {key}={stored!r} for post {post_id}")

        self._cache.pop(post_id, None)

    def flush(self) -> None:
        """Drop every cached post."""
        self._cache.clear()
