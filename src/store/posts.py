"""Read access to WordPress posts."""

from dataclasses import dataclass, field

from .db import DatabaseAdapter, RecordId, Row


@dataclass
class Post:
    """A row of the posts table.

    Only the columns the sync commands log or inspect are promoted to
    attributes; the full row is kept in `raw`.
    """

    ID: RecordId
    post_title: str = ""
    post_status: str = ""
    post_type: str = ""
    post_name: str = ""
    post_date: str | None = None
    post_modified: str | None = None
    raw: Row = field(default_factory=dict, repr=False)

    @classmethod
    def from_row(cls, row: Row) -> "Post":
        # PostgreSQL folds the unquoted ID column to lowercase
        post_id = row.get("ID", row.get("id"))
        return cls(
            ID=int(post_id),
            post_title=row.get("post_title") or "",
            post_status=row.get("post_status") or "",
            post_type=row.get("post_type") or "",
            post_name=row.get("post_name") or "",
            post_date=_as_text(row.get("post_date")),
            post_modified=_as_text(row.get("post_modified")),
            raw=row,
        )


def _as_text(value) -> str | None:
    return str(value) if value is not None else None


def get_post(adapter: DatabaseAdapter, post_id: RecordId) -> Post | None:
    """Load a single post by ID.

    Args:
        adapter: Connected database adapter
        post_id: Post ID

    Returns:
        The post, or None if no row has that ID
    """
    row = adapter.fetchone(f"SELECT * FROM {adapter.table('posts')} WHERE ID = ?", (post_id,))
    if row is None:
        return None
    return Post.from_row(row)
