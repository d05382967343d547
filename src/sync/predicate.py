"""Search predicates over the posts and postmeta tables.

A predicate is a list of column/operator/value terms joined by a single
relation. Column names end up in SQL text, so every column is checked
against the allow-list of its table before a query is built; values are
always passed as parameters.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import (
    InvalidColumnError,
    InvalidComparatorError,
    InvalidRelationError,
    MissingSearchTermsError,
    MissingValueError,
    UnsupportedTableError,
)

# Table partial -> identifier column
ID_COLUMNS: dict[str, str] = {
    "posts": "ID",
    "postmeta": "post_id",
}

# Table partial -> columns a search term may reference
VALID_COLUMNS: dict[str, frozenset[str]] = {
    "posts": frozenset(
        {
            "ID",
            "post_author",
            "post_date",
            "post_date_gmt",
            "post_content",
            "post_title",
            "post_excerpt",
            "post_status",
            "comment_status",
            "ping_status",
            "post_password",
            "post_name",
            "to_ping",
            "pinged",
            "post_modified",
            "post_modified_gmt",
            "post_content_filtered",
            "post_parent",
            "guid",
            "menu_order",
            "post_type",
            "post_mime_type",
            "comment_count",
        }
    ),
    "postmeta": frozenset({"meta_id", "post_id", "meta_key", "meta_value"}),
}


class Comparator(str, Enum):
    """Supported comparison operators."""

    EQUALS = "="
    NOT_EQUALS = "!="
    LIKE = "LIKE"


class Relation(str, Enum):
    """How terms of a predicate are combined."""

    AND = "AND"
    OR = "OR"


def get_id_column(table: str) -> str:
    """Get the identifier column for a table partial.

    Raises:
        UnsupportedTableError: If the table is not posts or postmeta
    """
    try:
        return ID_COLUMNS[table]
    except KeyError:
        raise UnsupportedTableError(f"You requested an unsupported table: {table!r}.") from None


def validate_column(table: str, column: str) -> bool:
    """Check that a column exists in the given table.

    Returns:
        True if the column is on the table's allow-list, False otherwise
        (including for unsupported tables)
    """
    return column in VALID_COLUMNS.get(table, frozenset())


@dataclass
class SearchTerm:
    """One condition of a predicate.

    Attributes:
        column: Column name (validated against the table allow-list)
        value: Value to compare against; None is rejected
        compare: Comparison operator, as a Comparator or its string value
    """

    column: str
    value: Any
    compare: Comparator | str = Comparator.EQUALS


@dataclass
class SearchPredicate:
    """A set of search terms over one table.

    Example:
        >>> predicate = SearchPredicate(
        ...     table="postmeta",
        ...     terms=[SearchTerm("meta_key", "apple_news_api_id")],
        ... )
        >>> predicate.to_sql(DatabaseAdapter.esc_like)
        ('meta_key = ?', ('apple_news_api_id',))
    """

    table: str
    terms: list[SearchTerm] = field(default_factory=list)
    relation: Relation | str = Relation.AND

    @property
    def id_column(self) -> str:
        return get_id_column(self.table)

    def validate(self) -> None:
        """Check table, relation and every term.

        Raises:
            ConfigurationError: The matching subclass for the first problem
        """
        get_id_column(self.table)

        if not self.terms:
            raise MissingSearchTermsError("You must specify search terms.")

        _coerce(Relation, self.relation, InvalidRelationError, "You specified an invalid relation")

        for term in self.terms:
            if not term.column or not validate_column(self.table, term.column):
                raise InvalidColumnError(
                    f"You specified an invalid search column: {term.column!r}."
                )
            if term.value is None:
                raise MissingValueError(
                    f"You did not specify a value to compare {term.column} against."
                )
            _coerce(
                Comparator,
                term.compare or Comparator.EQUALS,
                InvalidComparatorError,
                "You specified an invalid comparator",
            )

    def to_sql(self, esc_like) -> tuple[str, tuple]:
        """Validate and compile the terms into a WHERE fragment.

        Args:
            esc_like: Function escaping LIKE wildcards in a value

        Returns:
            Tuple of (fragment with '?' placeholders, parameters)

        Raises:
            ConfigurationError: If the predicate is invalid
        """
        self.validate()
        relation = Relation(self.relation)

        directives = []
        params = []
        for term in self.terms:
            compare = Comparator(term.compare or Comparator.EQUALS)
            value = term.value
            if compare is Comparator.LIKE:
                directives.append(f"{term.column} LIKE ? ESCAPE '\\'")
                value = f"%{esc_like(str(value))}%"
            else:
                directives.append(f"{term.column} {compare.value} ?")
            params.append(value)

        return f" {relation.value} ".join(directives), tuple(params)


def _coerce(enum_cls, value, error_cls, message):
    try:
        return enum_cls(value)
    except ValueError:
        raise error_cls(f"{message}: {value!r}.") from None
