"""Tests for the paginated batch scanner."""

from unittest.mock import patch

import pytest

from sync.context import RunContext
from sync.errors import InvalidComparatorError, UnsupportedTableError
from sync.predicate import Comparator, Relation, SearchPredicate, SearchTerm
from sync.scanner import BatchScanner, ScanCursor

API_ID = "apple_news_api_id"


@pytest.fixture
def context(adapter):
    return RunContext(adapter)


def api_id_predicate():
    return SearchPredicate("postmeta", [SearchTerm("meta_key", API_ID)])


class TestScanCursor:
    def test_probe_width(self):
        """Test one probe spans page_size * probe_multiplier IDs."""
        assert ScanCursor("posts", page_size=100, probe_multiplier=10).probe_width == 1000


class TestGetBatch:
    """Tests for BatchScanner.get_batch."""

    def test_returns_matching_ids(self, context, add_meta):
        """Test only matching IDs are returned, in ascending order."""
        add_meta(4, API_ID, "d")
        add_meta(2, API_ID, "b")
        add_meta(3, "_edit_lock", "x")

        assert BatchScanner(context).get_batch(api_id_predicate()) == [2, 4]

    def test_empty_table(self, context):
        """Test scanning an empty table returns nothing without error."""
        assert BatchScanner(context).get_batch(api_id_predicate()) == []

    def test_no_matching_rows(self, context, add_meta):
        """Test a table with no matches returns nothing without error."""
        for post_id in range(1, 30):
            add_meta(post_id, "_edit_lock", "x")

        assert list(BatchScanner(context, page_size=2).scan(api_id_predicate())) == []

    def test_respects_min_id(self, context, add_meta):
        """Test IDs below min_id are skipped."""
        for post_id in (1, 2, 3):
            add_meta(post_id, API_ID, "x")

        assert BatchScanner(context).get_batch(api_id_predicate(), min_id=2) == [2, 3]

    def test_page_size_limits_rows(self, context, add_meta):
        """Test a page never exceeds page_size IDs."""
        for post_id in range(1, 8):
            add_meta(post_id, API_ID, "x")

        assert BatchScanner(context, page_size=3).get_batch(api_id_predicate()) == [1, 2, 3]

    def test_unsupported_table(self, context):
        """Test scanning another table fails."""
        predicate = SearchPredicate("users", [SearchTerm("ID", 1)])
        with pytest.raises(UnsupportedTableError):
            BatchScanner(context).get_batch(predicate)

    def test_invalid_comparator_fails_before_any_query(self, context, adapter):
        """Test validation happens before the database is touched."""
        predicate = SearchPredicate("postmeta", [SearchTerm("meta_key", API_ID, "<>")])
        scanner = BatchScanner(context)

        with patch.object(adapter, "execute", wraps=adapter.execute) as execute:
            with pytest.raises(InvalidComparatorError):
                scanner.get_batch(predicate)
            with pytest.raises(InvalidComparatorError):
                scanner.scan(predicate)

        execute.assert_not_called()

    def test_like_treats_wildcards_literally(self, context, add_meta):
        """Test % and _ in a LIKE value only match themselves."""
        add_meta(1, "note", "100% sure")
        add_meta(2, "note", "1000 sure")
        add_meta(3, "note", "a_b")
        add_meta(4, "note", "axb")
        scanner = BatchScanner(context)

        percent = SearchPredicate("postmeta", [SearchTerm("meta_value", "100%", Comparator.LIKE)])
        underscore = SearchPredicate("postmeta", [SearchTerm("meta_value", "a_b", Comparator.LIKE)])

        assert scanner.get_batch(percent) == [1]
        assert scanner.get_batch(underscore) == [3]

    def test_or_relation(self, context, add_meta):
        """Test OR matches rows satisfying either term."""
        add_meta(1, API_ID, "x")
        add_meta(2, "apple_news_api_share_url", "y")
        add_meta(3, "_edit_lock", "z")
        predicate = SearchPredicate(
            "postmeta",
            [
                SearchTerm("meta_key", API_ID),
                SearchTerm("meta_key", "apple_news_api_share_url"),
            ],
            relation=Relation.OR,
        )

        assert BatchScanner(context).get_batch(predicate) == [1, 2]

    def test_posts_table(self, context, add_post):
        """Test scanning the posts table by ID."""
        add_post("Draft", status="draft")
        add_post("Live")
        add_post("Also live")
        predicate = SearchPredicate("posts", [SearchTerm("post_status", "publish")])

        assert BatchScanner(context).get_batch(predicate) == [2, 3]


class TestScan:
    """Tests for BatchScanner.scan pagination."""

    def test_sparse_matches_across_probes(self, context, add_meta):
        """Test empty probe windows are stepped over until a match is found."""
        for post_id in (3, 50, 51, 52, 95):
            add_meta(post_id, API_ID, f"id-{post_id}")
        scanner = BatchScanner(context, page_size=2, probe_multiplier=10)

        assert list(scanner.scan(api_id_predicate())) == [[3], [50, 51], [52], [95]]

    def test_finds_row_with_max_id(self, context, add_meta):
        """Test a page starting exactly at the largest ID is still scanned."""
        for post_id in (1, 2, 3):
            add_meta(post_id, API_ID, "x")
        scanner = BatchScanner(context, page_size=2, probe_multiplier=1)

        assert list(scanner.scan(api_id_predicate())) == [[1, 2], [3]]

    def test_start_id(self, context, add_meta):
        """Test scanning starts at start_id."""
        for post_id in (5, 15, 25):
            add_meta(post_id, API_ID, "x")

        assert list(BatchScanner(context).scan(api_id_predicate(), start_id=10)) == [[15, 25]]

    def test_max_id_computed_once(self, context, adapter, add_meta):
        """Test the table maximum is queried once per run, not per probe."""
        for post_id in (3, 50, 95, 400):
            add_meta(post_id, API_ID, "x")
        scanner = BatchScanner(context, page_size=1, probe_multiplier=2)

        with patch.object(adapter, "select_max", wraps=adapter.select_max) as select_max:
            pages = list(scanner.scan(api_id_predicate()))
            list(scanner.scan(api_id_predicate()))

        assert pages == [[3], [50], [95], [400]]
        select_max.assert_called_once_with("post_id", "postmeta")

    def test_max_id_is_per_table(self, context, adapter, add_meta, add_post):
        """Test each table gets its own maximum."""
        add_post(post_id=10)
        add_meta(3, API_ID, "x")

        assert context.max_id("posts") == 10
        assert context.max_id("postmeta") == 3
