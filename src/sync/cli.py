"""CLI for Apple News maintenance commands."""

import argparse
import sys

from common.constants import API_ID_META_KEY
from common.logger import error, get_logger, setup_logging, success
from store.db import DatabaseError, get_adapter
from store.db.sqlite_adapter import SQLiteAdapter

from .context import RunContext
from .errors import ConfigurationError, MissingSettingsError
from .predicate import Comparator, SearchPredicate, SearchTerm
from .reconcile import ApiDataSync
from .runner import run_bulk_task

logger = get_logger(__name__)


def cmd_sync_api_data(args) -> int:
    """Update local postmeta for each post with Apple News API values.

    Returns:
        Number of posts processed
    """
    dry_run = bool(args.dry_run)

    adapter = get_adapter(args.database)
    # Connecting would create an empty SQLite file
    if isinstance(adapter, SQLiteAdapter) and not adapter.exists():
        raise ConfigurationError(f"Database not found: {adapter.db_path}")

    with adapter:
        adapter.require_tables()

        context = RunContext(adapter)

        if not dry_run and not context.settings().is_configured:
            raise MissingSettingsError(
                "Apple News API credentials are not configured. Set APPLE_NEWS_API_KEY, "
                "APPLE_NEWS_API_SECRET and APPLE_NEWS_CHANNEL_ID."
            )

        logger.info("Updating local postmeta with values from Apple News.")
        predicate = SearchPredicate(
            table="postmeta",
            terms=[SearchTerm("meta_key", API_ID_META_KEY, Comparator.EQUALS)],
        )
        return run_bulk_task(
            context,
            predicate,
            ApiDataSync(context),
            start_id=args.start_id,
            extra_args=(dry_run,),
        )


def main(argv: list[str] | None = None):
    """Main entry point for the apple-news CLI."""
    parser = argparse.ArgumentParser(
        prog="apple-news",
        description="Maintenance commands for Publish to Apple News",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO, or LOG_LEVEL if set)",
    )
    parser.add_argument("--log-file", help="Also write log lines to this file")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    sync_parser = subparsers.add_parser(
        "sync-api-data",
        help="Update local postmeta with values from the Apple News API",
        description=(
            "Update local postmeta for each post linked to Apple News.\n\n"
            "Examples:\n"
            "  apple-news sync-api-data\n"
            "  apple-news sync-api-data --dry-run\n\n"
            "Database backend is controlled by DATABASE_TYPE environment variable:\n"
            "  - SQLite (DATABASE_TYPE=sqlite): --database is a file path\n"
            "  - PostgreSQL (DATABASE_TYPE=postgresql): --database is a database name\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sync_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Do not modify anything, but print what would be done",
    )
    sync_parser.add_argument(
        "--database",
        "-d",
        help="Database file path (SQLite) or database name (PostgreSQL); defaults to env",
    )
    sync_parser.add_argument(
        "--start-id",
        type=int,
        default=1,
        help="Smallest post ID to process (default: 1)",
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.command == "sync-api-data":
        try:
            processed = cmd_sync_api_data(args)
        except (ConfigurationError, DatabaseError) as e:
            error(str(e))
            sys.exit(1)
        success(f"Done. Processed {processed} posts.")


if __name__ == "__main__":
    main()
