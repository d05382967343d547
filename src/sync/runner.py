"""Run a processor over every post matched by a search predicate."""

from collections.abc import Sequence
from typing import Any, Protocol

from common.logger import get_logger
from store.db import RecordId
from store.posts import Post, get_post

from .context import RunContext
from .errors import InvalidCallbackError
from .predicate import SearchPredicate
from .scanner import BatchScanner

logger = get_logger(__name__)


class RecordProcessor(Protocol):
    """Called once per matched post with the task's extra arguments."""

    def __call__(self, post: Post, *args: Any) -> Any: ...


def run_bulk_task(
    context: RunContext,
    predicate: SearchPredicate,
    processor: RecordProcessor,
    start_id: RecordId = 1,
    extra_args: Sequence[Any] = (),
    scanner: BatchScanner | None = None,
) -> int:
    """Process every post matching a predicate, one page at a time.

    After each page the transaction is committed and the host caches are
    flushed, then the running total is logged.

    Args:
        context: Run context holding the adapter and per-run caches
        predicate: Which rows to visit
        processor: Called as processor(post, *extra_args)
        start_id: Smallest ID to visit
        extra_args: Extra positional arguments for the processor
        scanner: Scanner to use (defaults to a BatchScanner over context)

    Returns:
        Number of posts processed

    Raises:
        InvalidCallbackError: If processor is not callable
        ConfigurationError: If the predicate is invalid
    """
    if not callable(processor):
        raise InvalidCallbackError("You specified an invalid callback.")

    scanner = scanner or BatchScanner(context)

    processed = 0
    for ids in scanner.scan(predicate, start_id):
        for post_id in ids:
            post = get_post(context.adapter, post_id)
            if post is None:
                logger.warning(f"Post {post_id} does not exist. Skipping.")
                continue

            processor(post, *extra_args)
            processed += 1

        context.adapter.commit()
        context.flush_caches()
        logger.info(f"Processed {processed} posts.")

    return processed
