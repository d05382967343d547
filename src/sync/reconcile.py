"""Reconcile local Apple News postmeta with the Apple News API."""

from collections.abc import Callable, Mapping

from common.constants import POSTMETA_MAP
from common.logger import get_logger
from remote.actions import GetArticle
from remote.clients.base import RemoteError
from store.meta import is_empty, to_meta_value
from store.posts import Post

from .context import RunContext

logger = get_logger(__name__)


class ApiDataSync:
    """Per-post processor that copies API article fields into postmeta.

    The API is the source of truth. Remote values are compared in their
    stored (string) form, so a second pass over unchanged data writes
    nothing.

    Example:
        >>> sync = ApiDataSync(context)
        >>> run_bulk_task(context, predicate, sync, extra_args=(False,))
    """

    def __init__(
        self,
        context: RunContext,
        field_map: Mapping[str, str] = POSTMETA_MAP,
        action_factory: Callable[..., GetArticle] = GetArticle,
    ):
        """Initialize the processor.

        Args:
            context: Run context (adapter, meta accessor, settings, client)
            field_map: Local meta key -> remote article field
            action_factory: Builds the fetch action for a post
        """
        self.context = context
        self.field_map = field_map
        self.action_factory = action_factory

    def __call__(self, post: Post, dry_run: bool = False) -> int:
        """Reconcile one post.

        Args:
            post: Post to reconcile
            dry_run: Log intent only, never fetch or write

        Returns:
            Number of meta values updated
        """
        logger.info(f"Processing post {post.ID}...")

        if dry_run:
            logger.info("Skipping post due to dry run flag.")
            return 0

        action = self.action_factory(
            self.context.settings(),
            post.ID,
            self.context.meta,
            client=self.context.client(),
        )
        try:
            response = action.perform()
        except RemoteError as e:
            logger.debug(f"Fetch failed for post {post.ID}: {e}")
            response = None

        if response is None or not response.id:
            logger.warning(f"Could not get API data for post {post.ID}.")
            return 0

        updated = 0
        meta = self.context.meta
        for meta_key, data_key in self.field_map.items():
            remote_value = response.data.get(data_key)
            if remote_value is None:
                logger.warning(f"Key {data_key} not set for post {post.ID}. Skipping.")
                continue

            meta_value = meta.get(post.ID, meta_key)

            if is_empty(meta_value) and is_empty(remote_value):
                continue

            if meta_value == to_meta_value(remote_value):
                continue

            logger.info(
                f"Updating {meta_key} for {post.ID} from {meta_value} "
                f"to {to_meta_value(remote_value)}."
            )
            meta.set(post.ID, meta_key, remote_value)
            updated += 1

        return updated
