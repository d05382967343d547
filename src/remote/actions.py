"""Per-post actions against the Apple News API."""

from common.constants import API_ID_META_KEY
from common.logger import get_logger
from store.db import RecordId
from store.meta import MetaStore

from .clients.apple_news import AppleNewsClient
from .clients.base import APIClient, ArticleResponse
from .settings import Settings

logger = get_logger(__name__)


class GetArticle:
    """Fetch the Apple News article linked to a local post.

    Example:
        >>> action = GetArticle(settings, 42, meta)
        >>> response = action.perform()
        >>> response.id if response else None
    """

    def __init__(
        self,
        settings: Settings,
        post_id: RecordId,
        meta: MetaStore,
        client: APIClient | None = None,
    ):
        self.settings = settings
        self.post_id = post_id
        self.meta = meta
        self.client = client if client is not None else AppleNewsClient(settings)

    def perform(self) -> ArticleResponse | None:
        """Fetch the article.

        Returns:
            Article response, or None if the post was never published
            to Apple News or the article no longer exists

        Raises:
            APIError: If API request fails
            RateLimitError: If rate limit is exceeded
        """
        article_id = self.meta.get(self.post_id, API_ID_META_KEY)
        if not article_id:
            logger.debug(f"Post {self.post_id} has no Apple News ID")
            return None

        return self.client.get_article(article_id)
