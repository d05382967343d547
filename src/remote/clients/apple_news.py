"""Apple News API client for reading published article state."""

import base64
import binascii
import hashlib
import hmac
from datetime import datetime, timezone
from urllib.parse import quote

import requests

from common.logger import get_logger

from ..settings import Settings
from .base import APIClient, APIError, ArticleResponse, RateLimitError

logger = get_logger(__name__)


class AppleNewsClient(APIClient):
    """Client for the Apple News API.

    Every request is signed with the HHMAC scheme: an HMAC-SHA256 over
    method + URL + date (+ content type and body for writes), keyed with
    the base64 decoded channel secret.

    API Documentation: https://developer.apple.com/documentation/applenewsapi
    """

    DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

    def __init__(self, settings: Settings):
        """Initialize Apple News client.

        Args:
            settings: Channel credentials and endpoint
        """
        self.settings = settings
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": "apple-news-sync/1.0"})

    def _now(self) -> str:
        return datetime.now(timezone.utc).strftime(self.DATE_FORMAT)

    def sign(
        self,
        method: str,
        url: str,
        date: str,
        content_type: str = "",
        body: bytes = b"",
    ) -> str:
        """Build the Authorization header value for a request.

        Args:
            method: HTTP method
            url: Full request URL
            date: Request date in DATE_FORMAT
            content_type: Content type, for requests with a body
            body: Request body, for requests with a body

        Returns:
            HHMAC authorization header value

        Raises:
            APIError: If the API secret is not valid base64
        """
        try:
            key = base64.b64decode(self.settings.api_secret, validate=True)
        except (binascii.Error, ValueError) as e:
            raise APIError("Apple News API secret is not valid base64") from e

        canonical = f"{method.upper()}{url}{date}{content_type}".encode() + body
        digest = hmac.new(key, canonical, hashlib.sha256).digest()
        signature = base64.b64encode(digest).decode()
        return f"HHMAC; key={self.settings.api_key}; signature={signature}; date={date}"

    def get_article(self, article_id: str) -> ArticleResponse | None:
        """Fetch an article by its Apple News ID.

        Args:
            article_id: Apple News article ID

        Returns:
            Article response, or None if Apple News has no such article

        Raises:
            APIError: If API request fails
            RateLimitError: If rate limit is exceeded
        """
        url = f"{self.settings.api_url}/articles/{quote(article_id, safe='')}"
        headers = {"Authorization": self.sign("GET", url, self._now())}

        try:
            logger.debug(f"Fetching Apple News article {article_id}")
            response = self.session.get(url, headers=headers, timeout=self.settings.timeout)

            if response.status_code == 404:
                logger.debug(f"Apple News article {article_id} not found")
                return None

            response.raise_for_status()
            return ArticleResponse.from_json(response.json())

        except requests.exceptions.Timeout as e:
            raise APIError(f"Apple News API timeout for article {article_id}") from e
        except requests.exceptions.RequestException as e:
            if getattr(e, "response", None) is not None and e.response.status_code == 429:
                raise RateLimitError("Apple News API rate limit exceeded") from e
            raise APIError(f"Apple News API error: {e}") from e
        except ValueError as e:
            raise APIError(f"Apple News API returned invalid JSON for article {article_id}") from e
