"""Abstract base class for publishing API clients."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ArticleResponse:
    """Decoded body of an article response.

    Attributes:
        data: Article fields (id, createdAt, modifiedAt, revision, ...)
        meta: Response metadata, if any
    """

    data: dict[str, Any] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def id(self) -> str | None:
        """Article ID, or None if the response carried none."""
        return self.data.get("id") or None

    @classmethod
    def from_json(cls, body: Any) -> "ArticleResponse":
        """Build a response from a decoded JSON body.

        Raises:
            APIError: If the body or its data/meta members are not JSON objects
        """
        if not isinstance(body, dict):
            raise APIError(f"Expected a JSON object, got {type(body).__name__}")

        data = body.get("data") or {}
        meta = body.get("meta") or {}
        if not isinstance(data, dict) or not isinstance(meta, dict):
            raise APIError("Response data and meta must be JSON objects")
        return cls(data=data, meta=meta)


class APIClient(ABC):
    """Base class for remote publishing API clients."""

    @abstractmethod
    def get_article(self, article_id: str) -> ArticleResponse | None:
        """Fetch the current state of a published article.

        Args:
            article_id: Remote article ID

        Returns:
            Article response, or None if the article does not exist

        Raises:
            APIError: If API request fails
            RateLimitError: If rate limit is exceeded
        """
        pass


class RemoteError(Exception):
    """Base exception for remote API errors."""

    pass


class APIError(RemoteError):
    """API request failed."""

    pass


class RateLimitError(RemoteError):
    """Rate limit exceeded."""

    pass
