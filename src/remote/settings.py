"""Apple News channel settings."""

from dataclasses import dataclass

from common.env import env


@dataclass(frozen=True)
class Settings:
    """Credentials and endpoint for one Apple News channel.

    Attributes:
        api_key: API key ID issued by News Publisher
        api_secret: Base64 encoded API secret
        channel_id: Channel the articles belong to
        api_url: API base URL
        timeout: HTTP timeout in seconds
    """

    api_key: str = ""
    api_secret: str = ""
    channel_id: str = ""
    api_url: str = "https://news-api.apple.com"
    timeout: float = 10.0

    @property
    def is_configured(self) -> bool:
        """True when key, secret and channel are all set."""
        return bool(self.api_key and self.api_secret and self.channel_id)


def fetch_settings() -> Settings:
    """Read channel settings from the environment."""
    return Settings(
        api_key=env.apple_news_api_key(),
        api_secret=env.apple_news_api_secret(),
        channel_id=env.apple_news_channel_id(),
        api_url=env.apple_news_api_url(),
        timeout=env.apple_news_api_timeout(),
    )
