"""Environment configuration interface for apple-news-sync.

All environment variable access goes through this module. Values may also
come from a `.env` file in the working directory.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from common.constants import DATA_DIR

# Load environment variables from .env file if it exists
load_dotenv()


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def database_type() -> str:
        """Get the database type (sqlite or postgresql).

        Returns:
            Database type, defaults to 'sqlite'
        """
        return os.getenv("DATABASE_TYPE", "sqlite")

    @staticmethod
    def database_path() -> Path:
        """Get the SQLite database file path.

        Returns:
            Path to SQLite database file, defaults to ./data/wordpress.db
        """
        return Path(os.getenv("DATABASE_PATH", str(DATA_DIR / "wordpress.db")))

    @staticmethod
    def postgres_host() -> str:
        """Get PostgreSQL host, defaults to 'localhost'."""
        return os.getenv("POSTGRES_HOST", "localhost")

    @staticmethod
    def postgres_port() -> int:
        """Get PostgreSQL port, defaults to 5432."""
        return int(os.getenv("POSTGRES_PORT", "5432"))

    @staticmethod
    def postgres_database() -> str:
        """Get PostgreSQL database name, defaults to 'wordpress'."""
        return os.getenv("POSTGRES_DB", "wordpress")

    @staticmethod
    def postgres_user() -> str:
        """Get PostgreSQL user, defaults to 'wordpress'."""
        return os.getenv("POSTGRES_USER", "wordpress")

    @staticmethod
    def postgres_password() -> str:
        """Get PostgreSQL password, defaults to empty string."""
        return os.getenv("POSTGRES_PASSWORD", "")

    @staticmethod
    def postgres_pool_size() -> int:
        return int(os.getenv("POSTGRES_POOL_SIZE", "1"))

    @staticmethod
    def postgres_pool_max_overflow() -> int:
        return int(os.getenv("POSTGRES_POOL_MAX_OVERFLOW", "2"))

    @staticmethod
    def table_prefix() -> str:
        """Get the WordPress table prefix.

        Returns:
            Table prefix, defaults to 'wp_'
        """
        return os.getenv("TABLE_PREFIX", "wp_")

    @staticmethod
    def save_queries() -> bool:
        """Whether adapters keep a log of executed queries (SAVEQUERIES)."""
        return _flag("SAVEQUERIES")

    @staticmethod
    def apple_news_api_key() -> str:
        return os.getenv("APPLE_NEWS_API_KEY", "")

    @staticmethod
    def apple_news_api_secret() -> str:
        """Get the API secret (base64 encoded, as issued by News Publisher)."""
        return os.getenv("APPLE_NEWS_API_SECRET", "")

    @staticmethod
    def apple_news_channel_id() -> str:
        return os.getenv("APPLE_NEWS_CHANNEL_ID", "")

    @staticmethod
    def apple_news_api_url() -> str:
        """Get the Apple News API base URL.

        Returns:
            Base URL without trailing slash, defaults to https://news-api.apple.com
        """
        return os.getenv("APPLE_NEWS_API_URL", "https://news-api.apple.com").rstrip("/")

    @staticmethod
    def apple_news_api_timeout() -> float:
        """Get the HTTP timeout in seconds, defaults to 10."""
        return float(os.getenv("APPLE_NEWS_API_TIMEOUT", "10"))


# Singleton instance for convenient access
env = Environment()
