"""Tests for environment configuration interface."""

from pathlib import Path

from common.env import Environment, env


class TestEnvironment:
    """Tests for Environment class."""

    def test_database_type_default(self, monkeypatch):
        """Test database_type returns default value."""
        monkeypatch.delenv("DATABASE_TYPE", raising=False)
        assert Environment.database_type() == "sqlite"

    def test_database_type_from_env(self, monkeypatch):
        """Test database_type reads from environment."""
        monkeypatch.setenv("DATABASE_TYPE", "postgresql")
        assert Environment.database_type() == "postgresql"

    def test_database_path_default(self, monkeypatch):
        """Test database_path returns default value."""
        monkeypatch.delenv("DATABASE_PATH", raising=False)
        assert Environment.database_path() == Path("data/wordpress.db")

    def test_database_path_from_env(self, monkeypatch):
        """Test database_path reads from environment."""
        monkeypatch.setenv("DATABASE_PATH", "/tmp/site.db")
        assert str(Environment.database_path()) == "/tmp/site.db"

    def test_postgres_defaults(self, monkeypatch):
        """Test PostgreSQL settings fall back to defaults."""
        for name in ("POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB", "POSTGRES_USER"):
            monkeypatch.delenv(name, raising=False)
        assert Environment.postgres_host() == "localhost"
        assert Environment.postgres_port() == 5432
        assert Environment.postgres_database() == "wordpress"
        assert Environment.postgres_user() == "wordpress"

    def test_postgres_port_from_env(self, monkeypatch):
        """Test postgres_port is parsed as an integer."""
        monkeypatch.setenv("POSTGRES_PORT", "5433")
        assert Environment.postgres_port() == 5433

    def test_table_prefix_default(self, monkeypatch):
        """Test table_prefix defaults to the WordPress default."""
        monkeypatch.delenv("TABLE_PREFIX", raising=False)
        assert Environment.table_prefix() == "wp_"

    def test_table_prefix_from_env(self, monkeypatch):
        """Test table_prefix reads from environment."""
        monkeypatch.setenv("TABLE_PREFIX", "site2_")
        assert Environment.table_prefix() == "site2_"

    def test_save_queries_flag(self, monkeypatch):
        """Test SAVEQUERIES accepts common truthy spellings."""
        monkeypatch.delenv("SAVEQUERIES", raising=False)
        assert Environment.save_queries() is False

        for value in ("1", "true", "YES", "on"):
            monkeypatch.setenv("SAVEQUERIES", value)
            assert Environment.save_queries() is True

        monkeypatch.setenv("SAVEQUERIES", "0")
        assert Environment.save_queries() is False

    def test_apple_news_credentials(self, monkeypatch):
        """Test Apple News credentials read from environment."""
        monkeypatch.setenv("APPLE_NEWS_API_KEY", "key-id")
        monkeypatch.setenv("APPLE_NEWS_API_SECRET", "c2VjcmV0")
        monkeypatch.setenv("APPLE_NEWS_CHANNEL_ID", "channel-id")
        assert Environment.apple_news_api_key() == "key-id"
        assert Environment.apple_news_api_secret() == "c2VjcmV0"
        assert Environment.apple_news_channel_id() == "channel-id"

    def test_apple_news_api_url_strips_trailing_slash(self, monkeypatch):
        """Test the API base URL never ends with a slash."""
        monkeypatch.setenv("APPLE_NEWS_API_URL", "https://news-api.example.test/")
        assert Environment.apple_news_api_url() == "https://news-api.example.test"

    def test_apple_news_api_timeout_default(self, monkeypatch):
        """Test the HTTP timeout default."""
        monkeypatch.delenv("APPLE_NEWS_API_TIMEOUT", raising=False)
        assert Environment.apple_news_api_timeout() == 10.0


class TestEnvSingleton:
    """Tests for env singleton instance."""

    def test_env_is_environment_instance(self):
        """Test that env is an instance of Environment."""
        assert isinstance(env, Environment)
