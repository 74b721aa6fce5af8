"""Tests for settings module."""

from unittest.mock import patch

from repopeek.settings import Settings, get_settings


class TestSettings:
    """Test Settings class configuration."""

    def test_settings_defaults(self):
        """Settings has correct default values."""
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.github_api_url == "https://api.github.com"
            assert settings.user_agent.startswith("repopeek/")
            assert settings.request_timeout == 5.0
            assert settings.max_listed_files == 10
            assert settings.host == "127.0.0.1"
            assert settings.port == 8000

    def test_settings_loads_from_env(self):
        """Settings loads prefixed values from environment."""
        with patch.dict(
            "os.environ",
            {
                "REPOPEEK_GITHUB_API_URL": "http://localhost:9999",
                "REPOPEEK_REQUEST_TIMEOUT": "1.5",
                "REPOPEEK_PORT": "9000",
            },
            clear=True,
        ):
            settings = Settings(_env_file=None)
            assert settings.github_api_url == "http://localhost:9999"
            assert settings.request_timeout == 1.5
            assert settings.port == 9000

    def test_unprefixed_env_ignored(self):
        """Unprefixed variables do not leak into settings."""
        with patch.dict("os.environ", {"PORT": "1234"}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.port == 8000


class TestGetSettings:
    """Test get_settings caching."""

    def test_get_settings_returns_same_instance(self):
        """get_settings returns cached instance."""
        get_settings.cache_clear()
        s1 = get_settings()
        s2 = get_settings()
        assert s1 is s2

    def test_cache_clear_creates_new_instance(self):
        """Clearing cache creates new Settings."""
        get_settings.cache_clear()
        s1 = get_settings()
        get_settings.cache_clear()
        s2 = get_settings()
        assert s1 is not s2
