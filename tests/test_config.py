"""Tests for client configuration."""

import pytest

from odos_sor.config import ClientConfig, RetryConfig, get_settings


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_defaults(self, monkeypatch):
        """Test default endpoint and transport settings."""
        monkeypatch.delenv("ODOS_BASE_URL", raising=False)
        config = ClientConfig()

        assert config.base_url == "https://api.odos.xyz"
        assert config.quote_url == "https://api.odos.xyz/sor/quote/v2"
        assert config.assemble_url == "https://api.odos.xyz/sor/assemble"
        assert config.retry == RetryConfig()

    def test_base_url_override(self):
        """Test endpoint URLs follow base_url (trailing slash ignored)."""
        config = ClientConfig(base_url="http://localhost:8080/")

        assert config.quote_url == "http://localhost:8080/sor/quote/v2"
        assert config.assemble_url == "http://localhost:8080/sor/assemble"

    def test_environment_variables(self, monkeypatch):
        """Test settings are read from ODOS_* variables."""
        monkeypatch.setenv("ODOS_BASE_URL", "https://odos.example.com")
        monkeypatch.setenv("ODOS_API_KEY", "k-123")
        monkeypatch.setenv("ODOS_TIMEOUT", "5")
        monkeypatch.setenv("ODOS_RETRY__MAX_RETRIES", "7")
        monkeypatch.setenv("ODOS_RETRY__RETRY_SERVER_ERRORS", "false")

        config = ClientConfig()

        assert config.base_url == "https://odos.example.com"
        assert config.api_key == "k-123"
        assert config.timeout == 5.0
        assert config.retry.max_retries == 7
        assert config.retry.retry_server_errors is False

    def test_invalid_timeout_rejected(self):
        """Test non-positive timeouts fail validation."""
        with pytest.raises(ValueError):
            ClientConfig(timeout=0)

    def test_safe_dict_redacts_key(self):
        """Test the API key never appears in the safe dict."""
        data = ClientConfig(api_key="super-secret").get_safe_dict()

        assert data["api_key"] == "***"
        assert "super-secret" not in str(data)

    def test_get_settings_cached(self):
        """Test get_settings returns one shared instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestRetryConfig:
    """Tests for RetryConfig presets and backoff."""

    def test_no_retries(self):
        assert RetryConfig.no_retries().max_retries == 0

    def test_conservative(self):
        retry = RetryConfig.conservative()

        assert retry.max_retries == 2
        assert retry.retry_server_errors is False
        assert retry.retry_rate_limits is True

    def test_backoff_is_capped(self):
        retry = RetryConfig(initial_backoff=1.0, max_backoff=3.0)

        assert [retry.backoff(n) for n in range(4)] == [1.0, 2.0, 3.0, 3.0]
