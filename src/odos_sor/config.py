"""Client configuration using pydantic-settings.

Values are read from ``ODOS_*`` environment variables (and a local ``.env``
file). Nested retry settings use a double underscore, e.g.
``ODOS_RETRY__MAX_RETRIES=5``.
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from odos_sor import __version__

DEFAULT_BASE_URL = "https://api.odos.xyz"
QUOTE_PATH = "/sor/quote/v2"
ASSEMBLE_PATH = "/sor/assemble"


class RetryConfig(BaseModel):
    """Retry policy applied by the HTTP transport."""

    max_retries: int = Field(default=3, ge=0, description="Retries after the first attempt")
    initial_backoff: float = Field(default=0.1, ge=0, description="First retry delay in seconds")
    max_backoff: float = Field(default=5.0, ge=0, description="Upper bound for any retry delay")
    retry_server_errors: bool = Field(default=True, description="Retry on HTTP 5xx responses")
    retry_rate_limits: bool = Field(default=True, description="Retry on HTTP 429 responses")

    @classmethod
    def no_retries(cls) -> "RetryConfig":
        """Single attempt, failures surface immediately."""
        return cls(max_retries=0)

    @classmethod
    def conservative(cls) -> "RetryConfig":
        """Few slow retries, only for network failures and rate limits."""
        return cls(
            max_retries=2,
            initial_backoff=0.5,
            max_backoff=10.0,
            retry_server_errors=False,
        )

    def backoff(self, attempt: int) -> float:
        """Delay before retry number ``attempt`` (0-based)."""
        return min(self.initial_backoff * (2 ** attempt), self.max_backoff)


class ClientConfig(BaseSettings):
    """Odos API client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ODOS_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Endpoint
    # ======================
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Odos API base URL")
    api_key: Optional[str] = Field(default=None, description="Odos API key (optional)")

    # ======================
    # Transport
    # ======================
    timeout: float = Field(default=30.0, gt=0, description="Total request timeout in seconds")
    connect_timeout: float = Field(default=10.0, gt=0, description="Connect timeout in seconds")
    max_connections: int = Field(default=100, gt=0, description="Connection pool size")
    max_keepalive_connections: int = Field(default=20, ge=0, description="Idle connections kept")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    ca_bundle: Optional[str] = Field(default=None, description="Path to a custom CA bundle")
    user_agent: str = Field(default=f"odos-sor/{__version__}", description="User-Agent header")

    # ======================
    # Retries
    # ======================
    retry: RetryConfig = Field(default_factory=RetryConfig)

    @property
    def quote_url(self) -> str:
        """Full URL of the SOR V2 quote endpoint."""
        return f"{self.base_url.rstrip('/')}{QUOTE_PATH}"

    @property
    def assemble_url(self) -> str:
        """Full URL of the SOR assemble endpoint."""
        return f"{self.base_url.rstrip('/')}{ASSEMBLE_PATH}"

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "base_url": self.base_url,
            "api_key": "***" if self.api_key else "(not set)",
            "timeout": self.timeout,
            "connect_timeout": self.connect_timeout,
            "max_connections": self.max_connections,
            "verify_ssl": self.verify_ssl,
            "ca_bundle": self.ca_bundle or "(default)",
            "retry": self.retry.model_dump(),
        }


@lru_cache
def get_settings() -> ClientConfig:
    """Get cached settings instance."""
    return ClientConfig()


# Full endpoint URLs for the public API
QUOTE_URL = f"{DEFAULT_BASE_URL}{QUOTE_PATH}"
ASSEMBLE_URL = f"{DEFAULT_BASE_URL}{ASSEMBLE_PATH}"
