"""HTTP transport for the Odos API.

Wraps a single ``httpx.AsyncClient`` (and its connection pool) and applies
the configured retry policy:

- network failures (connect errors, timeouts, protocol errors) are retried
- HTTP 429 and 5xx are retried when enabled in ``RetryConfig``
- any other status is returned as-is for the caller to judge

Delays grow exponentially from ``initial_backoff`` up to ``max_backoff``.
A numeric ``Retry-After`` header takes precedence, still capped.
"""

import asyncio
import logging
import math
import ssl
from typing import Callable, Optional

import httpx
from pydantic import ValidationError
from pydantic_settings import SettingsError

from odos_sor.config import ClientConfig
from odos_sor.errors import OdosConfigError, OdosTransportError

logger = logging.getLogger(__name__)

RequestBuilder = Callable[[], httpx.Request]


class OdosHttpClient:
    """Owns the HTTP connection pool and executes requests with retries.

    Safe to share between concurrent tasks: it keeps no per-call state.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the transport.

        Args:
            config: Client configuration (defaults to environment settings)
            transport: Custom httpx transport (mocking, proxies)

        Raises:
            OdosConfigError: If the underlying client cannot be created
        """
        try:
            self._config = config or ClientConfig()
        except (ValidationError, SettingsError) as e:
            raise OdosConfigError(f"Invalid client configuration: {e}") from e
        self._client = self._build_client(self._config, transport)

    @staticmethod
    def _build_client(
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport],
    ) -> httpx.AsyncClient:
        headers = {"User-Agent": config.user_agent}
        if config.api_key:
            headers["Authorization"] = f"Bearer {config.api_key}"

        verify = config.verify_ssl
        try:
            if config.verify_ssl and config.ca_bundle:
                verify = ssl.create_default_context(cafile=config.ca_bundle)

            return httpx.AsyncClient(
                timeout=httpx.Timeout(config.timeout, connect=config.connect_timeout),
                limits=httpx.Limits(
                    max_connections=config.max_connections,
                    max_keepalive_connections=config.max_keepalive_connections,
                ),
                verify=verify,
                headers=headers,
                transport=transport,
            )
        except (OSError, ssl.SSLError, ValueError, TypeError) as e:
            raise OdosConfigError(f"Failed to create HTTP client: {e}") from e

    @property
    def config(self) -> ClientConfig:
        """Client configuration."""
        return self._config

    @property
    def inner(self) -> httpx.AsyncClient:
        """The underlying ``httpx.AsyncClient`` used to build requests."""
        return self._client

    def _is_retryable_status(self, status_code: int) -> bool:
        retry = self._config.retry
        if status_code == 429:
            return retry.retry_rate_limits
        if 500 <= status_code < 600:
            return retry.retry_server_errors
        return False

    def _retry_delay(self, attempt: int, response: Optional[httpx.Response] = None) -> float:
        retry = self._config.retry
        if response is not None and response.status_code in (429, 503):
            retry_after = response.headers.get("Retry-After", "")
            try:
                delay = float(retry_after)
            except ValueError:
                delay = None
            if delay is not None and math.isfinite(delay):
                return min(max(delay, 0.0), retry.max_backoff)
        return retry.backoff(attempt)

    async def execute_with_retry(self, build_request: RequestBuilder) -> httpx.Response:
        """Send a request, retrying transient failures.

        Args:
            build_request: Returns a fresh ``httpx.Request``; called once per attempt

        Returns:
            The final response, whatever its status

        Raises:
            OdosTransportError: If every attempt failed at the network level
        """
        max_retries = self._config.retry.max_retries
        attempts = max_retries + 1

        for attempt in range(attempts):
            request = build_request()
            is_last = attempt == attempts - 1

            try:
                response = await self._client.send(request)
            except httpx.TransportError as e:
                if is_last:
                    logger.error(
                        f"{request.method} {request.url} failed after {attempt + 1} attempt(s): "
                        f"{type(e).__name__}: {e}"
                    )
                    raise OdosTransportError(
                        f"Request to {request.url} failed: {type(e).__name__}: {e}",
                        attempts=attempt + 1,
                        url=str(request.url),
                    ) from e

                delay = self._retry_delay(attempt)
                logger.warning(
                    f"{request.method} {request.url} failed ({type(e).__name__}: {e}), "
                    f"retrying in {delay:.2f}s (attempt {attempt + 1}/{attempts})"
                )
                await asyncio.sleep(delay)
                continue

            logger.debug(f"{request.method} {request.url} -> {response.status_code}")

            if is_last or not self._is_retryable_status(response.status_code):
                return response

            delay = self._retry_delay(attempt, response)
            logger.warning(
                f"{request.method} {request.url} returned {response.status_code}, "
                f"retrying in {delay:.2f}s (attempt {attempt + 1}/{attempts})"
            )
            await response.aclose()
            await asyncio.sleep(delay)

        raise AssertionError("retry loop exited without a result")

    async def aclose(self) -> None:
        """Close the connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "OdosHttpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
