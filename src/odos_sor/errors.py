"""Exception hierarchy for the Odos client.

Every failure raised by this package derives from :class:`OdosError`, so
callers can catch the whole family or a single kind.
"""

from typing import Optional


class OdosError(Exception):
    """Base class for all Odos client errors."""


class OdosConfigError(OdosError):
    """Raised when the client or its HTTP transport cannot be initialized."""


class OdosTransportError(OdosError):
    """Raised when a request fails at the network level after all retries."""

    def __init__(self, message: str, attempts: int = 1, url: Optional[str] = None):
        self.attempts = attempts
        self.url = url
        super().__init__(f"{message} (after {attempts} attempt(s))")


class OdosApiError(OdosError):
    """Raised when the Odos API answers with a non-success HTTP status."""

    def __init__(self, status: str, body: str, status_code: Optional[int] = None):
        self.status = status
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error (status: {status}): {body}")


class OdosQuoteRequestError(OdosApiError):
    """Non-success response from the quote endpoint."""


class OdosTransactionAssemblyError(OdosApiError):
    """Non-success response from the assemble endpoint."""


class OdosDecodeError(OdosError):
    """Response body is not JSON or does not have the expected shape."""


class OdosValueParseError(OdosDecodeError):
    """A numeric field could not be parsed as a decimal or hex integer."""


class OdosHexDecodeError(OdosError):
    """Call data returned by the API is not valid hex."""


class OdosInvalidAddressError(OdosError, ValueError):
    """An address given to the client is not a valid 20-byte hex address."""
