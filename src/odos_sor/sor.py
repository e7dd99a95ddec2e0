"""Odos Smart Order Routing V2 client.

Quote a swap, assemble the quoted path into call data, and turn that into
an unsigned transaction for the signing pipeline.
API docs: https://docs.odos.xyz/build/api-docs
"""

import json
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from odos_sor.config import ClientConfig
from odos_sor.contracts.assemble import AssembleRequest, AssemblyResponse, TransactionData
from odos_sor.contracts.quotes import QuoteRequest, SingleQuoteResponse
from odos_sor.contracts.transactions import TransactionRequest
from odos_sor.errors import (
    OdosDecodeError,
    OdosQuoteRequestError,
    OdosTransactionAssemblyError,
)
from odos_sor.http import OdosHttpClient
from odos_sor.swap import SwapContext
from odos_sor.utils.values import decode_call_data, parse_value

logger = logging.getLogger(__name__)


async def _read_error_body(response: httpx.Response, fallback: str) -> str:
    """Best-effort read of an error body; never raises."""
    try:
        await response.aread()
        return response.text
    except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError, LookupError) as e:
        logger.debug(f"Could not read error body: {e}")
        return fallback


def _status_line(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()


class OdosSorV2Client:
    """Client for the Odos Smart Order Routing V2 API.

    One instance may be shared by concurrent tasks. Use it as an async
    context manager (or call ``aclose()``) to release connections.

    Example:
        async with OdosSorV2Client() as odos:
            quote = await odos.get_swap_quote(request)
            swap = SwapContext.for_chain(42161, signer, quote.path_id)
            tx = await odos.build_base_transaction(swap)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration (defaults to environment settings)
            transport: Custom httpx transport (mocking, proxies)

        Raises:
            OdosConfigError: If the HTTP transport cannot be initialized
        """
        self.client = OdosHttpClient(config, transport=transport)

    @classmethod
    def with_config(
        cls,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "OdosSorV2Client":
        """Create a client with explicit configuration."""
        return cls(config, transport=transport)

    @property
    def config(self) -> ClientConfig:
        """Client configuration."""
        return self.client.config

    async def get_swap_quote(self, quote_request: QuoteRequest) -> SingleQuoteResponse:
        """Get a swap quote.

        Args:
            quote_request: Tokens, amounts and chain to quote

        Returns:
            The decoded quote, including the ``path_id`` needed for assembly

        Raises:
            OdosQuoteRequestError: On a non-success HTTP status
            OdosDecodeError: If the body is not a valid quote
            OdosTransportError: If the request could not be sent
        """
        payload = quote_request.to_payload()
        response = await self.client.execute_with_retry(
            lambda: self.client.inner.build_request(
                "POST",
                self.config.quote_url,
                headers={"accept": "application/json"},
                json=payload,
            )
        )

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Quote response: {response.status_code} {response.text[:500]}")

        if not response.is_success:
            error_text = await _read_error_body(response, "Unknown error")
            raise OdosQuoteRequestError(
                _status_line(response), error_text, status_code=response.status_code
            )

        try:
            return SingleQuoteResponse.model_validate(response.json())
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            raise OdosDecodeError(f"Invalid quote response: {e}") from e

    async def get_assemble_response(self, assemble_request: AssembleRequest) -> httpx.Response:
        """Send an assemble request and return the raw response.

        HTTP error statuses are not raised here; callers that need custom
        handling (e.g. simulation) inspect the response themselves.

        Raises:
            OdosTransportError: If the request could not be sent
        """
        payload = assemble_request.to_payload()
        return await self.client.execute_with_retry(
            lambda: self.client.inner.build_request(
                "POST",
                self.config.assemble_url,
                headers={"Content-Type": "application/json"},
                json=payload,
            )
        )

    async def assemble_tx_data(
        self,
        signer_address: str,
        output_recipient: str,
        path_id: str,
    ) -> TransactionData:
        """Assemble transaction data from a quoted path.

        Args:
            signer_address: Address that will sign and send the transaction
            output_recipient: Address receiving the output tokens
            path_id: Path ID from ``get_swap_quote``

        Returns:
            The ``transaction`` part of the assembly response

        Raises:
            OdosTransactionAssemblyError: On a non-success HTTP status
            OdosDecodeError: If the body is not JSON or lacks transaction fields
            OdosTransportError: If the request could not be sent
        """
        assemble_request = AssembleRequest(
            user_addr=signer_address,
            path_id=path_id,
            simulate=False,
            receiver=output_recipient,
        )

        response = await self.get_assemble_response(assemble_request)

        if not response.is_success:
            error = await _read_error_body(response, "Failed to get error message")
            raise OdosTransactionAssemblyError(
                _status_line(response), error, status_code=response.status_code
            )

        try:
            value = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise OdosDecodeError(f"Assembly response is not valid JSON: {e}") from e

        try:
            transaction = AssemblyResponse.model_validate(value).transaction
        except ValidationError as e:
            raise OdosDecodeError(f"Unexpected assembly response shape: {e}") from e

        logger.debug(f"Assembled transaction for path {path_id}: {transaction!r}")
        return transaction

    async def build_base_transaction(self, swap: SwapContext) -> TransactionRequest:
        """Build an unsigned swap transaction, leaving gas parameters to the caller.

        Raises:
            OdosHexDecodeError: If the assembled call data is not valid hex
            OdosValueParseError: If the assembled value is not numeric
            (plus everything ``assemble_tx_data`` raises)
        """
        tx_data = await self.assemble_tx_data(
            swap.signer_address,
            swap.output_recipient,
            swap.path_id,
        )

        logger.info(f"Building base transaction (value: {tx_data.value})")

        return TransactionRequest(
            input=decode_call_data(tx_data.data),
            value=parse_value(tx_data.value),
            to=swap.router_address,
            from_address=swap.signer_address,
        )

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self.client.aclose()

    async def __aenter__(self) -> "OdosSorV2Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
