"""Async client for the Odos Smart Order Routing V2 API.

- Quote: ``OdosSorV2Client.get_swap_quote``
- Assemble: ``OdosSorV2Client.assemble_tx_data``
- Build: ``OdosSorV2Client.build_base_transaction`` (unsigned, no gas params)
"""

__version__ = "0.1.0"

from odos_sor.chains import CHAIN_IDS, ODOS_V2_ROUTERS, get_chain_id, get_router_address
from odos_sor.config import ASSEMBLE_URL, QUOTE_URL, ClientConfig, RetryConfig, get_settings
from odos_sor.contracts import (
    AssembleRequest,
    AssemblyResponse,
    InputToken,
    OutputToken,
    QuoteRequest,
    SingleQuoteResponse,
    TransactionData,
    TransactionRequest,
)
from odos_sor.errors import (
    OdosApiError,
    OdosConfigError,
    OdosDecodeError,
    OdosError,
    OdosHexDecodeError,
    OdosInvalidAddressError,
    OdosQuoteRequestError,
    OdosTransactionAssemblyError,
    OdosTransportError,
    OdosValueParseError,
)
from odos_sor.http import OdosHttpClient
from odos_sor.sor import OdosSorV2Client
from odos_sor.swap import SwapContext
from odos_sor.utils import decode_call_data, parse_value

__all__ = [
    "__version__",
    # Client
    "OdosSorV2Client",
    "OdosHttpClient",
    # Configuration
    "ClientConfig",
    "RetryConfig",
    "get_settings",
    "QUOTE_URL",
    "ASSEMBLE_URL",
    # Contracts
    "QuoteRequest",
    "InputToken",
    "OutputToken",
    "SingleQuoteResponse",
    "AssembleRequest",
    "AssemblyResponse",
    "TransactionData",
    "TransactionRequest",
    "SwapContext",
    # Chains
    "CHAIN_IDS",
    "ODOS_V2_ROUTERS",
    "get_chain_id",
    "get_router_address",
    # Errors
    "OdosError",
    "OdosConfigError",
    "OdosTransportError",
    "OdosApiError",
    "OdosQuoteRequestError",
    "OdosTransactionAssemblyError",
    "OdosDecodeError",
    "OdosValueParseError",
    "OdosHexDecodeError",
    "OdosInvalidAddressError",
    # Helpers
    "parse_value",
    "decode_call_data",
]
