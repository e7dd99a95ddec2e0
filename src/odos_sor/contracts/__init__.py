"""Request and response contracts for the Odos SOR V2 API.

Field names are snake_case in Python and camelCase on the wire.
"""

from odos_sor.contracts.assemble import AssembleRequest, AssemblyResponse, TransactionData
from odos_sor.contracts.quotes import InputToken, OutputToken, QuoteRequest, SingleQuoteResponse
from odos_sor.contracts.transactions import TransactionRequest

__all__ = [
    # Quote
    "InputToken",
    "OutputToken",
    "QuoteRequest",
    "SingleQuoteResponse",
    # Assemble
    "AssembleRequest",
    "AssemblyResponse",
    "TransactionData",
    # Transactions
    "TransactionRequest",
]
