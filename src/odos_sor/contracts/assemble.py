"""Assemble request and response contracts."""

from typing import Any, Optional

from pydantic import ConfigDict, Field

from odos_sor.contracts.quotes import _WireModel


class AssembleRequest(_WireModel):
    """Request to turn a quoted path into executable call data."""

    user_addr: str = Field(..., description="Address that will sign the transaction")
    path_id: str = Field(..., description="Path ID from a prior quote")
    simulate: bool = Field(default=False, description="Ask Odos to simulate the transaction")
    receiver: Optional[str] = Field(None, description="Output recipient (defaults to user_addr)")


class TransactionData(_WireModel):
    """The ``transaction`` object of an assembly response.

    Only ``data``, ``value`` and ``to`` are typed; the remaining fields are
    passed through as received and never fail decoding.
    """

    model_config = ConfigDict(extra="ignore")

    data: str = Field(..., description="Call data (hex encoded)")
    value: str = Field(..., description="Native value in wei (numeric string)")
    to: Optional[str] = Field(None, description="Odos router address")
    from_address: Optional[Any] = Field(None, alias="from", description="Sender address")
    gas: Optional[Any] = Field(None, description="Gas limit suggested by Odos")
    gas_price: Optional[Any] = Field(None, description="Gas price suggested by Odos")
    nonce: Optional[Any] = Field(None, description="Sender nonce at assembly time")
    chain_id: Optional[Any] = Field(None, description="EVM chain ID")


class AssemblyResponse(_WireModel):
    """Response of the assemble endpoint.

    Only ``transaction`` is used downstream. Auxiliary fields are kept as
    received and unknown fields are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    transaction: TransactionData
    deprecated: Optional[Any] = None
    block_number: Optional[Any] = None
    gas_estimate: Optional[Any] = None
    gas_estimate_value: Optional[Any] = None
    input_tokens: Optional[Any] = None
    output_tokens: Optional[Any] = None
    net_out_value: Optional[Any] = None
    out_values: Optional[Any] = None
    simulation: Optional[Any] = None
