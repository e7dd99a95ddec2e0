"""Partially populated chain transaction produced from an assembly.

The client fills call data, value, destination and sender. Gas parameters
and the nonce stay unset: the signing pipeline is responsible for them.
"""

from typing import Optional

from pydantic import BaseModel, Field
from web3.types import TxParams


class TransactionRequest(BaseModel):
    """An unsigned EVM transaction ready for gas-parameter completion."""

    from_address: str = Field(..., description="Sender (signer) address")
    to: str = Field(..., description="Destination (router) address")
    value: int = Field(default=0, ge=0, description="Native value in wei")
    input: bytes = Field(default=b"", description="Call data")
    gas: Optional[int] = Field(None, description="Gas limit")
    gas_price: Optional[int] = Field(None, description="Legacy gas price in wei")
    max_fee_per_gas: Optional[int] = Field(None, description="EIP-1559 max fee")
    max_priority_fee_per_gas: Optional[int] = Field(None, description="EIP-1559 priority fee")
    nonce: Optional[int] = Field(None, description="Sender nonce")
    chain_id: Optional[int] = Field(None, description="EVM chain ID")

    @property
    def has_gas_params(self) -> bool:
        """Whether gas limit and a fee model have been filled in."""
        has_fee = self.gas_price is not None or self.max_fee_per_gas is not None
        return self.gas is not None and has_fee

    def to_tx_params(self) -> TxParams:
        """Convert to a web3 ``TxParams`` dict, leaving out unset fields."""
        params: TxParams = {
            "from": self.from_address,
            "to": self.to,
            "value": self.value,
            "data": self.input,
        }
        if self.gas is not None:
            params["gas"] = self.gas
        if self.gas_price is not None:
            params["gasPrice"] = self.gas_price
        if self.max_fee_per_gas is not None:
            params["maxFeePerGas"] = self.max_fee_per_gas
        if self.max_priority_fee_per_gas is not None:
            params["maxPriorityFeePerGas"] = self.max_priority_fee_per_gas
        if self.nonce is not None:
            params["nonce"] = self.nonce
        if self.chain_id is not None:
            params["chainId"] = self.chain_id
        return params
