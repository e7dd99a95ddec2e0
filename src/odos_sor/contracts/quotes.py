"""Quote request and response contracts."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict with wire names, unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class InputToken(_WireModel):
    """A token being sold, with its raw amount (smallest units)."""

    model_config = ConfigDict(frozen=True)

    token_address: str = Field(..., description="ERC-20 address (0x0 for native)")
    amount: str = Field(..., description="Raw amount as a decimal string")


class OutputToken(_WireModel):
    """A token being bought, with its share of the output."""

    model_config = ConfigDict(frozen=True)

    token_address: str = Field(..., description="ERC-20 address (0x0 for native)")
    proportion: float = Field(default=1.0, description="Share of output value (0-1)")


class QuoteRequest(_WireModel):
    """Request for a Smart Order Routing V2 quote.

    Validation of token addresses, amounts and chain support happens
    server side; this model only fixes the wire shape.
    """

    model_config = ConfigDict(frozen=True)

    chain_id: int = Field(..., description="EVM chain ID")
    input_tokens: tuple[InputToken, ...] = Field(..., description="Tokens to sell")
    output_tokens: tuple[OutputToken, ...] = Field(..., description="Tokens to buy")
    user_addr: str = Field(..., description="Address that will execute the swap")
    slippage_limit_percent: float = Field(default=0.3, description="Max slippage in percent")
    referral_code: int = Field(default=0, description="Odos referral code")
    disable_rfqs: bool = Field(default=True, alias="disableRFQs", description="Exclude RFQ liquidity")
    compact: bool = Field(default=True, description="Request a compact call data path")
    gas_price: Optional[float] = Field(None, description="Gas price override in gwei")
    source_blacklist: Optional[tuple[str, ...]] = Field(None, description="Liquidity sources to skip")
    source_whitelist: Optional[tuple[str, ...]] = Field(None, description="Only these sources")
    pool_blacklist: Optional[tuple[str, ...]] = Field(None, description="Pool addresses to skip")
    path_viz: Optional[bool] = Field(None, description="Include path visualization")
    like_asset: Optional[bool] = Field(None, description="Route only through like assets")

    @classmethod
    def single(
        cls,
        chain_id: int,
        input_token: str,
        amount: int,
        output_token: str,
        user_addr: str,
        **kwargs: Any,
    ) -> "QuoteRequest":
        """Build a single-input, single-output quote request."""
        return cls(
            chain_id=chain_id,
            input_tokens=(InputToken(token_address=input_token, amount=str(amount)),),
            output_tokens=(OutputToken(token_address=output_token, proportion=1),),
            user_addr=user_addr,
            **kwargs,
        )


class SingleQuoteResponse(_WireModel):
    """Quote returned by the SOR V2 quote endpoint.

    Only ``path_id`` is required. Unknown fields are kept so newer API
    versions do not break decoding.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    path_id: str = Field(..., description="Route identifier used for assembly")
    block_number: Optional[int] = Field(None, description="Block the quote was computed at")
    in_tokens: list[str] = Field(default_factory=list)
    in_amounts: list[str] = Field(default_factory=list)
    out_tokens: list[str] = Field(default_factory=list)
    out_amounts: list[str] = Field(default_factory=list)
    in_values: list[float] = Field(default_factory=list)
    out_values: list[float] = Field(default_factory=list)
    gas_estimate: Optional[float] = Field(None, description="Estimated gas units")
    data_gas_estimate: Optional[int] = Field(None, description="Gas attributed to call data (L2s)")
    gwei_per_gas: Optional[float] = Field(None, description="Gas price used for the estimate")
    gas_estimate_value: Optional[float] = Field(None, description="Gas cost in USD")
    net_out_value: Optional[float] = Field(None, description="Output value minus gas in USD")
    price_impact: Optional[float] = Field(None, description="Price impact in percent")
    percent_diff: Optional[float] = Field(None, description="Difference versus market price")
    partner_fee_percent: Optional[float] = Field(None, description="Partner fee in percent")
    path_viz: Optional[Any] = Field(None, description="Path visualization, if requested")

    @property
    def out_amount(self) -> int:
        """Raw amount of the first output token (0 if absent)."""
        if not self.out_amounts:
            return 0
        return int(self.out_amounts[0])
