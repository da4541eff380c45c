"""Pydantic models for the HTTP quoting API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from amm_quote.constants import DAI, ETH
from amm_quote.models.context import ReservePair, TradeContext
from amm_quote.models.types import AssetSymbol
from amm_quote.validation.result import TradeError, TradeQuote


class QuoteRequest(BaseModel):
    """A buy or sell of the context's target asset."""

    amount: str = Field(description="Human-entered decimal amount of the target asset")
    context: TradeContext


class QuoteResponse(BaseModel):
    """JSON form of a TradeQuote. Amounts are decimal integer strings."""

    direction: str
    input_amount: str | None = Field(default=None, alias="inputAmount")
    output_amount: str | None = Field(default=None, alias="outputAmount")
    maximum_input: str | None = Field(default=None, alias="maximumInput")
    minimum_output: str | None = Field(default=None, alias="minimumOutput")
    error: TradeError | None = None
    errors: list[TradeError] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_quote(cls, quote: TradeQuote) -> QuoteResponse:
        def _str(value: int | None) -> str | None:
            return None if value is None else str(value)

        return cls(
            direction=quote.direction.value,
            input_amount=_str(quote.input_amount),
            output_amount=_str(quote.output_amount),
            maximum_input=_str(quote.maximum_input),
            minimum_output=_str(quote.minimum_output),
            error=quote.error,
            errors=list(quote.errors),
        )


class UsdRateRequest(BaseModel):
    """Price an asset in USD through the stablecoin exchange."""

    asset: AssetSymbol
    reserves: dict[AssetSymbol, ReservePair] = Field(default_factory=dict)
    usd_asset: AssetSymbol = Field(default=DAI, alias="usdAsset")
    reference_asset: AssetSymbol = Field(default=ETH, alias="referenceAsset")

    model_config = {"populate_by_name": True}


class UsdRateResponse(BaseModel):
    """USD per unit of asset (18-decimal string), or null if unavailable."""

    asset: str
    rate: str | None = None
    available: bool = False
