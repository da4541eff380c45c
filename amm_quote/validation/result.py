"""Trade validation result types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from amm_quote.models.trade import TradeDirection


class TradeError(Enum):
    """Kinds of trade validation errors.

    INVALID_AMOUNT and INVALID_TRADE abort validation (no amounts can be
    computed). The others are accumulated on top of a computed quote.
    """

    INVALID_AMOUNT = "invalid_amount"
    INVALID_TRADE = "invalid_trade"
    INSUFFICIENT_ETH_GAS = "insufficient_eth_gas"
    INSUFFICIENT_SELECTED_TOKEN_BALANCE = "insufficient_selected_token_balance"
    INSUFFICIENT_ALLOWANCE = "insufficient_allowance"

    @property
    def is_fatal(self) -> bool:
        """True if no quote can be computed when this error occurs."""
        return self in (TradeError.INVALID_AMOUNT, TradeError.INVALID_TRADE)


@dataclass(frozen=True)
class TradeQuote:
    """Result of validating a buy or sell.

    A quote carrying only non-fatal errors is fully populated: a caller can
    show "would receive X, but insufficient allowance". A quote with a fatal
    error has no amounts.

    Attributes:
        direction: BUY or SELL
        input_amount: Exact amount paid
        output_amount: Exact amount received
        maximum_input: Slippage-adjusted input limit (buys only)
        minimum_output: Slippage-adjusted output limit (sells only)
        errors: Accumulated errors in check order, at most one per kind

    Examples:
        # Valid buy
        quote = TradeQuote(
            direction=TradeDirection.BUY,
            input_amount=1020, output_amount=1000, maximum_input=1040,
        )
        assert quote.is_valid

        # Fatal error
        quote = TradeQuote.with_error(TradeDirection.SELL, TradeError.INVALID_TRADE)
        assert quote.input_amount is None
    """

    direction: TradeDirection
    input_amount: int | None = None
    output_amount: int | None = None
    maximum_input: int | None = None
    minimum_output: int | None = None
    errors: tuple[TradeError, ...] = ()

    @property
    def error(self) -> TradeError | None:
        """The first accumulated error, or None."""
        return self.errors[0] if self.errors else None

    @property
    def is_valid(self) -> bool:
        """True if the trade can be submitted as quoted."""
        return not self.errors

    @property
    def has_amounts(self) -> bool:
        """True if the exact amounts were computed (no fatal error)."""
        return self.input_amount is not None and self.output_amount is not None

    @property
    def slippage_bound(self) -> int | None:
        """The bound relevant to the direction (max input for buys, min output for sells)."""
        if self.direction == TradeDirection.BUY:
            return self.maximum_input
        return self.minimum_output

    def has_error(self, kind: TradeError) -> bool:
        return kind in self.errors

    @classmethod
    def with_error(cls, direction: TradeDirection, error: TradeError) -> TradeQuote:
        """Create a quote for a fatal error (no amounts)."""
        return cls(direction=direction, errors=(error,))
