"""Buy and sell validation.

Combines route resolution, slippage bounds and the account snapshot into a
TradeQuote. Engine exceptions never escape: fatal conditions become a quote
carrying a single fatal error, everything else is accumulated on top of the
computed amounts in a fixed order (gas, balance, allowance).
"""

from __future__ import annotations

import structlog

from amm_quote.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from amm_quote.errors import InvalidAmountError, InvalidTradeError
from amm_quote.math.fixed_point import parse_units
from amm_quote.models.context import TradeContext
from amm_quote.models.trade import TradeDirection
from amm_quote.pricing.slippage import calculate_slippage_bounds
from amm_quote.routing.resolver import RouteResolver
from amm_quote.routing.types import RouteResult
from amm_quote.safe_int import SafeIntError
from amm_quote.validation.result import TradeError, TradeQuote

logger = structlog.get_logger()


class _ErrorAccumulator:
    """Collects non-fatal errors in check order, one per kind."""

    def __init__(self) -> None:
        self._errors: list[TradeError] = []

    def add(self, error: TradeError) -> None:
        if error not in self._errors:
            self._errors.append(error)

    def check(self, failed: bool, error: TradeError) -> None:
        if failed:
            self.add(error)

    def as_tuple(self) -> tuple[TradeError, ...]:
        return tuple(self._errors)


def _below(value: int | None, required: int) -> bool:
    """True if a known value is below the requirement (unknown values pass)."""
    return value is not None and value < required


class TradeValidator:
    """Validates buys and sells of the target asset against a snapshot.

    Routes go through config.reference_asset; a context priced against a
    different reference asset is an invalid trade. The validator is
    stateless; one instance can serve concurrent requests.
    """

    def __init__(self, config: QuoteConfig = DEFAULT_QUOTE_CONFIG) -> None:
        self.config = config
        self.resolver = RouteResolver(
            reference_asset=config.reference_asset,
            fee_bps=config.fee_bps,
        )

    def validate_buy(self, target_amount: str, context: TradeContext) -> TradeQuote:
        """Validate buying exactly target_amount of the target asset.

        The selected asset pays. Its balance and allowance are checked
        against the slippage-adjusted maximum input.

        Args:
            target_amount: Human-entered decimal amount of the target asset
            context: Balances, allowances and reserves snapshot

        Returns:
            TradeQuote with input/output/maximum_input and accumulated errors
        """
        direction = TradeDirection.BUY
        parsed = self._parse_amount(target_amount, direction)
        if parsed is None:
            return TradeQuote.with_error(direction, TradeError.INVALID_AMOUNT)

        route = self._resolve(direction, context.selected_asset, parsed, context)
        if route is None:
            return TradeQuote.with_error(direction, TradeError.INVALID_TRADE)

        maximum = calculate_slippage_bounds(route.input_amount, self.config.slippage_bps).maximum

        errors = _ErrorAccumulator()
        self._check_gas(errors, context)
        errors.check(
            _below(context.balance_of(context.selected_asset), maximum),
            TradeError.INSUFFICIENT_SELECTED_TOKEN_BALANCE,
        )
        if not context.selected_is_reference:
            errors.check(
                _below(context.allowance_of(context.selected_asset), maximum),
                TradeError.INSUFFICIENT_ALLOWANCE,
            )

        return self._finish(
            TradeQuote(
                direction=direction,
                input_amount=route.input_amount,
                output_amount=parsed,
                maximum_input=maximum,
                errors=errors.as_tuple(),
            ),
            context,
        )

    def validate_sell(self, target_amount: str, context: TradeContext) -> TradeQuote:
        """Validate selling exactly target_amount of the target asset.

        The selected asset is received. The target asset balance and
        allowance are checked against the exact input amount.

        Args:
            target_amount: Human-entered decimal amount of the target asset
            context: Balances, allowances and reserves snapshot

        Returns:
            TradeQuote with input/output/minimum_output and accumulated errors
        """
        direction = TradeDirection.SELL
        parsed = self._parse_amount(target_amount, direction)
        if parsed is None:
            return TradeQuote.with_error(direction, TradeError.INVALID_AMOUNT)

        route = self._resolve(direction, context.selected_asset, parsed, context)
        if route is None:
            return TradeQuote.with_error(direction, TradeError.INVALID_TRADE)

        minimum = calculate_slippage_bounds(route.output_amount, self.config.slippage_bps).minimum

        errors = _ErrorAccumulator()
        self._check_gas(errors, context)
        errors.check(
            _below(context.balance_of(context.target_asset), parsed),
            TradeError.INSUFFICIENT_SELECTED_TOKEN_BALANCE,
        )
        if context.target_asset != context.reference_asset:
            errors.check(
                _below(context.allowance_of(context.target_asset), parsed),
                TradeError.INSUFFICIENT_ALLOWANCE,
            )

        return self._finish(
            TradeQuote(
                direction=direction,
                input_amount=parsed,
                output_amount=route.output_amount,
                minimum_output=minimum,
                errors=errors.as_tuple(),
            ),
            context,
        )

    def _parse_amount(self, target_amount: str, direction: TradeDirection) -> int | None:
        try:
            parsed = parse_units(target_amount, self.config.decimals)
        except InvalidAmountError as err:
            logger.debug("invalid_amount", direction=direction.value, reason=str(err))
            return None
        if parsed == 0:
            logger.debug("invalid_amount", direction=direction.value, reason="zero amount")
            return None
        return parsed

    def _resolve(
        self,
        direction: TradeDirection,
        other_asset: str,
        amount: int,
        context: TradeContext,
    ) -> RouteResult | None:
        if context.reference_asset != self.resolver.reference_asset:
            logger.debug(
                "reference_asset_mismatch",
                direction=direction.value,
                context_reference=context.reference_asset,
                config_reference=self.resolver.reference_asset,
            )
            return None
        try:
            return self.resolver.resolve(
                direction,
                context.target_asset,
                other_asset,
                amount,
                context.reserves,
            )
        except InvalidTradeError as err:
            logger.debug(
                "invalid_trade",
                direction=direction.value,
                target=context.target_asset,
                other=other_asset,
                reason=str(err),
            )
            return None
        except SafeIntError as err:
            # Guard violation inside the engine: report as an invalid trade
            logger.warning(
                "quote_arithmetic_error",
                direction=direction.value,
                target=context.target_asset,
                other=other_asset,
                error=str(err),
                error_type=type(err).__name__,
            )
            return None

    def _check_gas(self, errors: _ErrorAccumulator, context: TradeContext) -> None:
        errors.check(
            _below(context.balance_of(context.effective_gas_asset), self.config.min_gas_balance),
            TradeError.INSUFFICIENT_ETH_GAS,
        )

    def _finish(self, quote: TradeQuote, context: TradeContext) -> TradeQuote:
        logger.info(
            "trade_validated",
            direction=quote.direction.value,
            target=context.target_asset,
            selected=context.selected_asset,
            input_amount=str(quote.input_amount),
            output_amount=str(quote.output_amount),
            slippage_bound=str(quote.slippage_bound),
            errors=[e.value for e in quote.errors],
        )
        return quote


# Default validator instance
DEFAULT_VALIDATOR = TradeValidator()


def validate_buy(target_amount: str, context: TradeContext) -> TradeQuote:
    """Validate a buy with the default configuration."""
    return DEFAULT_VALIDATOR.validate_buy(target_amount, context)


def validate_sell(target_amount: str, context: TradeContext) -> TradeQuote:
    """Validate a sell with the default configuration."""
    return DEFAULT_VALIDATOR.validate_sell(target_amount, context)
