"""Swap parameters for the transaction submission layer.

Translates a validated TradeQuote into the exchange method and arguments
the submission layer sends. Nothing here talks to a node: gas estimates and
the current time are passed in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from amm_quote.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from amm_quote.constants import BPS_DENOMINATOR, MAX_AMOUNT
from amm_quote.models.context import TradeContext
from amm_quote.models.trade import TradeDirection
from amm_quote.safe_int import S
from amm_quote.validation.result import TradeError, TradeQuote


class SwapMethod(str, Enum):
    """Exchange methods used for each kind of trade."""

    ETH_TO_TOKEN_SWAP_OUTPUT = "ethToTokenSwapOutput"
    TOKEN_TO_TOKEN_SWAP_OUTPUT = "tokenToTokenSwapOutput"
    TOKEN_TO_ETH_SWAP_INPUT = "tokenToEthSwapInput"
    TOKEN_TO_TOKEN_SWAP_INPUT = "tokenToTokenSwapInput"


@dataclass(frozen=True)
class SwapParameters:
    """Arguments for one exchange call.

    Attributes:
        exchange_asset: Asset whose exchange contract is called
        method: Exchange method to call
        args: Positional method arguments, amounts passed verbatim from the quote
        value: Reference asset attached to the call (ETH-paid buys only)
        requires_approval: True if the paid token must be approved first
        deadline: Unix timestamp passed in args
    """

    exchange_asset: str
    method: SwapMethod
    args: tuple[int | str, ...]
    value: int = 0
    requires_approval: bool = False
    deadline: int = 0


def calculate_gas_margin(value: int, margin_bps: int = DEFAULT_QUOTE_CONFIG.gas_margin_bps) -> int:
    """Add a safety margin to a gas estimate: value + value * margin / 10000."""
    offset = S(value) * margin_bps // BPS_DENOMINATOR
    return (S(value) + offset).value


def deadline_from(now: int, seconds: int = DEFAULT_QUOTE_CONFIG.deadline_seconds) -> int:
    """Unix timestamp after which the exchange rejects the swap."""
    return now + seconds


def build_swap_parameters(
    quote: TradeQuote,
    context: TradeContext,
    now: int,
    config: QuoteConfig = DEFAULT_QUOTE_CONFIG,
) -> SwapParameters:
    """Build exchange call arguments from a quote.

    Buys use exact-output methods with the quote's maximum input; sells use
    exact-input methods with the quote's minimum output. Token-to-token swaps
    leave the intermediate reference amount unconstrained (max sold = MAX_AMOUNT,
    min bought = 1): the end-to-end bound already protects the trade.

    Args:
        quote: Quote from TradeValidator (must carry amounts)
        context: Snapshot the quote was computed against
        now: Current unix time in seconds
        config: Deadline configuration

    Raises:
        ValueError: If the quote has no amounts
    """
    if not quote.has_amounts or quote.slippage_bound is None:
        raise ValueError(f"Quote has no amounts to submit: {quote.error}")

    deadline = deadline_from(now, config.deadline_seconds)
    target = context.target_asset
    selected = context.selected_asset
    allowance_needed = quote.has_error(TradeError.INSUFFICIENT_ALLOWANCE)

    if quote.direction == TradeDirection.BUY:
        if context.selected_is_reference:
            return SwapParameters(
                exchange_asset=target,
                method=SwapMethod.ETH_TO_TOKEN_SWAP_OUTPUT,
                args=(quote.output_amount, deadline),
                value=quote.slippage_bound,
                deadline=deadline,
            )
        return SwapParameters(
            exchange_asset=selected,
            method=SwapMethod.TOKEN_TO_TOKEN_SWAP_OUTPUT,
            args=(quote.output_amount, quote.slippage_bound, MAX_AMOUNT, deadline, target),
            requires_approval=allowance_needed,
            deadline=deadline,
        )

    if context.selected_is_reference:
        return SwapParameters(
            exchange_asset=target,
            method=SwapMethod.TOKEN_TO_ETH_SWAP_INPUT,
            args=(quote.input_amount, quote.slippage_bound, deadline),
            requires_approval=allowance_needed,
            deadline=deadline,
        )
    return SwapParameters(
        exchange_asset=target,
        method=SwapMethod.TOKEN_TO_TOKEN_SWAP_INPUT,
        args=(quote.input_amount, quote.slippage_bound, 1, deadline, selected),
        requires_approval=allowance_needed,
        deadline=deadline,
    )


__all__ = [
    "SwapMethod",
    "SwapParameters",
    "build_swap_parameters",
    "calculate_gas_margin",
    "deadline_from",
]
