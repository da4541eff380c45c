"""Slippage bounds and spot exchange rates."""

from amm_quote.pricing.exchange_rate import (
    context_usd_rate,
    dollarize,
    exchange_rate,
    pair_rate,
    usd_exchange_rate,
)
from amm_quote.pricing.slippage import bound, calculate_slippage_bounds

__all__ = [
    "bound",
    "calculate_slippage_bounds",
    "context_usd_rate",
    "dollarize",
    "exchange_rate",
    "pair_rate",
    "usd_exchange_rate",
]
