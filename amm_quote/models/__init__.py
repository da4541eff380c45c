"""Data models for trade quoting."""

from amm_quote.models.context import ReservePair, TradeContext
from amm_quote.models.trade import SlippageBand, TradeDirection
from amm_quote.models.types import (
    Amount,
    AssetSymbol,
    is_valid_symbol,
    normalize_symbol,
    validate_amount,
)

__all__ = [
    "Amount",
    "AssetSymbol",
    "ReservePair",
    "SlippageBand",
    "TradeContext",
    "TradeDirection",
    "is_valid_symbol",
    "normalize_symbol",
    "validate_amount",
]
