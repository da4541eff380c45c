"""AMM Quote - constant product trade quoting and validation."""

__version__ = "0.1.0"

from amm_quote.models.context import ReservePair, TradeContext  # noqa: E402
from amm_quote.models.trade import TradeDirection  # noqa: E402
from amm_quote.validation import (  # noqa: E402
    TradeError,
    TradeQuote,
    TradeValidator,
    validate_buy,
    validate_sell,
)

__all__ = [
    "ReservePair",
    "TradeContext",
    "TradeDirection",
    "TradeError",
    "TradeQuote",
    "TradeValidator",
    "validate_buy",
    "validate_sell",
    "__version__",
]
