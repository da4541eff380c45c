"""Trade validation.

Usage:
    from amm_quote.validation import TradeValidator, TradeError

    quote = TradeValidator().validate_buy("1", context)

    if quote.has_amounts:
        show(quote.input_amount, quote.maximum_input)
    if quote.error is TradeError.INSUFFICIENT_ALLOWANCE:
        request_approval()
"""

from amm_quote.validation.result import TradeError, TradeQuote
from amm_quote.validation.validator import (
    DEFAULT_VALIDATOR,
    TradeValidator,
    validate_buy,
    validate_sell,
)

__all__ = [
    "TradeError",
    "TradeQuote",
    "TradeValidator",
    "DEFAULT_VALIDATOR",
    "validate_buy",
    "validate_sell",
]
