"""Quote error classes.

These are raised inside the engine and translated into TradeError kinds
at the validator boundary.
"""


class QuoteError(Exception):
    """Base error for quoting operations."""

    pass


class InvalidAmountError(QuoteError, ValueError):
    """Entered amount is not a valid non-negative fixed-point number."""

    pass


class InvalidTradeError(QuoteError):
    """A constant product quote is degenerate.

    Raised for zero reserves, outputs at or above the pool reserve, and
    results that are non-positive or at/above MAX_AMOUNT.
    """

    pass
