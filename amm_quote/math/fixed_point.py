"""18-decimal fixed-point helpers for token amounts.

Amounts are plain ints scaled by 10^decimals. Arithmetic goes through
SafeInt so that underflow and division by zero raise instead of producing
amounts that cannot exist on-chain.
"""

from __future__ import annotations

import re

from amm_quote.constants import MAX_AMOUNT, ONE_18, TOKEN_DECIMALS
from amm_quote.errors import InvalidAmountError
from amm_quote.safe_int import S

__all__ = [
    "add",
    "sub",
    "mul_down",
    "div_down",
    "mul_div",
    "clamp_to_range",
    "scale_by_pow10",
    "parse_units",
    "format_units",
]

# Unsigned decimal literal: "1", "1.5", ".01", "2."
_DECIMAL_RE = re.compile(r"(?P<whole>[0-9]*)(?:\.(?P<fraction>[0-9]*))?")


def add(a: int, b: int) -> int:
    """Add two amounts.

    Raises:
        AmountOverflow: If the sum exceeds MAX_AMOUNT
    """
    return (S(a) + b).to_amount()


def sub(a: int, b: int) -> int:
    """Subtract b from a.

    Raises:
        Underflow: If b > a
    """
    return (S(a) - b).to_amount()


def mul_down(a: int, b: int, one: int = ONE_18) -> int:
    """Multiply two fixed-point values, rounding down."""
    return (S(a) * b // one).value


def div_down(a: int, b: int, one: int = ONE_18) -> int:
    """Divide two fixed-point values, rounding down.

    Raises:
        DivisionByZero: If b is zero
    """
    return (S(a) * one // b).value


def mul_div(a: int, b: int, denominator: int) -> int:
    """Compute floor(a * b / denominator) without intermediate rounding.

    Raises:
        DivisionByZero: If denominator is zero
    """
    return (S(a) * b // denominator).value


def clamp_to_range(value: int, minimum: int = 0, maximum: int = MAX_AMOUNT) -> int:
    """Clamp value into [minimum, maximum]."""
    if minimum > maximum:
        raise ValueError(f"Empty range: [{minimum}, {maximum}]")
    return S(value).clamp(minimum, maximum).value


def scale_by_pow10(value: int, exponent: int) -> int:
    """Rescale an amount between decimal precisions.

    Positive exponents multiply by 10^exponent; negative exponents
    floor-divide by 10^-exponent.

    Example:
        scale_by_pow10(1_500_000, 12) == 1_500_000_000_000_000_000  # 6 -> 18 decimals
    """
    if exponent >= 0:
        return (S(value) * 10**exponent).value
    return (S(value) // 10 ** (-exponent)).value


def parse_units(text: str, decimals: int = TOKEN_DECIMALS) -> int:
    """Parse a human-entered decimal string into a fixed-point amount.

    Args:
        text: Decimal string such as "1", "0.5" or ".01"
        decimals: Number of decimal places of the asset

    Returns:
        The amount scaled by 10^decimals

    Raises:
        InvalidAmountError: If text is not an unsigned decimal number, has
            more fractional digits than decimals, or exceeds MAX_AMOUNT
    """
    if not isinstance(text, str):
        raise InvalidAmountError(f"Amount must be a string, got {type(text).__name__}")

    match = _DECIMAL_RE.fullmatch(text)
    if match is None:
        raise InvalidAmountError(f"Invalid decimal amount: {text!r}")

    whole = match.group("whole")
    fraction = match.group("fraction") or ""
    if not whole and not fraction:
        raise InvalidAmountError(f"Invalid decimal amount: {text!r}")
    if len(fraction) > decimals:
        raise InvalidAmountError(
            f"Too many decimal places in {text!r} (max {decimals})"
        )

    amount = int(whole or "0") * 10**decimals + int(fraction.ljust(decimals, "0") or "0")
    if amount > MAX_AMOUNT:
        raise InvalidAmountError(f"Amount exceeds MAX_AMOUNT: {text!r}")
    return amount


def format_units(amount: int, decimals: int = TOKEN_DECIMALS) -> str:
    """Format a fixed-point amount as a decimal string.

    Trailing fractional zeros are dropped, but at least one fractional
    digit is kept ("1.0", "0.05").
    """
    if amount < 0:
        raise ValueError(f"Amount cannot be negative: {amount}")
    whole, fraction = divmod(amount, 10**decimals)
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{whole}.{fraction_str}"
