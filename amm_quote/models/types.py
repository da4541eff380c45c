"""Shared type definitions for quoting models.

These types are used across context, trade and API models.
"""

import re
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, Field

from amm_quote.constants import MAX_AMOUNT

_SYMBOL_RE = re.compile(r"[A-Z0-9][A-Z0-9._-]{0,31}")


def validate_amount(value: Any) -> int:
    """Validate that a value is a token amount in [0, MAX_AMOUNT].

    Args:
        value: Value to validate (int or decimal integer string)

    Returns:
        The amount as int

    Raises:
        ValueError: If value is not a non-negative integer within range
    """
    if isinstance(value, bool):
        raise ValueError("Amount must be an integer, got bool")

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"Amount must be a decimal integer string: '{value}'") from err

    if not isinstance(value, int):
        raise ValueError(f"Amount must be string or int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Amount cannot be negative: {value}")
    if value > MAX_AMOUNT:
        raise ValueError(f"Amount overflow: {value} > 2^256-1")

    return value


def normalize_symbol(symbol: str, *, validate: bool = False) -> str:
    """Normalize an asset symbol to upper case.

    Args:
        symbol: Asset symbol such as "eth" or "SOCKS"
        validate: If True, raises ValueError for malformed symbols

    Returns:
        Upper-case symbol with surrounding whitespace removed
    """
    normalized = symbol.strip().upper()
    if validate and not is_valid_symbol(normalized):
        raise ValueError(f"Invalid asset symbol: {symbol!r}")
    return normalized


def is_valid_symbol(symbol: str) -> bool:
    """Check if a string is a well-formed (normalized) asset symbol."""
    if not isinstance(symbol, str):
        return False
    return _SYMBOL_RE.fullmatch(symbol) is not None


def _symbol(value: str) -> str:
    return normalize_symbol(value, validate=True)


# Token amount scaled by 10^18, accepted as int or decimal string
Amount = Annotated[
    int,
    BeforeValidator(validate_amount),
    Field(description="Token amount scaled by 10^18"),
]

# Asset identifier, normalized to upper case
AssetSymbol = Annotated[str, AfterValidator(_symbol)]
