"""Checked integer wrapper for token amount arithmetic.

Token amounts are plain Python ints scaled by 10^18. Python ints never
overflow, so intermediate products keep full precision; what needs guarding
is the domain:
- Division by zero raises DivisionByZero
- Subtraction below zero raises Underflow
- Leaving [0, MAX_AMOUNT] raises AmountOverflow on to_amount()

Usage pattern:
    from amm_quote.safe_int import S

    def output_amount(amount_in: int, reserve_in: int, reserve_out: int) -> int:
        numerator = S(amount_in) * reserve_out
        denominator = S(reserve_in) + amount_in
        return (numerator // denominator).to_amount()
"""

from __future__ import annotations

from amm_quote.constants import MAX_AMOUNT


class SafeIntError(ArithmeticError):
    """Base class for checked arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce a negative amount."""

    pass


class AmountOverflow(SafeIntError):
    """Value falls outside [0, MAX_AMOUNT]."""

    pass


class SafeInt:
    """Integer with checked arithmetic operations.

    Wraps an int and raises descriptive errors instead of producing
    amounts that cannot exist:
    - Division by zero raises DivisionByZero
    - Negative results from subtraction raise Underflow
    - Values outside [0, MAX_AMOUNT] raise AmountOverflow on to_amount()

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Floor division (truncates, as the EVM does for unsigned values).

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __rfloordiv__(self, other: int) -> SafeInt:
        if self._value == 0:
            raise DivisionByZero(f"Division by zero: {other} // 0")
        return SafeInt(other // self._value)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def clamp(self, min_val: int = 0, max_val: int = MAX_AMOUNT) -> SafeInt:
        """Clamp value to range [min_val, max_val]."""
        return SafeInt(max(min_val, min(self._value, max_val)))

    def saturating_sub(self, other: SafeInt | int) -> SafeInt:
        """Subtract, clamping result to zero instead of raising.

        Unlike __sub__, this never raises Underflow.
        """
        return SafeInt(max(0, self._value - _extract_value(other)))

    def to_amount(self) -> int:
        """Convert to int, validating the token amount range.

        Raises:
            AmountOverflow: If value is negative or exceeds MAX_AMOUNT
        """
        if self._value < 0:
            raise AmountOverflow(f"Negative value is not an amount: {self._value}")
        if self._value > MAX_AMOUNT:
            raise AmountOverflow(f"Value exceeds MAX_AMOUNT: {self._value}")
        return self._value

    def is_amount(self) -> bool:
        """Check if value is a valid amount without raising."""
        return 0 <= self._value <= MAX_AMOUNT

    @classmethod
    def zero(cls) -> SafeInt:
        return cls(0)


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
