"""Mathematical utilities for the quoting engine.

This package provides fixed-point primitives for token amounts:
- parse_units / format_units: decimal strings <-> 18-decimal ints
- mul_div, clamp_to_range, scale_by_pow10: checked integer helpers
"""

from amm_quote.math.fixed_point import (
    add,
    clamp_to_range,
    div_down,
    format_units,
    mul_div,
    mul_down,
    parse_units,
    scale_by_pow10,
    sub,
)

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
