"""Constant product exchange pricing math."""

from amm_quote.amm.constant_product import (
    ConstantProductAMM,
    SwapQuote,
    check_quote_bounds,
    constant_product,
    fee_multiplier,
    quote_input_given_output,
    quote_output_given_input,
)

__all__ = [
    "ConstantProductAMM",
    "SwapQuote",
    "constant_product",
    "check_quote_bounds",
    "fee_multiplier",
    "quote_output_given_input",
    "quote_input_given_output",
]
