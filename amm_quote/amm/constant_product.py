"""Constant product AMM math.

Exchanges hold a token against the reference asset and price with the
constant product formula: x * y = k, with a 0.3% fee on input amounts.
All results truncate exactly like on-chain integer division.
"""

from __future__ import annotations

from dataclasses import dataclass

from amm_quote.constants import BPS_DENOMINATOR, DEFAULT_FEE_BPS, MAX_AMOUNT
from amm_quote.errors import InvalidTradeError
from amm_quote.safe_int import S


def fee_multiplier(fee_bps: int) -> int:
    """Fee multiplier for AMM math (10000 - fee_bps).

    For 30 bps (0.3%), this returns 9970, the 997/1000 factor.

    Raises:
        ValueError: If fee_bps is outside [0, 10000)
    """
    if not 0 <= fee_bps < BPS_DENOMINATOR:
        raise ValueError(f"Fee must be in [0, {BPS_DENOMINATOR}) bps, got {fee_bps}")
    return BPS_DENOMINATOR - fee_bps


def check_quote_bounds(amount: int) -> int:
    """Reject degenerate quote results.

    Raises:
        InvalidTradeError: If amount <= 0 or amount >= MAX_AMOUNT
    """
    if amount <= 0 or amount >= MAX_AMOUNT:
        raise InvalidTradeError(f"Degenerate quote amount: {amount}")
    return amount


@dataclass(frozen=True)
class SwapQuote:
    """A guarded quote against one exchange, reserves oriented in -> out."""

    amount_in: int
    amount_out: int
    reserve_in: int
    reserve_out: int


class ConstantProductAMM:
    """Constant product AMM math.

    Formula: amount_out = (amount_in * 9970 * reserve_out) / (reserve_in * 10000 + amount_in * 9970)

    The 9970/10000 factor accounts for the 0.3% fee.
    """

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_bps: int = DEFAULT_FEE_BPS,
    ) -> int:
        """Calculate output amount using constant product formula.

        Formula: amount_out = (in * fee * res_out) / (res_in * 10000 + in * fee)

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee_bps: Exchange fee in basis points (default 30)

        Returns:
            Output token amount (0 for a zero input)

        Raises:
            InvalidTradeError: If either reserve is zero or amount_in is negative
        """
        if reserve_in <= 0 or reserve_out <= 0:
            raise InvalidTradeError(f"Empty reserves: in={reserve_in} out={reserve_out}")
        if amount_in < 0:
            raise InvalidTradeError(f"Negative input amount: {amount_in}")

        amount_in_with_fee = S(amount_in) * fee_multiplier(fee_bps)
        numerator = amount_in_with_fee * reserve_out
        denominator = S(reserve_in) * BPS_DENOMINATOR + amount_in_with_fee

        return (numerator // denominator).value

    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        fee_bps: int = DEFAULT_FEE_BPS,
    ) -> int:
        """Calculate required input for desired output.

        Formula: amount_in = (res_in * out * 10000) / ((res_out - out) * fee) + 1

        The +1 is applied even when the division is exact, matching the
        exchange contract.

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee_bps: Exchange fee in basis points (default 30)

        Returns:
            Required input token amount

        Raises:
            InvalidTradeError: If either reserve is zero, amount_out is
                negative, or amount_out would drain the output reserve
        """
        if reserve_in <= 0 or reserve_out <= 0:
            raise InvalidTradeError(f"Empty reserves: in={reserve_in} out={reserve_out}")
        if amount_out < 0:
            raise InvalidTradeError(f"Negative output amount: {amount_out}")
        if amount_out >= reserve_out:
            raise InvalidTradeError(
                f"Output {amount_out} exceeds available reserve {reserve_out}"
            )

        numerator = S(reserve_in) * amount_out * BPS_DENOMINATOR
        denominator = (S(reserve_out) - amount_out) * fee_multiplier(fee_bps)

        return ((numerator // denominator) + 1).value

    def quote_output(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_bps: int = DEFAULT_FEE_BPS,
    ) -> SwapQuote:
        """Forward quote (exact input) with the degenerate-result guard.

        Raises:
            InvalidTradeError: If the quote fails or the output is not in (0, MAX_AMOUNT)
        """
        amount_out = check_quote_bounds(
            self.get_amount_out(amount_in, reserve_in, reserve_out, fee_bps)
        )
        return SwapQuote(
            amount_in=amount_in,
            amount_out=amount_out,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
        )

    def quote_input(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        fee_bps: int = DEFAULT_FEE_BPS,
    ) -> SwapQuote:
        """Reverse quote (exact output) with the degenerate-result guard.

        Raises:
            InvalidTradeError: If the quote fails or the input is not in (0, MAX_AMOUNT)
        """
        amount_in = check_quote_bounds(
            self.get_amount_in(amount_out, reserve_in, reserve_out, fee_bps)
        )
        return SwapQuote(
            amount_in=amount_in,
            amount_out=amount_out,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
        )


# Singleton instance
constant_product = ConstantProductAMM()


def quote_output_given_input(
    input_amount: int,
    input_reserve: int,
    output_reserve: int,
    fee_bps: int = DEFAULT_FEE_BPS,
) -> int:
    """Output received for selling input_amount (guarded forward quote)."""
    return constant_product.quote_output(input_amount, input_reserve, output_reserve, fee_bps).amount_out


def quote_input_given_output(
    output_amount: int,
    input_reserve: int,
    output_reserve: int,
    fee_bps: int = DEFAULT_FEE_BPS,
) -> int:
    """Input required to receive exactly output_amount (guarded reverse quote)."""
    return constant_product.quote_input(output_amount, input_reserve, output_reserve, fee_bps).amount_in


__all__ = [
    "ConstantProductAMM",
    "SwapQuote",
    "constant_product",
    "check_quote_bounds",
    "fee_multiplier",
    "quote_output_given_input",
    "quote_input_given_output",
]
