"""Slippage bounds around exact quote amounts."""

from amm_quote.constants import ALLOWED_SLIPPAGE_BPS, BPS_DENOMINATOR, MAX_AMOUNT
from amm_quote.models.trade import SlippageBand
from amm_quote.safe_int import S


def calculate_slippage_bounds(
    exact_amount: int,
    tolerance_bps: int = ALLOWED_SLIPPAGE_BPS,
) -> SlippageBand:
    """Expand an exact amount into the acceptable [minimum, maximum] band.

    offset = exact * tolerance / 10000, both endpoints clamped into
    [0, MAX_AMOUNT]. Buys use the maximum as their input limit, sells use
    the minimum as their output limit.

    Args:
        exact_amount: Exact input or output amount of a quote
        tolerance_bps: Allowed deviation in basis points (default 200 = 2%)

    Returns:
        SlippageBand with clamped minimum and maximum
    """
    if tolerance_bps < 0:
        raise ValueError(f"Slippage tolerance cannot be negative: {tolerance_bps}")

    amount = S(exact_amount).clamp(0, MAX_AMOUNT)
    offset = amount * tolerance_bps // BPS_DENOMINATOR
    return SlippageBand(
        minimum=amount.saturating_sub(offset).value,
        maximum=(amount + offset).clamp(0, MAX_AMOUNT).value,
    )


# Short alias used by the validator
bound = calculate_slippage_bounds

__all__ = ["calculate_slippage_bounds", "bound"]
