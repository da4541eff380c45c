"""Spot exchange rates for display and USD conversion.

These never feed trade execution. Missing or empty reserves make a rate
unavailable (None) instead of raising, so a display can degrade gracefully.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from amm_quote.constants import DAI, ETH, ONE_18, TOKEN_DECIMALS
from amm_quote.models.context import ReservePair, TradeContext
from amm_quote.models.types import normalize_symbol

logger = structlog.get_logger()


def exchange_rate(
    input_reserve: int | None,
    output_reserve: int | None,
    invert: bool = False,
    input_decimals: int = TOKEN_DECIMALS,
    output_decimals: int = TOKEN_DECIMALS,
) -> int | None:
    """Spot rate of a reserve pair as an 18-decimal fixed-point value.

    Args:
        input_reserve: Reserve of the asset being priced against
        output_reserve: Reserve of the asset the rate is expressed in
        invert: Return input per output instead of output per input
        input_decimals: Decimals of the input asset
        output_decimals: Decimals of the output asset

    Returns:
        output/input (or input/output when invert) scaled by 10^18,
        or None if either reserve is missing or zero
    """
    if not input_reserve or not output_reserve:
        return None

    if invert:
        rate = input_reserve * ONE_18 // output_reserve
        return rate * 10**output_decimals // 10**input_decimals
    rate = output_reserve * ONE_18 // input_reserve
    return rate * 10**input_decimals // 10**output_decimals


def pair_rate(pair: ReservePair | None, invert: bool = False) -> int | None:
    """Tokens per unit of reference asset for an exchange (None if unavailable)."""
    if pair is None:
        return None
    return exchange_rate(pair.reserve_reference, pair.reserve_token, invert=invert)


def usd_exchange_rate(
    asset: str,
    reserves: Mapping[str, ReservePair],
    usd_asset: str = DAI,
    reference_asset: str = ETH,
) -> int | None:
    """USD value of one unit of asset, priced through the USD stablecoin exchange.

    Args:
        asset: Asset to price
        reserves: Exchange reserves keyed by non-reference asset
        usd_asset: Stablecoin whose exchange provides the USD/reference rate
        reference_asset: Asset every exchange trades against

    Returns:
        USD per unit of asset (18-decimal), or None if unavailable
    """
    asset = normalize_symbol(asset)
    usd_asset = normalize_symbol(usd_asset)

    if asset == usd_asset:
        return ONE_18

    usd_rate = pair_rate(reserves.get(usd_asset))
    if usd_rate is None:
        logger.debug("usd_rate_unavailable", asset=asset, usd_asset=usd_asset)
        return None

    if asset == normalize_symbol(reference_asset):
        return usd_rate

    token_rate = pair_rate(reserves.get(asset))
    if not token_rate:
        logger.debug("token_rate_unavailable", asset=asset)
        return None

    return usd_rate * ONE_18 // token_rate


def context_usd_rate(asset: str, context: TradeContext) -> int | None:
    """USD value of one unit of asset using the snapshot's reserves and USD asset."""
    return usd_exchange_rate(
        asset,
        context.reserves,
        usd_asset=context.usd_asset,
        reference_asset=context.reference_asset,
    )


def dollarize(amount: int, rate: int | None) -> int | None:
    """Convert an amount to USD (18-decimal) with a rate from usd_exchange_rate."""
    if rate is None:
        return None
    return amount * rate // ONE_18


__all__ = ["exchange_rate", "pair_rate", "usd_exchange_rate", "context_usd_rate", "dollarize"]
