"""Route resolution through the reference asset.

Every exchange pairs one token with the reference asset, so a trade is
either direct (one endpoint is the reference asset) or routed through the
reference asset in two hops.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from amm_quote.amm.constant_product import ConstantProductAMM, constant_product
from amm_quote.constants import DEFAULT_FEE_BPS, ETH
from amm_quote.errors import InvalidTradeError
from amm_quote.models.context import ReservePair
from amm_quote.models.trade import TradeDirection
from amm_quote.models.types import normalize_symbol
from amm_quote.routing.types import Hop, HopResult, RouteResult

logger = structlog.get_logger()


class RouteResolver:
    """Resolves buys and sells into exchange quotes.

    Buys fix the output and walk the path backwards with reverse quotes;
    sells fix the input and walk it forwards with forward quotes. Every
    hop result goes through the same degenerate-amount guard, and any hop
    failure fails the whole route.
    """

    def __init__(
        self,
        amm: ConstantProductAMM = constant_product,
        reference_asset: str = ETH,
        fee_bps: int = DEFAULT_FEE_BPS,
    ) -> None:
        self.amm = amm
        self.reference_asset = normalize_symbol(reference_asset)
        self.fee_bps = fee_bps

    def build_path(self, asset_in: str, asset_out: str) -> tuple[str, ...]:
        """Token path from asset_in to asset_out.

        Raises:
            InvalidTradeError: If both endpoints are the same asset
        """
        asset_in = normalize_symbol(asset_in)
        asset_out = normalize_symbol(asset_out)
        if asset_in == asset_out:
            raise InvalidTradeError(f"Cannot trade {asset_in} for itself")
        if self.reference_asset in (asset_in, asset_out):
            return (asset_in, asset_out)
        return (asset_in, self.reference_asset, asset_out)

    def build_hops(self, path: tuple[str, ...]) -> list[Hop]:
        hops = []
        for asset_in, asset_out in zip(path, path[1:]):
            reference_in = asset_in == self.reference_asset
            hops.append(
                Hop(
                    asset_in=asset_in,
                    asset_out=asset_out,
                    pool_asset=asset_out if reference_in else asset_in,
                    reference_in=reference_in,
                )
            )
        return hops

    def resolve(
        self,
        direction: TradeDirection,
        target_asset: str,
        other_asset: str,
        amount: int,
        reserves: Mapping[str, ReservePair],
    ) -> RouteResult:
        """Resolve a trade of the target asset against other_asset.

        Args:
            direction: BUY to acquire exactly `amount` of target_asset by paying
                other_asset; SELL to dispose of exactly `amount` of target_asset
                for other_asset
            target_asset: Asset being bought or sold
            other_asset: Asset paid (buy) or received (sell)
            amount: Exact output (buy) or exact input (sell)
            reserves: Exchange reserves keyed by non-reference asset

        Returns:
            RouteResult with the exact input and output amounts

        Raises:
            InvalidTradeError: If any hop is missing, degenerate, or out of bounds
        """
        if direction == TradeDirection.BUY:
            path = self.build_path(other_asset, target_asset)
        else:
            path = self.build_path(target_asset, other_asset)
        hops = self.build_hops(path)

        try:
            if direction == TradeDirection.BUY:
                results = self._walk_backward(hops, amount, reserves)
            else:
                results = self._walk_forward(hops, amount, reserves)
        except InvalidTradeError as err:
            logger.debug(
                "route_failed",
                direction=direction.value,
                path=list(path),
                amount=str(amount),
                reason=str(err),
            )
            raise

        route = RouteResult(
            direction=direction,
            input_amount=results[0].amount_in,
            output_amount=results[-1].amount_out,
            path=path,
            hops=tuple(results),
        )
        logger.debug(
            "route_resolved",
            direction=direction.value,
            path=list(path),
            input_amount=str(route.input_amount),
            output_amount=str(route.output_amount),
        )
        return route

    def _reserves_for(self, hop: Hop, reserves: Mapping[str, ReservePair]) -> tuple[int, int]:
        pair = reserves.get(hop.pool_asset)
        if pair is None:
            raise InvalidTradeError(f"No exchange reserves for {hop.pool_asset}")
        return pair.oriented(hop.reference_in)

    def _walk_forward(
        self,
        hops: list[Hop],
        amount_in: int,
        reserves: Mapping[str, ReservePair],
    ) -> list[HopResult]:
        """Exact input: each hop sells the previous hop's output."""
        results: list[HopResult] = []
        current = amount_in
        for i, hop in enumerate(hops):
            reserve_in, reserve_out = self._reserves_for(hop, reserves)
            try:
                quote = self.amm.quote_output(current, reserve_in, reserve_out, self.fee_bps)
            except InvalidTradeError as err:
                raise InvalidTradeError(f"Hop {i} ({hop.asset_in}->{hop.asset_out}): {err}") from err
            results.append(HopResult(hop=hop, amount_in=current, amount_out=quote.amount_out))
            current = quote.amount_out
        return results

    def _walk_backward(
        self,
        hops: list[Hop],
        amount_out: int,
        reserves: Mapping[str, ReservePair],
    ) -> list[HopResult]:
        """Exact output: each hop must produce the next hop's required input."""
        results: list[HopResult] = []
        current = amount_out
        for i in range(len(hops) - 1, -1, -1):
            hop = hops[i]
            reserve_in, reserve_out = self._reserves_for(hop, reserves)
            try:
                quote = self.amm.quote_input(current, reserve_in, reserve_out, self.fee_bps)
            except InvalidTradeError as err:
                raise InvalidTradeError(f"Hop {i} ({hop.asset_in}->{hop.asset_out}): {err}") from err
            results.append(HopResult(hop=hop, amount_in=quote.amount_in, amount_out=current))
            current = quote.amount_in
        results.reverse()
        return results


# Default resolver (ETH reference, 30 bps)
default_resolver = RouteResolver()


def resolve(
    direction: TradeDirection,
    target_asset: str,
    other_asset: str,
    amount: int,
    reserves: Mapping[str, ReservePair],
) -> tuple[int, int]:
    """Resolve a trade with the default resolver, returning (input, output)."""
    route = default_resolver.resolve(direction, target_asset, other_asset, amount, reserves)
    return route.input_amount, route.output_amount


__all__ = ["RouteResolver", "default_resolver", "resolve"]
