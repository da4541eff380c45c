"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass, field

from amm_quote.models.trade import TradeDirection


@dataclass(frozen=True)
class Hop:
    """One swap of a route: sell asset_in into the exchange of pool_asset."""

    asset_in: str
    asset_out: str
    # Non-reference asset whose exchange executes this hop
    pool_asset: str
    # True when the reference asset is the input of this hop
    reference_in: bool


@dataclass(frozen=True)
class HopResult:
    """Result of a single hop in a route."""

    hop: Hop
    amount_in: int
    amount_out: int


@dataclass(frozen=True)
class RouteResult:
    """Result of resolving a trade into one or two exchange quotes."""

    direction: TradeDirection
    input_amount: int
    output_amount: int
    path: tuple[str, ...]
    hops: tuple[HopResult, ...] = field(default_factory=tuple)

    @property
    def is_multihop(self) -> bool:
        """Check if the trade is routed through the reference asset."""
        return len(self.path) > 2

    @property
    def intermediate_amount(self) -> int | None:
        """Reference asset amount passed between hops (None for direct trades)."""
        if not self.is_multihop:
            return None
        return self.hops[0].amount_out


__all__ = ["Hop", "HopResult", "RouteResult"]
