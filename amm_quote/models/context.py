"""Pydantic models for the market snapshot a quote is computed against.

Balances, allowances and reserves are read by an external data layer and
handed to the validator as one immutable snapshot per request.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from amm_quote.constants import DAI, ETH, SOCKS
from amm_quote.models.types import Amount, AssetSymbol, normalize_symbol


class ReservePair(BaseModel):
    """Liquidity of one exchange: a token against the reference asset."""

    model_config = ConfigDict(frozen=True)

    reserve_reference: Amount = Field(description="Reference asset (ETH) held by the exchange")
    reserve_token: Amount = Field(description="Token held by the exchange")

    @property
    def is_degenerate(self) -> bool:
        """True if either side is empty and no quote can be made."""
        return self.reserve_reference == 0 or self.reserve_token == 0

    def oriented(self, reference_in: bool) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out).

        Args:
            reference_in: True when the reference asset is being sold into
                the exchange, False when the token is
        """
        if reference_in:
            return self.reserve_reference, self.reserve_token
        return self.reserve_token, self.reserve_reference


class TradeContext(BaseModel):
    """Snapshot of everything a buy or sell validation reads.

    Balances and allowances are keyed by asset symbol; an asset missing from
    the mapping is unknown (e.g. no account connected) and its check is
    skipped. Reserves are keyed by the non-reference asset of each exchange.
    """

    model_config = ConfigDict(frozen=True)

    target_asset: AssetSymbol = SOCKS
    selected_asset: AssetSymbol = ETH
    reference_asset: AssetSymbol = ETH
    gas_asset: AssetSymbol | None = None
    usd_asset: AssetSymbol = DAI

    balances: dict[AssetSymbol, Amount] = Field(default_factory=dict)
    allowances: dict[AssetSymbol, Amount] = Field(default_factory=dict)
    reserves: dict[AssetSymbol, ReservePair] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _check_duplicate_keys(cls, data: Any) -> Any:
        # Keys are case-insensitive: "eth" and "ETH" cannot both appear
        if not isinstance(data, Mapping):
            return data
        for field in ("balances", "allowances", "reserves"):
            mapping = data.get(field)
            if not isinstance(mapping, Mapping):
                continue
            seen: dict[str, str] = {}
            for key in mapping:
                if not isinstance(key, str):
                    continue
                normalized = normalize_symbol(key)
                if normalized in seen:
                    raise ValueError(
                        f"{field} has duplicate asset {normalized}: {seen[normalized]!r} and {key!r}"
                    )
                seen[normalized] = key
        return data

    @model_validator(mode="after")
    def _check_assets(self) -> "TradeContext":
        if self.target_asset == self.reference_asset:
            raise ValueError("target_asset cannot be the reference asset")
        if self.reference_asset in self.reserves:
            raise ValueError("reserves must be keyed by the non-reference asset of each exchange")
        return self

    @property
    def effective_gas_asset(self) -> str:
        """Asset that pays for gas (the reference asset unless overridden)."""
        return self.gas_asset or self.reference_asset

    @property
    def selected_is_reference(self) -> bool:
        return self.selected_asset == self.reference_asset

    def balance_of(self, asset: str) -> int | None:
        return self.balances.get(normalize_symbol(asset))

    def allowance_of(self, asset: str) -> int | None:
        return self.allowances.get(normalize_symbol(asset))

    def reserve_pair(self, asset: str) -> ReservePair | None:
        return self.reserves.get(normalize_symbol(asset))

    @property
    def is_ready(self) -> bool:
        """True if every exchange needed to quote the selected pair is known."""
        needed = [self.target_asset]
        if not self.selected_is_reference:
            needed.append(self.selected_asset)
        return all(asset in self.reserves for asset in needed)
