"""Quote configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from amm_quote.constants import (
    ALLOWED_SLIPPAGE_BPS,
    BPS_DENOMINATOR,
    DEADLINE_FROM_NOW,
    DEFAULT_FEE_BPS,
    ETH,
    GAS_MARGIN_BPS,
    MIN_GAS_BALANCE,
    TOKEN_DECIMALS,
)
from amm_quote.math.fixed_point import parse_units

ENV_PREFIX = "AMM_QUOTE_"


@dataclass(frozen=True)
class QuoteConfig:
    """Centralized configuration for quoting and validation.

    Attributes:
        fee_bps: Exchange fee in basis points (default: 30)
        slippage_bps: Allowed slippage in basis points (default: 200)
        min_gas_balance: Minimum gas asset balance to allow a trade (default: 0.01 ETH)
        decimals: Decimals used to parse entered amounts (default: 18)
        reference_asset: Asset every exchange trades against (default: ETH)
        gas_margin_bps: Extra gas limit added to estimates (default: 1000 = 10%)
        deadline_seconds: Swap deadline from submission time (default: 15 minutes)
    """

    fee_bps: int = DEFAULT_FEE_BPS
    slippage_bps: int = ALLOWED_SLIPPAGE_BPS
    min_gas_balance: int = MIN_GAS_BALANCE
    decimals: int = TOKEN_DECIMALS
    reference_asset: str = ETH
    gas_margin_bps: int = GAS_MARGIN_BPS
    deadline_seconds: int = DEADLINE_FROM_NOW

    def __post_init__(self) -> None:
        if not 0 <= self.fee_bps < BPS_DENOMINATOR:
            raise ValueError(f"fee_bps must be in [0, {BPS_DENOMINATOR}), got {self.fee_bps}")
        if not 0 <= self.slippage_bps <= BPS_DENOMINATOR:
            raise ValueError(
                f"slippage_bps must be in [0, {BPS_DENOMINATOR}], got {self.slippage_bps}"
            )
        if self.min_gas_balance < 0:
            raise ValueError(f"min_gas_balance cannot be negative: {self.min_gas_balance}")
        if not 0 <= self.decimals <= 77:
            raise ValueError(f"decimals must be in [0, 77], got {self.decimals}")
        if self.gas_margin_bps < 0:
            raise ValueError(f"gas_margin_bps cannot be negative: {self.gas_margin_bps}")
        if self.deadline_seconds <= 0:
            raise ValueError(f"deadline_seconds must be positive: {self.deadline_seconds}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> QuoteConfig:
        """Build a config from AMM_QUOTE_* environment variables.

        Recognized variables:
        - AMM_QUOTE_FEE_BPS, AMM_QUOTE_SLIPPAGE_BPS, AMM_QUOTE_GAS_MARGIN_BPS
        - AMM_QUOTE_MIN_GAS_BALANCE: decimal amount of the gas asset (e.g. "0.01")
        - AMM_QUOTE_DECIMALS, AMM_QUOTE_DEADLINE_SECONDS
        - AMM_QUOTE_REFERENCE_ASSET

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def _int(name: str, default: int) -> int:
            raw = env.get(ENV_PREFIX + name)
            return default if raw is None else int(raw)

        decimals = _int("DECIMALS", defaults.decimals)
        raw_min_gas = env.get(ENV_PREFIX + "MIN_GAS_BALANCE")
        min_gas_balance = (
            defaults.min_gas_balance if raw_min_gas is None else parse_units(raw_min_gas, decimals)
        )

        return cls(
            fee_bps=_int("FEE_BPS", defaults.fee_bps),
            slippage_bps=_int("SLIPPAGE_BPS", defaults.slippage_bps),
            min_gas_balance=min_gas_balance,
            decimals=decimals,
            reference_asset=env.get(ENV_PREFIX + "REFERENCE_ASSET", defaults.reference_asset).upper(),
            gas_margin_bps=_int("GAS_MARGIN_BPS", defaults.gas_margin_bps),
            deadline_seconds=_int("DEADLINE_SECONDS", defaults.deadline_seconds),
        )


# Default configuration instance
DEFAULT_QUOTE_CONFIG = QuoteConfig()
