"""Tests for QuoteConfig."""

import pytest

from amm_quote.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from amm_quote.errors import InvalidAmountError


class TestQuoteConfig:
    def test_defaults(self):
        config = QuoteConfig()
        assert config.fee_bps == 30
        assert config.slippage_bps == 200
        assert config.min_gas_balance == 10**16
        assert config.decimals == 18
        assert config.reference_asset == "ETH"
        assert config.gas_margin_bps == 1_000
        assert config.deadline_seconds == 900
        assert config == DEFAULT_QUOTE_CONFIG

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"fee_bps": 10_000},
            {"fee_bps": -1},
            {"slippage_bps": 10_001},
            {"min_gas_balance": -1},
            {"decimals": 78},
            {"gas_margin_bps": -1},
            {"deadline_seconds": 0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            QuoteConfig(**kwargs)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_QUOTE_CONFIG.fee_bps = 0  # type: ignore[misc]


class TestFromEnv:
    def test_empty_environment(self):
        assert QuoteConfig.from_env({}) == QuoteConfig()

    def test_reads_variables(self):
        config = QuoteConfig.from_env(
            {
                "AMM_QUOTE_FEE_BPS": "25",
                "AMM_QUOTE_SLIPPAGE_BPS": "50",
                "AMM_QUOTE_MIN_GAS_BALANCE": "0.02",
                "AMM_QUOTE_REFERENCE_ASSET": "weth",
                "AMM_QUOTE_GAS_MARGIN_BPS": "2000",
                "AMM_QUOTE_DEADLINE_SECONDS": "60",
            }
        )
        assert config.fee_bps == 25
        assert config.slippage_bps == 50
        assert config.min_gas_balance == 2 * 10**16
        assert config.reference_asset == "WETH"
        assert config.gas_margin_bps == 2_000
        assert config.deadline_seconds == 60

    def test_min_gas_balance_uses_decimals(self):
        config = QuoteConfig.from_env({"AMM_QUOTE_DECIMALS": "6", "AMM_QUOTE_MIN_GAS_BALANCE": "1.5"})
        assert config.min_gas_balance == 1_500_000

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv("AMM_QUOTE_SLIPPAGE_BPS", "75")
        assert QuoteConfig.from_env().slippage_bps == 75

    def test_malformed_integer(self):
        with pytest.raises(ValueError):
            QuoteConfig.from_env({"AMM_QUOTE_FEE_BPS": "abc"})

    def test_malformed_gas_balance(self):
        with pytest.raises(InvalidAmountError):
            QuoteConfig.from_env({"AMM_QUOTE_MIN_GAS_BALANCE": "-1"})

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            QuoteConfig.from_env({"AMM_QUOTE_FEE_BPS": "10000"})
