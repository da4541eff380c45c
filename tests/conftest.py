"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from amm_quote.api.endpoints import get_validator
from amm_quote.api.main import app
from amm_quote.config import QuoteConfig
from amm_quote.models.context import TradeContext
from amm_quote.validation import TradeValidator
from tests.helpers import make_context


@pytest.fixture
def config() -> QuoteConfig:
    """Default quote configuration."""
    return QuoteConfig()


@pytest.fixture
def validator(config: QuoteConfig) -> TradeValidator:
    """Validator built from the config fixture."""
    return TradeValidator(config)


@pytest.fixture
def context() -> TradeContext:
    """Buy/sell SOCKS with ETH, well funded, all exchanges known."""
    return make_context()


@pytest.fixture
def client(validator: TradeValidator) -> Iterator[TestClient]:
    """API test client with the validator dependency overridden.

    Overrides are cleared afterwards so tests don't leak configuration.
    """
    app.dependency_overrides[get_validator] = lambda: validator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
