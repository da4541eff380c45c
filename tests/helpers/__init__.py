"""Test helpers module for shared test utilities.

- constants: Asset symbols, reserves and pinned quotes
- factories: Context and reserve factory functions
"""

from tests.helpers.constants import (
    BUY_ONE_SOCKS_WITH_ETH,
    DAI,
    DAI_RESERVES,
    DEFAULT_RESERVES,
    ETH,
    GNO,
    GNO_RESERVES,
    ONE,
    SELL_ONE_ETH_FOR_SOCKS,
    SOCKS,
    SOCKS_RESERVES,
)
from tests.helpers.factories import make_context, make_reserves

__all__ = [
    # Constants
    "ONE",
    "ETH",
    "SOCKS",
    "DAI",
    "GNO",
    "SOCKS_RESERVES",
    "DAI_RESERVES",
    "GNO_RESERVES",
    "DEFAULT_RESERVES",
    "BUY_ONE_SOCKS_WITH_ETH",
    "SELL_ONE_ETH_FOR_SOCKS",
    # Factories
    "make_context",
    "make_reserves",
]
