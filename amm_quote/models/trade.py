"""Trade value types."""

from dataclasses import dataclass
from enum import Enum


class TradeDirection(str, Enum):
    """Whether the target asset is bought or sold.

    BUY fixes the output (an exact amount of the target asset is acquired);
    SELL fixes the input (an exact amount of the target asset is disposed of).
    """

    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class SlippageBand:
    """Acceptable range around an exact amount.

    Attributes:
        minimum: Lowest acceptable amount (what sells care about)
        maximum: Highest acceptable amount (what buys care about)
    """

    minimum: int
    maximum: int

    def __contains__(self, amount: int) -> bool:
        return self.minimum <= amount <= self.maximum
