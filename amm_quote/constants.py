"""Protocol constants for the AMM quoting engine.

Centralizes well-known symbols and exchange parameters.
"""

# Largest representable token amount (uint256 max)
MAX_AMOUNT = 2**256 - 1

# Basis points denominator (10000 bps = 100%)
BPS_DENOMINATOR = 10_000

# Token amounts are scaled by 10^18
TOKEN_DECIMALS = 18
ONE_18 = 10**TOKEN_DECIMALS

# Exchange fee in basis points (30 bps = 0.3%, i.e. the 997/1000 multiplier)
DEFAULT_FEE_BPS = 30

# Allowed slippage in basis points (200 bps = 2%)
ALLOWED_SLIPPAGE_BPS = 200

# Minimum gas asset balance required to submit a transaction (0.01 ETH)
MIN_GAS_BALANCE = 10**16

# Gas limit margin in basis points (1000 bps = 10%)
GAS_MARGIN_BPS = 1_000

# Swap deadline, in seconds from submission
DEADLINE_FROM_NOW = 60 * 15

# Well-known asset symbols
ETH = "ETH"
SOCKS = "SOCKS"
DAI = "DAI"
