"""Buy and faucet URL resolution for cryptocurrency on-ramps."""

from onramp_mcp.errors import BuyUrlError, UnsupportedChainError, UnsupportedServiceError
from onramp_mcp.resolver import BuyUrlResolver, get_buy_url

__all__ = [
    "BuyUrlResolver",
    "get_buy_url",
    "BuyUrlError",
    "UnsupportedChainError",
    "UnsupportedServiceError",
]
