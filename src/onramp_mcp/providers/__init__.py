"""Buy URL providers for on-ramp services and testnet faucets."""

from onramp_mcp.providers.base import BuyUrlProvider, ChainBoundProvider
from onramp_mcp.providers.coinbase import CoinbasePayProvider
from onramp_mcp.providers.faucet import FAUCET_URLS, FaucetProvider
from onramp_mcp.providers.fallback import EmptyUrlFallback, FallbackPolicy
from onramp_mcp.providers.moonpay import MoonPayProvider
from onramp_mcp.providers.remote import RemoteUrlProvider
from onramp_mcp.providers.requests_fetcher import FetchResult, RequestsFetcher
from onramp_mcp.providers.transak import TransakProvider
from onramp_mcp.providers.wyre import WyreCheckoutFallback, WyreProvider

__all__ = [
    "BuyUrlProvider",
    "ChainBoundProvider",
    "RemoteUrlProvider",
    "FallbackPolicy",
    "EmptyUrlFallback",
    "WyreCheckoutFallback",
    "RequestsFetcher",
    "FetchResult",
    "WyreProvider",
    "TransakProvider",
    "MoonPayProvider",
    "CoinbasePayProvider",
    "FaucetProvider",
    "FAUCET_URLS",
]
