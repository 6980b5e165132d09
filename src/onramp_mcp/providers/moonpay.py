"""MoonPay purchase URLs, signed by the swaps API."""

from __future__ import annotations

from urllib.parse import urlencode

from onramp_mcp.chains import ChainMetadata
from onramp_mcp.core.constants import (
    EXTENSION_CONTEXT,
    MOONPAY_API_KEY,
    SWAPS_API_V2_BASE_URL,
)
from onramp_mcp.providers.fallback import EmptyUrlFallback, FallbackPolicy
from onramp_mcp.providers.remote import RemoteUrlProvider
from onramp_mcp.providers.requests_fetcher import RequestsFetcher

MOONPAY_BUY_URL = "https://buy.moonpay.com"


class MoonPayProvider(RemoteUrlProvider):
    """MoonPay on-ramp.

    The checkout URL must be signed server-side. When signing fails the
    provider returns an empty string; there is no unsigned fallback.
    """

    name = "moonpay"
    label = "MoonPay"

    def __init__(
        self,
        api_key: str = MOONPAY_API_KEY,
        fetcher: RequestsFetcher | None = None,
        base_url: str = SWAPS_API_V2_BASE_URL,
        fallback: FallbackPolicy | None = None,
    ) -> None:
        super().__init__(fallback or EmptyUrlFallback(), fetcher, base_url)
        self.api_key = api_key

    def has_chain_fields(self, chain: ChainMetadata) -> bool:
        return chain.moonpay is not None

    def checkout_url(self, address: str, chain: ChainMetadata) -> str:
        """Build the unsigned MoonPay checkout URL."""
        query = urlencode(
            {
                "apiKey": self.api_key,
                "walletAddress": address,
                "defaultCurrencyCode": chain.moonpay.default_currency_code,
                "showOnlyCurrencies": chain.moonpay.show_only_currencies,
            }
        )
        return f"{MOONPAY_BUY_URL}?{query}"

    def lookup_url(self, address: str, chain: ChainMetadata) -> str:
        query = urlencode(
            {
                "url": self.checkout_url(address, chain),
                "context": EXTENSION_CONTEXT,
            }
        )
        return f"{self.base_url}/moonpaySign/?{query}"
