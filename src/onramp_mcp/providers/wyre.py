"""Wyre purchase URLs via the fiat on-ramp endpoint."""

from __future__ import annotations

from urllib.parse import urlencode

from onramp_mcp.chains import ChainMetadata
from onramp_mcp.core.constants import SWAPS_API_V2_BASE_URL
from onramp_mcp.providers.fallback import FallbackPolicy
from onramp_mcp.providers.remote import RemoteUrlProvider
from onramp_mcp.providers.requests_fetcher import RequestsFetcher

WYRE_CHECKOUT_URL = "https://pay.sendwyre.com/purchase"
WYRE_ACCOUNT_ID = "AC-7AG3W4XH4N2"


class WyreCheckoutFallback(FallbackPolicy):
    """Static Wyre Checkout URL built from the chain's Wyre codes."""

    def fallback_url(self, address: str, chain: ChainMetadata) -> str:
        srn = chain.wyre.srn if chain.wyre else ""
        currency_code = chain.wyre.currency_code if chain.wyre else ""
        return (
            f"{WYRE_CHECKOUT_URL}?dest={srn}:{address}&destCurrency={currency_code}"
            f"&accountId={WYRE_ACCOUNT_ID}&paymentMethod=debit-card"
        )


class WyreProvider(RemoteUrlProvider):
    """Wyre on-ramp.

    Asks the swaps API for a prepared URL and falls back to the static
    Wyre Checkout URL when that lookup fails.
    """

    name = "wyre"
    label = "Wyre"

    def __init__(
        self,
        fetcher: RequestsFetcher | None = None,
        base_url: str = SWAPS_API_V2_BASE_URL,
        fallback: FallbackPolicy | None = None,
    ) -> None:
        super().__init__(fallback or WyreCheckoutFallback(), fetcher, base_url)

    def has_chain_fields(self, chain: ChainMetadata) -> bool:
        # Chains without Wyre codes still get a lookup and a checkout fallback
        return True

    def lookup_url(self, address: str, chain: ChainMetadata) -> str:
        network_id = int(chain.chain_id, 16)
        query = urlencode({"serviceName": self.name, "destinationAddress": address})
        return f"{self.base_url}/networks/{network_id}/fiatOnRampUrl?{query}"
