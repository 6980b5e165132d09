"""Transak checkout URLs."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from onramp_mcp.chains import ChainMetadata
from onramp_mcp.core.constants import TRANSAK_API_KEY, TRANSAK_HOST_URL
from onramp_mcp.providers.base import ChainBoundProvider

TRANSAK_URL = "https://global.transak.com/"


class TransakProvider(ChainBoundProvider):
    """Transak on-ramp, a pure URL template."""

    name = "transak"

    def __init__(self, api_key: str = TRANSAK_API_KEY, host_url: str = TRANSAK_HOST_URL) -> None:
        self.api_key = api_key
        self.host_url = host_url

    def has_chain_fields(self, chain: ChainMetadata) -> bool:
        return bool(chain.transak_currencies)

    def purchase_url(self, address: str, chain: ChainMetadata) -> str:
        query = urlencode(
            {
                "apiKey": self.api_key,
                "hostURL": self.host_url,
                "cryptoCurrencyList": ",".join(chain.transak_currencies),
                "defaultCryptoCurrency": chain.transak_currencies[0],
                "networks": chain.network,
                "walletAddress": address,
            }
        )
        return f"{TRANSAK_URL}?{query}"

    async def build_url(self, address: str, chain_id: str, **kwargs: Any) -> str:
        return self.purchase_url(address, self.chain_for(chain_id))
