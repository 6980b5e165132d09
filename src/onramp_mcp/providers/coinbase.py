"""Coinbase Pay checkout URLs."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import urlencode

from onramp_mcp.chains import ChainMetadata
from onramp_mcp.core.constants import COINBASEPAY_API_KEY, EXTENSION_CONTEXT
from onramp_mcp.providers.base import ChainBoundProvider

COINBASE_PAY_URL = "https://pay.coinbase.com/buy"


class CoinbasePayProvider(ChainBoundProvider):
    """Coinbase Pay on-ramp, a pure URL template."""

    name = "coinbase"

    def __init__(self, app_id: str = COINBASEPAY_API_KEY) -> None:
        self.app_id = app_id

    def has_chain_fields(self, chain: ChainMetadata) -> bool:
        return bool(chain.coinbase_pay_currencies)

    def purchase_url(self, address: str, chain: ChainMetadata) -> str:
        # Compact separators match JSON.stringify output
        destination_wallets = json.dumps(
            [{"address": address, "assets": list(chain.coinbase_pay_currencies)}],
            separators=(",", ":"),
        )
        query = urlencode(
            {
                "appId": self.app_id,
                "attribution": EXTENSION_CONTEXT,
                "destinationWallets": destination_wallets,
            }
        )
        return f"{COINBASE_PAY_URL}?{query}"

    async def build_url(self, address: str, chain_id: str, **kwargs: Any) -> str:
        return self.purchase_url(address, self.chain_for(chain_id))
