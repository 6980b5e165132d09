"""Testnet faucets with fixed URLs."""

from __future__ import annotations

from typing import Any

from onramp_mcp.providers.base import BuyUrlProvider

FAUCET_URLS: dict[str, str] = {
    "metamask-faucet": "https://faucet.metamask.io/",
    "rinkeby-faucet": "https://www.rinkeby.io/",
    "kovan-faucet": "https://github.com/kovan-testnet/faucet",
    "goerli-faucet": "https://goerli-faucet.slock.it/",
}


class FaucetProvider(BuyUrlProvider):
    """Returns a faucet's literal URL, whatever the address and chain."""

    def __init__(self, name: str, url: str) -> None:
        self.name = name
        self.url = url

    def supports_chain(self, chain_id: str) -> bool:
        return True

    async def build_url(self, address: str, chain_id: str, **kwargs: Any) -> str:
        return self.url
