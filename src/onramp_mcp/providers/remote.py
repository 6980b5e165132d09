"""Providers that ask a remote endpoint for the URL, with a fallback policy."""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any

import requests

from onramp_mcp.chains import ChainMetadata
from onramp_mcp.core.constants import SWAPS_API_V2_BASE_URL
from onramp_mcp.providers.base import ChainBoundProvider
from onramp_mcp.providers.fallback import FallbackPolicy
from onramp_mcp.providers.requests_fetcher import RequestsFetcher

logger = logging.getLogger(__name__)


class RemoteUrlProvider(ChainBoundProvider):
    """Fetches a ready-made URL from a JSON endpoint.

    Any failure of the lookup is logged and replaced by the result of the
    provider's fallback policy. The lookup error never reaches the caller.
    """

    #: Human-readable label used in log messages
    label: str = ""

    def __init__(
        self,
        fallback: FallbackPolicy,
        fetcher: RequestsFetcher | None = None,
        base_url: str = SWAPS_API_V2_BASE_URL,
    ) -> None:
        self.fallback = fallback
        self.fetcher = fetcher or RequestsFetcher()
        self.base_url = base_url.rstrip("/")

    @abstractmethod
    def lookup_url(self, address: str, chain: ChainMetadata) -> str:
        """Build the URL of the remote lookup request."""
        pass

    async def build_url(self, address: str, chain_id: str, **kwargs: Any) -> str:
        """Fetch the provider URL, falling back on any failure.

        Args:
            address: Destination wallet address
            chain_id: Hex chain identifier
            **kwargs: Additional options
                - timeout: Request timeout in seconds

        Returns:
            The fetched URL, or the fallback policy's URL

        Raises:
            UnsupportedChainError: If the chain has no metadata for this provider
        """
        chain = self.chain_for(chain_id)
        request_url = self.lookup_url(address, chain)

        try:
            result = await self.fetcher.fetch_json(request_url, timeout=kwargs.get("timeout"))
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Failed to create a {self.label} purchase URL: {e!r}")
            return self.fallback.fallback_url(address, chain)

        payload = result.payload
        url = payload.get("url") if isinstance(payload, dict) else None
        if result.ok and url and isinstance(url, str):
            return url

        logger.warning(
            f"Failed to create a {self.label} purchase URL "
            f"(status={result.status_code}): {payload!r}"
        )
        return self.fallback.fallback_url(address, chain)
