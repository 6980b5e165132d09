"""Fallback policies for network-assisted providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from onramp_mcp.chains import ChainMetadata


class FallbackPolicy(ABC):
    """Decides what a remote provider returns when its lookup fails."""

    @abstractmethod
    def fallback_url(self, address: str, chain: ChainMetadata) -> str:
        """Return the URL to use instead of the failed lookup.

        Args:
            address: Destination wallet address
            chain: Metadata of the requested chain

        Returns:
            The substitute URL (may be empty)
        """
        pass


class EmptyUrlFallback(FallbackPolicy):
    """Returns an empty string."""

    def fallback_url(self, address: str, chain: ChainMetadata) -> str:
        return ""
