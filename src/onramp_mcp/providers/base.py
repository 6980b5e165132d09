"""Base provider interface for buy URL construction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from onramp_mcp.chains import BUYABLE_CHAINS_MAP, ChainMetadata, get_chain_metadata
from onramp_mcp.errors import UnsupportedChainError


class BuyUrlProvider(ABC):
    """Abstract base class for purchase and faucet providers."""

    #: Service name the provider is registered under
    name: str = ""

    @abstractmethod
    async def build_url(self, address: str, chain_id: str, **kwargs: Any) -> str:
        """Build the URL at which the user can acquire funds.

        Args:
            address: Destination wallet address
            chain_id: Hex chain identifier
            **kwargs: Additional provider-specific options

        Returns:
            The URL to open
        """
        pass

    @abstractmethod
    def supports_chain(self, chain_id: str) -> bool:
        """Check if this provider can build a URL for the given chain.

        Args:
            chain_id: Hex chain identifier

        Returns:
            True if this provider can handle the chain
        """
        pass


class ChainBoundProvider(BuyUrlProvider):
    """Provider that reads per-chain metadata to build its URL."""

    @abstractmethod
    def has_chain_fields(self, chain: ChainMetadata) -> bool:
        """Check that the chain record carries the fields this provider reads."""
        pass

    def supports_chain(self, chain_id: str) -> bool:
        chain = BUYABLE_CHAINS_MAP.get(chain_id)
        return chain is not None and self.has_chain_fields(chain)

    def chain_for(self, chain_id: str) -> ChainMetadata:
        """Look up the chain record this provider needs.

        Raises:
            UnsupportedChainError: If the chain is unknown or lacks this provider's fields
        """
        chain = get_chain_metadata(chain_id, self.name)
        if not self.has_chain_fields(chain):
            raise UnsupportedChainError(chain_id, self.name)
        return chain
