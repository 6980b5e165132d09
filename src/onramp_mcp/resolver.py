"""Resolve the URL at which a user can acquire funds on a chain."""

from __future__ import annotations

import logging
from typing import Mapping

from onramp_mcp.core.providers import DEFAULT_SERVICES, default_providers, get_provider
from onramp_mcp.errors import UnsupportedChainError
from onramp_mcp.providers import BuyUrlProvider

logger = logging.getLogger(__name__)


class BuyUrlResolver:
    """Picks a provider for a chain and service, and builds its URL."""

    def __init__(
        self,
        providers: Mapping[str, BuyUrlProvider] | None = None,
        default_services: Mapping[str, str] | None = None,
    ) -> None:
        self.providers = default_providers if providers is None else providers
        self.default_services = DEFAULT_SERVICES if default_services is None else default_services

    def default_service_for_chain(self, chain_id: str) -> str:
        """Return the service used when none is requested.

        Raises:
            UnsupportedChainError: If the chain has no default service
        """
        try:
            service = self.default_services[chain_id]
        except KeyError:
            raise UnsupportedChainError(chain_id) from None
        return getattr(service, "value", service)

    def provider_for(self, service: str) -> BuyUrlProvider:
        """Return the provider for a service name.

        Raises:
            UnsupportedServiceError: If the service is unknown
        """
        return get_provider(service, self.providers)

    async def resolve(
        self,
        chain_id: str,
        address: str,
        service: str | None = None,
        timeout: float | None = None,
    ) -> str:
        """Build the buy URL for an address on a chain.

        Args:
            chain_id: Hex chain identifier (e.g. "0x1")
            address: Destination address for the purchased funds
            service: Service name; defaults by chain when omitted
            timeout: Timeout in seconds for network-assisted providers

        Returns:
            The URL to open. A MoonPay signing failure yields an empty string.

        Raises:
            UnsupportedChainError: If no service is given and the chain has no default,
                or the service cannot serve the chain
            UnsupportedServiceError: If the service is unknown
        """
        if not service:
            service = self.default_service_for_chain(chain_id)

        provider = self.provider_for(service)
        logger.debug(f"Resolving {service} buy URL for chain {chain_id}")
        return await provider.build_url(address, chain_id, timeout=timeout)


default_resolver = BuyUrlResolver()


async def get_buy_url(
    chain_id: str,
    address: str,
    service: str | None = None,
    timeout: float | None = None,
) -> str:
    """Resolve a buy URL with the default provider table."""
    return await default_resolver.resolve(chain_id, address, service, timeout)
