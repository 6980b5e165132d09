"""Provider registry for the buy URL resolver."""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from onramp_mcp.chains import ChainId
from onramp_mcp.core.constants import SWAPS_API_V2_BASE_URL
from onramp_mcp.errors import UnsupportedServiceError
from onramp_mcp.providers import (
    FAUCET_URLS,
    BuyUrlProvider,
    CoinbasePayProvider,
    FaucetProvider,
    MoonPayProvider,
    RequestsFetcher,
    TransakProvider,
    WyreProvider,
)

logger = logging.getLogger(__name__)


class Service(str, Enum):
    """Known exchange and faucet service names."""

    WYRE = "wyre"
    TRANSAK = "transak"
    MOONPAY = "moonpay"
    COINBASE = "coinbase"
    METAMASK_FAUCET = "metamask-faucet"
    RINKEBY_FAUCET = "rinkeby-faucet"
    KOVAN_FAUCET = "kovan-faucet"
    GOERLI_FAUCET = "goerli-faucet"


# Service used when the caller does not name one
DEFAULT_SERVICES: Mapping[str, Service] = MappingProxyType(
    {
        ChainId.MAINNET: Service.WYRE,
        ChainId.ROPSTEN: Service.METAMASK_FAUCET,
        ChainId.RINKEBY: Service.RINKEBY_FAUCET,
        ChainId.KOVAN: Service.KOVAN_FAUCET,
        ChainId.GOERLI: Service.GOERLI_FAUCET,
    }
)


def build_providers(
    fetcher: RequestsFetcher | None = None,
    base_url: str = SWAPS_API_V2_BASE_URL,
) -> Mapping[str, BuyUrlProvider]:
    """Build the service name to provider table.

    Args:
        fetcher: Shared JSON fetcher for the network-assisted providers
        base_url: Swaps API base URL

    Returns:
        Read-only mapping keyed by service name
    """
    fetcher = fetcher or RequestsFetcher()
    providers: dict[str, BuyUrlProvider] = {
        Service.WYRE.value: WyreProvider(fetcher=fetcher, base_url=base_url),
        Service.TRANSAK.value: TransakProvider(),
        Service.MOONPAY.value: MoonPayProvider(fetcher=fetcher, base_url=base_url),
        Service.COINBASE.value: CoinbasePayProvider(),
    }
    for name, url in FAUCET_URLS.items():
        providers[name] = FaucetProvider(name, url)

    logger.info(f"Registered {len(providers)} buy URL providers (swaps API: {base_url})")
    return MappingProxyType(providers)


# Used by both the resolver and the tools module
default_providers: Mapping[str, BuyUrlProvider] = build_providers()


def get_provider(service: str, providers: Mapping[str, BuyUrlProvider] | None = None) -> BuyUrlProvider:
    """Get the provider registered for a service name.

    Args:
        service: Service name (e.g. "wyre", "goerli-faucet")
        providers: Provider table to search (default: the module-level table)

    Returns:
        The registered provider

    Raises:
        UnsupportedServiceError: If no provider is registered under that name
    """
    try:
        return (default_providers if providers is None else providers)[service]
    except KeyError:
        raise UnsupportedServiceError(service) from None
