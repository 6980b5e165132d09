"""Business logic for buy URL tools."""

from __future__ import annotations

import time

from onramp_mcp.admin.service import get_config
from onramp_mcp.chains import BUYABLE_CHAINS_MAP
from onramp_mcp.errors import BuyUrlError
from onramp_mcp.metrics import record_request
from onramp_mcp.models.buy_url import BuyUrlResponse, PurchaseRequest, ServicesResponse
from onramp_mcp.providers import FAUCET_URLS
from onramp_mcp.resolver import BuyUrlResolver, default_resolver


async def resolve_buy_url_safe(
    request: PurchaseRequest,
    timeout: float | None = None,
    resolver: BuyUrlResolver | None = None,
) -> BuyUrlResponse:
    """Resolve a buy URL, reporting unsupported input instead of raising.

    Args:
        request: The purchase request
        timeout: Timeout for network-assisted providers (default: runtime config)
        resolver: Resolver to use (default: the module-level resolver)

    Returns:
        BuyUrlResponse with either the URL or the error message
    """
    resolver = resolver or default_resolver
    request_timeout = timeout if timeout is not None else get_config("fetch_timeout")
    service = request.service or None
    start = time.perf_counter()

    try:
        if service is None:
            service = resolver.default_service_for_chain(request.chain_id)
        url = await resolver.resolve(
            request.chain_id, request.address, service, timeout=request_timeout
        )
    except BuyUrlError as e:
        elapsed_ms = (time.perf_counter() - start) * 1000
        record_request(request.chain_id, service, False, elapsed_ms=elapsed_ms, error=str(e))
        return BuyUrlResponse(
            chain_id=request.chain_id,
            address=request.address,
            service=service,
            success=False,
            error=str(e),
        )

    elapsed_ms = (time.perf_counter() - start) * 1000
    record_request(request.chain_id, service, True, url=url, elapsed_ms=elapsed_ms)
    return BuyUrlResponse(
        chain_id=request.chain_id,
        address=request.address,
        service=service,
        url=url,
        success=True,
    )


def describe_services(resolver: BuyUrlResolver | None = None) -> ServicesResponse:
    """Describe the services a resolver knows about.

    Args:
        resolver: Resolver to describe (default: the module-level resolver)

    Returns:
        ServicesResponse with services, faucets, defaults and supported chains
    """
    resolver = resolver or default_resolver
    chains = {
        name: [chain_id for chain_id in BUYABLE_CHAINS_MAP if provider.supports_chain(chain_id)]
        for name, provider in resolver.providers.items()
        if name not in FAUCET_URLS
    }
    return ServicesResponse(
        services=list(resolver.providers),
        faucets=dict(FAUCET_URLS),
        default_services={
            chain_id: getattr(service, "value", service)
            for chain_id, service in resolver.default_services.items()
        },
        chains=chains,
    )
