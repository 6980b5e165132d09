"""MCP tool definitions for buy URL resolution."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from onramp_mcp.models.buy_url import BuyUrlResponse, PurchaseRequest, ServicesResponse
from onramp_mcp.tools.service import describe_services, resolve_buy_url_safe


async def get_buy_url(
    chain_id: str,
    address: str,
    service: str | None = None,
    timeout: float | None = None,
) -> BuyUrlResponse:
    """Get the URL at which a user can acquire funds on a chain.

    Args:
        chain_id: Hex chain identifier (e.g. "0x1" for mainnet, "0x5" for goerli)
        address: Destination address for the purchased funds
        service: Exchange or faucet name (wyre, transak, moonpay, coinbase,
                 metamask-faucet, rinkeby-faucet, kovan-faucet, goerli-faucet).
                 Defaults by chain when omitted.
        timeout: Timeout in seconds for providers that call a remote API
                 (default: runtime config)

    Returns:
        BuyUrlResponse with the URL, or the error if the chain or service is unsupported
    """
    request = PurchaseRequest(chain_id=chain_id, address=address, service=service)
    return await resolve_buy_url_safe(request, timeout)


async def list_buy_services() -> ServicesResponse:
    """List the known exchanges and faucets, their chains, and the default per chain.

    Returns:
        ServicesResponse describing the provider table
    """
    return describe_services()


def register_buy_url_tools(mcp: FastMCP) -> None:
    """Register buy URL tools on the MCP server.

    Args:
        mcp: FastMCP server instance to register tools on
    """
    mcp.tool()(get_buy_url)
    mcp.tool()(list_buy_services)
