"""MCP buy URL tools and business logic.

The tools module follows a router -> service pattern:
- router.py: MCP tool definitions and registration
- service.py: Business logic for resolution and metrics recording
"""

from onramp_mcp.tools.router import (
    get_buy_url,
    list_buy_services,
    register_buy_url_tools,
)
from onramp_mcp.tools.service import describe_services, resolve_buy_url_safe

__all__ = [
    # MCP tool functions
    "get_buy_url",
    "list_buy_services",
    # Registration functions
    "register_buy_url_tools",
    # Service functions
    "describe_services",
    "resolve_buy_url_safe",
]
