"""Admin API functionality for configuration and monitoring.

This module provides administrative endpoints for:
- Health checks and server status
- Runtime configuration management
- Resolution statistics

The admin module follows a router -> service pattern:
- router.py: HTTP endpoint handlers
- service.py: Business logic for config and stats
"""

from onramp_mcp.admin.router import (
    api_config_get,
    api_config_update,
    api_stats,
    health_check,
)
from onramp_mcp.admin.service import (
    get_config,
    get_current_config,
    get_stats,
    update_config,
)

__all__ = [
    # Router functions
    "api_config_get",
    "api_config_update",
    "api_stats",
    "health_check",
    # Service functions
    "get_config",
    "get_current_config",
    "get_stats",
    "update_config",
]
