"""Core infrastructure and shared settings.

This module provides foundational components used across the application:
- Environment-provided constants (API base URL, partner keys, timeouts)
- The service name enum and default service per chain
- The provider registry

The core module is imported by the resolver and tools modules and is the
single source of truth for provider instances.
"""

from onramp_mcp.core.providers import (
    DEFAULT_SERVICES,
    Service,
    build_providers,
    default_providers,
    get_provider,
)

__all__ = [
    "DEFAULT_SERVICES",
    "Service",
    "build_providers",
    "default_providers",
    "get_provider",
]
