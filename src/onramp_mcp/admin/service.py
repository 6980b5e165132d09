"""Admin service layer for configuration and stats management."""

from __future__ import annotations

import logging
import math
from typing import Any

from onramp_mcp.core.constants import DEFAULT_FETCH_TIMEOUT, SWAPS_API_V2_BASE_URL
from onramp_mcp.metrics import get_metrics

logger = logging.getLogger(__name__)

# Runtime configuration overrides (not persisted)
_runtime_config: dict[str, Any] = {
    "fetch_timeout": DEFAULT_FETCH_TIMEOUT,
}


def get_config(key: str, default: Any = None) -> Any:
    """Get a configuration value with runtime override support.

    Args:
        key: Configuration key
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    return _runtime_config.get(key, default)


def get_stats() -> dict[str, Any]:
    """Get server statistics and metrics."""
    return get_metrics().to_dict()


def get_current_config() -> dict[str, Any]:
    """Get current runtime configuration.

    Returns:
        Dictionary with the runtime config plus read-only settings
    """
    return {
        "config": dict(_runtime_config),
        "swaps_api_base_url": SWAPS_API_V2_BASE_URL,
    }


def update_config(config_updates: dict[str, Any]) -> dict[str, Any]:
    """Update runtime configuration.

    Unknown keys are ignored.

    Args:
        config_updates: Dictionary of config keys to update

    Returns:
        Dictionary with operation status and the updated keys

    Raises:
        ValueError: If a value is invalid
    """
    updated: list[str] = []

    if "fetch_timeout" in config_updates:
        timeout = float(config_updates["fetch_timeout"])
        if not math.isfinite(timeout) or timeout <= 0:
            raise ValueError(f"fetch_timeout must be a positive finite number, got {timeout}")
        _runtime_config["fetch_timeout"] = timeout
        updated.append("fetch_timeout")

    if updated:
        logger.info(f"Runtime config updated: {', '.join(updated)}")

    return {
        "status": "success",
        "updated": updated,
        "config": dict(_runtime_config),
    }
