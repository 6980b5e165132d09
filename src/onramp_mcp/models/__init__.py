"""Pydantic data models for buy URL operations.

All models use Pydantic v2 for validation and serialization, ensuring
data integrity across the MCP tool interface.
"""

from onramp_mcp.models.buy_url import (
    BuyUrlResponse,
    PurchaseRequest,
    ServicesResponse,
)

__all__ = [
    "PurchaseRequest",
    "BuyUrlResponse",
    "ServicesResponse",
]
