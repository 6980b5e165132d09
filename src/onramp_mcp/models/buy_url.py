"""Pydantic models for buy URL requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PurchaseRequest(BaseModel):
    """A request for the URL at which funds can be acquired."""

    chain_id: str = Field(description="Hex chain identifier, e.g. 0x1")
    address: str = Field(description="Destination address for the purchased funds")
    service: str | None = Field(
        default=None, description="Exchange or faucet name; defaults by chain"
    )


class BuyUrlResponse(BaseModel):
    """Response model for buy URL resolution."""

    chain_id: str = Field(description="The requested chain id")
    address: str = Field(description="The destination address")
    service: str | None = Field(
        default=None, description="The service that built the URL"
    )
    url: str | None = Field(
        default=None,
        description="The resolved URL; empty when MoonPay signing failed",
    )
    success: bool = Field(description="Whether the resolution was successful")
    error: str | None = Field(default=None, description="Error message if failed")


class ServicesResponse(BaseModel):
    """Response model listing the supported services."""

    services: list[str] = Field(description="All known service names")
    faucets: dict[str, str] = Field(description="Faucet name to literal URL")
    default_services: dict[str, str] = Field(
        description="Chain id to the service used when none is requested"
    )
    chains: dict[str, list[str]] = Field(
        description="Service name to the chain ids it can serve"
    )
