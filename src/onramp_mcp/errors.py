"""Errors raised while resolving a buy URL."""

from __future__ import annotations


class BuyUrlError(ValueError):
    """Base class for buy URL resolution errors."""


class UnsupportedChainError(BuyUrlError):
    """No default service exists for a chain, or a provider cannot serve it."""

    def __init__(self, chain_id: str, service: str | None = None) -> None:
        self.chain_id = chain_id
        self.service = service
        if service is None:
            message = f'No default cryptocurrency exchange or faucet for chainId: "{chain_id}"'
        else:
            message = f'Service "{service}" does not support chainId: "{chain_id}"'
        super().__init__(message)


class UnsupportedServiceError(BuyUrlError):
    """The requested service name is not a known exchange or faucet."""

    def __init__(self, service: str) -> None:
        self.service = service
        super().__init__(f'Unknown cryptocurrency exchange or faucet: "{service}"')
