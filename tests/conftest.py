"""Pytest configuration and fixtures for onramp-mcp tests."""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import Mock

import pytest

from onramp_mcp.providers import RequestsFetcher


@pytest.fixture
def address() -> str:
    """Destination wallet address."""
    return "0x0dcd5d886577d5081b0c52e242ef29e70be3e7bc"


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Factory for mocked requests responses."""

    def _make(payload: Any = None, status_code: int = 200, json_error: Exception | None = None) -> Mock:
        response = Mock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 400
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        response.elapsed.total_seconds.return_value = 0.05
        return response

    return _make


@pytest.fixture
def fetcher() -> RequestsFetcher:
    """Fetcher with a short timeout."""
    return RequestsFetcher(timeout=5)
