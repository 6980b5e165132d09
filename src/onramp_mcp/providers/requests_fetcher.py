"""JSON fetcher built on the requests library."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import requests

from onramp_mcp.core.constants import DEFAULT_FETCH_TIMEOUT

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


@dataclass
class FetchResult:
    """Result of a JSON GET request."""

    url: str
    status_code: int
    ok: bool
    payload: Any
    elapsed_ms: float


class RequestsFetcher:
    """Single-shot JSON GET with a timeout and no retries."""

    def __init__(self, timeout: float = DEFAULT_FETCH_TIMEOUT) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Default request timeout in seconds
        """
        self.timeout = timeout
        self.session = requests.Session()

    async def fetch_json(self, url: str, timeout: float | None = None) -> FetchResult:
        """GET a URL and decode its JSON body.

        The blocking request runs in the default executor.

        Args:
            url: The URL to fetch
            timeout: Request timeout in seconds (default: the fetcher's timeout)

        Returns:
            FetchResult with the status and decoded body

        Raises:
            requests.RequestException: On connection errors and timeouts
            ValueError: If the body is not valid JSON
        """
        request_timeout = self.timeout if timeout is None else timeout
        logger.debug(f"GET {url} (timeout={request_timeout}s)")

        loop = asyncio.get_event_loop()
        response = await loop.run_in_executor(
            None,
            lambda: self.session.get(url, headers=dict(JSON_HEADERS), timeout=request_timeout),
        )

        return FetchResult(
            url=url,
            status_code=response.status_code,
            ok=response.ok,
            payload=response.json(),
            elapsed_ms=response.elapsed.total_seconds() * 1000,
        )
