"""Metrics tracking for buy URL resolutions."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class ResolutionMetrics:
    """Metrics for a single resolution."""

    chain_id: str
    service: str | None
    timestamp: datetime
    success: bool
    elapsed_ms: float | None = None
    error: str | None = None


@dataclass
class ServerMetrics:
    """Global server metrics."""

    start_time: datetime = field(default_factory=datetime.now)
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    empty_urls: int = 0
    by_service: Counter[str] = field(default_factory=Counter)
    recent_requests: deque[ResolutionMetrics] = field(default_factory=lambda: deque(maxlen=50))
    recent_errors: deque[ResolutionMetrics] = field(default_factory=lambda: deque(maxlen=20))

    def record_request(
        self,
        chain_id: str,
        service: str | None,
        success: bool,
        url: str | None = None,
        elapsed_ms: float | None = None,
        error: str | None = None,
    ) -> None:
        """Record a resolution in the metrics.

        Args:
            chain_id: The requested chain id
            service: The service that handled it, if one was determined
            success: Whether a URL was produced without error
            url: The resolved URL, if any
            elapsed_ms: Time taken in milliseconds
            error: Error message if failed
        """
        self.total_requests += 1

        if success:
            self.successful_requests += 1
            if not url:
                self.empty_urls += 1
        else:
            self.failed_requests += 1

        # Only resolved services, so client-supplied names cannot grow the counter
        if success and service:
            self.by_service[service] += 1

        metrics = ResolutionMetrics(
            chain_id=chain_id,
            service=service,
            timestamp=datetime.now(),
            success=success,
            elapsed_ms=elapsed_ms,
            error=error,
        )

        self.recent_requests.append(metrics)

        if not success:
            self.recent_errors.append(metrics)

    def get_uptime_seconds(self) -> float:
        """Get server uptime in seconds."""
        return (datetime.now() - self.start_time).total_seconds()

    def get_success_rate(self) -> float:
        """Get success rate as percentage."""
        if self.total_requests == 0:
            return 0.0
        return (self.successful_requests / self.total_requests) * 100

    def to_dict(self) -> dict[str, Any]:
        """Convert metrics to dictionary for JSON serialization."""
        uptime_seconds = self.get_uptime_seconds()

        return {
            "status": "healthy",
            "uptime": {
                "seconds": uptime_seconds,
                "formatted": self._format_uptime(uptime_seconds),
            },
            "start_time": self.start_time.isoformat(),
            "requests": {
                "total": self.total_requests,
                "successful": self.successful_requests,
                "failed": self.failed_requests,
                "empty_urls": self.empty_urls,
                "success_rate": round(self.get_success_rate(), 2),
            },
            "services": dict(self.by_service),
            "recent_requests": [
                {
                    "chain_id": r.chain_id,
                    "service": r.service,
                    "timestamp": r.timestamp.isoformat(),
                    "success": r.success,
                    "elapsed_ms": r.elapsed_ms,
                    "error": r.error,
                }
                for r in list(self.recent_requests)[-10:][::-1]  # Last 10, newest first
            ],
            "recent_errors": [
                {
                    "chain_id": r.chain_id,
                    "service": r.service,
                    "timestamp": r.timestamp.isoformat(),
                    "error": r.error,
                }
                for r in list(self.recent_errors)[-10:][::-1]
            ],
        }

    @staticmethod
    def _format_uptime(seconds: float) -> str:
        """Format uptime in human-readable format."""
        if seconds < 60:
            return f"{int(seconds)}s"
        elif seconds < 3600:
            return f"{int(seconds / 60)}m {int(seconds % 60)}s"
        elif seconds < 86400:
            return f"{int(seconds / 3600)}h {int((seconds % 3600) / 60)}m"
        else:
            return f"{int(seconds / 86400)}d {int((seconds % 86400) / 3600)}h"


# Global metrics instance
_metrics = ServerMetrics()


def get_metrics() -> ServerMetrics:
    """Get the global metrics instance."""
    return _metrics


def record_request(
    chain_id: str,
    service: str | None,
    success: bool,
    url: str | None = None,
    elapsed_ms: float | None = None,
    error: str | None = None,
) -> None:
    """Record a resolution in the global metrics."""
    _metrics.record_request(chain_id, service, success, url, elapsed_ms, error)
