from __future__ import annotations

from dataclasses import asdict, dataclass
from threading import Lock
from typing import Any


@dataclass
class _LatencyAgg:
    count: int = 0
    sum_ms: float = 0.0
    max_ms: float = 0.0

    def observe(self, elapsed_ms: float) -> None:
        self.count += 1
        self.sum_ms += float(elapsed_ms)
        if elapsed_ms > self.max_ms:
            self.max_ms = float(elapsed_ms)


def _status_class(status_code: int) -> str:
    return f"{status_code // 100}xx"


class InMemoryMetrics:
    """Thread-safe, process-local metrics (resets on restart)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self.http_requests_total: int = 0
        self.http_responses_by_class: dict[str, int] = {}
        self.http_request_ms = _LatencyAgg()

    def observe_http_request(self, elapsed_ms: float, status_code: int) -> None:
        with self._lock:
            self.http_requests_total += 1
            key = _status_class(status_code)
            self.http_responses_by_class[key] = self.http_responses_by_class.get(key, 0) + 1
            self.http_request_ms.observe(elapsed_ms)

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "counters": {
                    "http_requests_total": self.http_requests_total,
                    "http_responses_by_class": dict(self.http_responses_by_class),
                },
                "latency_ms": {
                    "http_request_ms": asdict(self.http_request_ms),
                },
            }

    def reset(self) -> None:
        with self._lock:
            self.http_requests_total = 0
            self.http_responses_by_class = {}
            self.http_request_ms = _LatencyAgg()


_METRICS: InMemoryMetrics | None = None


def get_metrics() -> InMemoryMetrics:
    global _METRICS
    if _METRICS is None:
        _METRICS = InMemoryMetrics()
    return _METRICS


def reset_metrics() -> None:
    """Reset metrics counters/aggregates (used by tests)."""

    get_metrics().reset()
