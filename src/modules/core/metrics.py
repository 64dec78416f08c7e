"""Prometheus collectors for HTTP server requests.

Collectors live in the default ``prometheus_client`` registry, which is
what ``/metrics`` exposes.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

UNMATCHED_ROUTE = "unmatched"

_LABELS = ["method", "route", "status"]

REQUEST_LATENCY = Histogram(
    "http_server_requests_seconds",
    "HTTP request latency in seconds",
    _LABELS,
)

REQUEST_COUNT = Counter(
    "http_server_requests",
    "Total HTTP requests",
    _LABELS,
)


def observe_request(method: str, route: str | None, status: int, seconds: float) -> None:
    """Record one finished request.

    ``route`` is the URL pattern (e.g. ``api/products/<int:pk>``), not the
    concrete path, to keep label cardinality bounded.
    """
    labels = {
        "method": method,
        "route": route or UNMATCHED_ROUTE,
        "status": str(status),
    }
    REQUEST_LATENCY.labels(**labels).observe(seconds)
    REQUEST_COUNT.labels(**labels).inc()
