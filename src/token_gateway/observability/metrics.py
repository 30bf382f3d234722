"""
token_gateway.observability.metrics

Prometheus metric definitions.

Responsibilities:
- Request counters/histograms recorded by `observability.middleware`.
- Auth decision counter recorded by the access policy engine.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "route", "status_code"]
)

REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "route"],
)

AUTH_DECISIONS = Counter(
    "auth_decisions_total",
    "Access policy decisions by policy kind and outcome",
    ["policy", "outcome"],
)


# --- Module Notes -----------------------------------------------------------
# Metrics register on the default registry at import time; `/metrics` exposes it.
