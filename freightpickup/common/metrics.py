"""Prometheus metric definitions for pickup requests."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


pickup_requests_total = Counter("pickup_requests_total", "Total pickup requests", ["service"])
pickup_success_total = Counter("pickup_success_total", "Total confirmed pickups", ["service"])
pickup_failure_total = Counter(
    "pickup_failure_total",
    "Total failed pickup requests",
    ["service", "reason"],
)
pickup_latency_seconds = Histogram(
    "pickup_latency_seconds",
    "Pickup request latency seconds, validation through classification",
    ["service"],
)
carrier_http_responses_total = Counter(
    "carrier_http_responses_total",
    "HTTP responses received from the carrier API",
    ["service", "status_code"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
