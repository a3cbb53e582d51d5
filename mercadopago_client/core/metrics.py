"""Prometheus metrics for outbound MercadoPago API calls.

- mercadopago_api_requests_total: Requests by resource and HTTP status
- mercadopago_api_failures_total: Failed calls by resource and error type
- mercadopago_api_latency_seconds: Request latency by resource
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest

from mercadopago_client.core.config import settings


api_requests_total = Counter(
    "mercadopago_api_requests_total",
    "Total number of MercadoPago API requests",
    ["resource", "status"],
)

api_failures_total = Counter(
    "mercadopago_api_failures_total",
    "Total number of failed MercadoPago API calls",
    ["resource", "error_type"],  # transport, decode
)

api_latency = Histogram(
    "mercadopago_api_latency_seconds",
    "MercadoPago API request latency in seconds",
    ["resource"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)


@contextmanager
def track_api_latency(resource: str) -> Generator[None, None, None]:
    """Context manager to track API request latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        if settings.metrics_enabled:
            api_latency.labels(resource=resource).observe(time.perf_counter() - start)


def record_api_request(resource: str, status: int) -> None:
    """Record a completed API request."""
    if settings.metrics_enabled:
        api_requests_total.labels(resource=resource, status=str(status)).inc()


def record_api_failure(resource: str, error_type: str) -> None:
    """Record a failed API call."""
    if settings.metrics_enabled:
        api_failures_total.labels(resource=resource, error_type=error_type).inc()


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)
