"""Prometheus instrumentation for the FullContact client."""

from fullcontact_client.monitoring.metrics import (
    request_latency_seconds,
    requests_total,
    retries_total,
)

__all__ = [
    "requests_total",
    "retries_total",
    "request_latency_seconds",
]
