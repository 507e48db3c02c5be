"""
Metric registry using prometheus_client.

Provides pre-defined metrics for the validator API.
Exposes metrics in Prometheus text format via the /metrics endpoint.
"""

from __future__ import annotations

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Create a dedicated registry for validator API metrics.
#
# Using a dedicated registry avoids pollution from default Python process metrics.
REGISTRY = CollectorRegistry()

# -----------------------------------------------------------------------------
# Attestation Endpoint
# -----------------------------------------------------------------------------

attestation_requests = Counter(
    "validator_api_attestation_requests_total",
    "Unsigned attestation requests by outcome",
    ["status"],
    registry=REGISTRY,
)

attestation_request_time = Histogram(
    "validator_api_attestation_request_seconds",
    "Unsigned attestation request duration",
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics output.

    Returns:
        Prometheus text format output as bytes.
    """
    return generate_latest(REGISTRY)
