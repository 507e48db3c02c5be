"""
Metrics module for observability.

Provides counters and histograms for tracking validator API behavior.
Exposes metrics in Prometheus text format.
"""

from .registry import (
    REGISTRY,
    attestation_request_time,
    attestation_requests,
    generate_metrics,
)

__all__ = [
    "REGISTRY",
    "attestation_request_time",
    "attestation_requests",
    "generate_metrics",
]
