"""API endpoint specifications."""

from . import attestation, health, metrics

__all__ = [
    "attestation",
    "health",
    "metrics",
]
