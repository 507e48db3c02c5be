"""
API server module for validator clients.

Provides HTTP endpoints for:
- /validator/attestation - Unsigned attestation for a slot and committee (deprecated)
- /health - Health check endpoint
- /metrics - Prometheus metrics endpoint
"""

from .endpoints.attestation import GetAttestation
from .errors import ErrorKind, ErrorOutcome, classify_failure
from .params import parse_attestation_params
from .provider import AttestationProvider, SnapshotAttestationProvider
from .server import ApiServer, ApiServerConfig, create_app

__all__ = [
    "ApiServer",
    "ApiServerConfig",
    "AttestationProvider",
    "ErrorKind",
    "ErrorOutcome",
    "GetAttestation",
    "SnapshotAttestationProvider",
    "classify_failure",
    "create_app",
    "parse_attestation_params",
]
