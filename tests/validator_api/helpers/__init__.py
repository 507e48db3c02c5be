"""Test helpers for the validator API."""

from .builders import (
    ACTIVE_VALIDATOR_COUNT,
    HEAD_SLOT,
    make_attestation,
    make_snapshot,
    root,
)
from .mocks import StubProvider

__all__ = [
    "ACTIVE_VALIDATOR_COUNT",
    "HEAD_SLOT",
    "StubProvider",
    "make_attestation",
    "make_snapshot",
    "root",
]
