"""Shared fixtures for validator API unit tests."""

from __future__ import annotations

import pytest

from validator_api.chain.snapshot import ChainSnapshot
from validator_api.containers import Attestation

from .helpers import make_attestation, make_snapshot


@pytest.fixture
def snapshot() -> ChainSnapshot:
    """Provide the default chain snapshot."""
    return make_snapshot()


@pytest.fixture
def attestation() -> Attestation:
    """Provide an attestation for slot 100, committee 0."""
    return make_attestation()
