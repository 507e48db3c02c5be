"""
Attestation providers.

The endpoint never builds attestations itself. It asks a provider, which
either returns an attestation, returns None when none can be produced for
the slot, or raises.

A provider signals a problem with the caller's input by raising
`InvalidParameterError` (directly or as the root cause of whatever it
raises). Every other exception is treated as an unexpected failure.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from validator_api.chain.snapshot import ChainSnapshot
from validator_api.containers import Attestation, Slot
from validator_api.exceptions import ChainNotReadyError

logger = logging.getLogger(__name__)


class AttestationProvider(Protocol):
    """Builds unsigned attestations."""

    async def create_unsigned_attestation(
        self, slot: Slot, committee_index: int
    ) -> Attestation | None:
        """
        Create an unsigned attestation for a committee at a slot.

        Returns:
            The attestation, or None when none can be produced for the slot.

        Raises:
            InvalidParameterError: If the request is inconsistent with the chain.
        """
        ...


def _no_snapshot() -> ChainSnapshot | None:
    """Default snapshot getter that returns None."""
    return None


@dataclass(frozen=True, slots=True)
class SnapshotAttestationProvider:
    """
    Provider backed by a chain snapshot.

    The snapshot is fetched on every call, so a snapshot replaced at runtime
    is picked up by the next request.
    """

    snapshot_getter: Callable[[], ChainSnapshot | None] = _no_snapshot
    """Callable that returns the current chain snapshot."""

    async def create_unsigned_attestation(
        self, slot: Slot, committee_index: int
    ) -> Attestation | None:
        """Build the attestation off the event loop from the current snapshot."""
        snapshot = self.snapshot_getter()
        if snapshot is None:
            raise ChainNotReadyError("Chain snapshot not loaded")

        attestation = await asyncio.to_thread(
            snapshot.produce_unsigned_attestation, slot, committee_index
        )
        if attestation is None:
            logger.debug(f"No attestation for slot {slot}, committee {committee_index}")
        return attestation
