"""Slot and epoch containers."""

from __future__ import annotations

from validator_api.chain.config import SLOTS_PER_EPOCH
from validator_api.types import Uint64


class Epoch(Uint64):
    """Represents an epoch number as a 64-bit unsigned integer."""

    def start_slot(self) -> Slot:
        """Return the first slot of this epoch."""
        return Slot(int(self) * int(SLOTS_PER_EPOCH))


class Slot(Uint64):
    """Represents a slot number as a 64-bit unsigned integer."""

    def epoch(self) -> Epoch:
        """Return the epoch containing this slot."""
        return Epoch(int(self) // int(SLOTS_PER_EPOCH))

    def index_in_epoch(self) -> int:
        """Return the position of this slot within its epoch, in [0, SLOTS_PER_EPOCH)."""
        return int(self) % int(SLOTS_PER_EPOCH)
