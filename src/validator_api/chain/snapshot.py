"""Chain snapshot loader and attestation production.

A snapshot is a read-only view of the canonical chain: the head, the latest
justified and finalized checkpoints, the number of active validators and
the block roots of recent slots. It holds everything needed to build an
unsigned attestation for any slot between the finalized checkpoint and
one epoch past the head.

The expected YAML format:

    head_slot: 100
    head_root: "0x5f1c..."
    finalized:
      epoch: 1
      root: "0x2a0b..."
    current_justified:
      epoch: 2
      root: "0x9e4d..."
    active_validator_count: 16384
    block_roots:
      64: "0x9e4d..."
      96: "0x77c1..."
      100: "0x5f1c..."
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, model_validator

from validator_api.containers import (
    AggregationBits,
    Attestation,
    AttestationData,
    BLSSignature,
    Checkpoint,
    Slot,
)
from validator_api.exceptions import InvalidParameterError
from validator_api.types import ApiModel, Bytes32, Uint64

from .committees import get_committee_count_per_slot, get_committee_size
from .config import ATTESTATION_LOOKAHEAD_EPOCHS, SLOTS_PER_EPOCH

logger = logging.getLogger(__name__)


def _int_to_root(value: Any) -> Any:
    """YAML parsers read unquoted 0x-prefixed roots as integers. Turn them back into hex."""
    if isinstance(value, int) and not isinstance(value, bool):
        return f"0x{value:064x}"
    return value


class ChainSnapshot(ApiModel):
    """A read-only view of the canonical chain used to shape attestations."""

    head_slot: Slot
    """Slot of the current head block."""

    head_root: Bytes32
    """Root of the current head block."""

    finalized: Checkpoint
    """Latest finalized checkpoint. State before it is no longer available."""

    current_justified: Checkpoint
    """Latest justified checkpoint, used as the attestation source."""

    active_validator_count: int = Field(ge=0)
    """Number of active validators, which fixes committee count and sizes."""

    block_roots: dict[Slot, Bytes32] = Field(default_factory=dict)
    """
    Canonical block root for each slot that has a block.

    Empty (missed) slots are simply absent. A missed slot attests to the most
    recent block before it.
    """

    @model_validator(mode="before")
    @classmethod
    def _normalize_yaml_roots(cls, data: Any) -> Any:
        """Restore roots that YAML parsed as integers."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if "head_root" in data:
            data["head_root"] = _int_to_root(data["head_root"])
        for name in ("finalized", "current_justified"):
            checkpoint = data.get(name)
            if isinstance(checkpoint, dict) and "root" in checkpoint:
                data[name] = {**checkpoint, "root": _int_to_root(checkpoint["root"])}
        if isinstance(data.get("block_roots"), dict):
            data["block_roots"] = {
                slot: _int_to_root(root) for slot, root in data["block_roots"].items()
            }
        return data

    @model_validator(mode="after")
    def _check_consistency(self) -> ChainSnapshot:
        """Verify the head and checkpoints describe a coherent chain."""
        if self.finalized.epoch > self.current_justified.epoch:
            raise ValueError(
                f"Finalized epoch {self.finalized.epoch} is after "
                f"justified epoch {self.current_justified.epoch}"
            )

        for slot in self.block_roots:
            if slot > self.head_slot:
                raise ValueError(f"Block root at slot {slot} is past the head slot {self.head_slot}")

        head_entry = self.block_roots.get(self.head_slot)
        if head_entry is not None and head_entry != self.head_root:
            raise ValueError(f"Block root at head slot {self.head_slot} does not match head_root")
        return self

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> ChainSnapshot:
        """
        Load a snapshot from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            The validated snapshot.

        Raises:
            FileNotFoundError: If the file does not exist.
            pydantic.ValidationError: If the content is not a valid snapshot.
        """
        with Path(path).open() as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data)

    def block_root_at_slot(self, slot: Slot) -> Bytes32 | None:
        """
        Root of the canonical block at or before `slot`.

        Slots at or after the head resolve to the head. Returns None when the
        snapshot holds no block at or before `slot`.
        """
        if slot >= self.head_slot:
            return self.head_root

        candidates = [s for s in self.block_roots if s <= slot]
        if not candidates:
            return None
        return self.block_roots[max(candidates)]

    def is_slot_available(self, slot: Slot) -> bool:
        """
        Whether the snapshot can describe the chain at `slot`.

        Slots before the finalized checkpoint are pruned. Slots more than
        ATTESTATION_LOOKAHEAD_EPOCHS past the head are too far in the future.
        """
        if slot < self.finalized.epoch.start_slot():
            return False
        lookahead = int(ATTESTATION_LOOKAHEAD_EPOCHS) * int(SLOTS_PER_EPOCH)
        return int(slot) <= int(self.head_slot) + lookahead

    def produce_unsigned_attestation(self, slot: Slot, committee_index: int) -> Attestation | None:
        """
        Build an unsigned attestation for a committee at a slot.

        The algorithm:
        1. Check that the chain at `slot` is known to this snapshot
        2. Check the committee index against the slot's committee count
        3. Vote for the latest block at or before `slot`
        4. Use the latest justified checkpoint as the source
        5. Use the epoch boundary block of `slot`'s epoch as the target
        6. Size the (empty) aggregation bits to the committee

        Args:
            slot: The slot for which to produce the attestation.
            committee_index: The committee making the attestation.

        Returns:
            The attestation with blank aggregation bits and a zero signature,
            or None when the chain at `slot` is not available.

        Raises:
            InvalidParameterError: If the committee index does not exist at `slot`.
        """
        if not self.is_slot_available(slot):
            logger.debug(f"No state available for slot {slot}")
            return None

        committees_per_slot = get_committee_count_per_slot(self.active_validator_count)
        if committee_index >= committees_per_slot:
            raise InvalidParameterError("Invalid committee index provided")

        beacon_block_root = self.block_root_at_slot(slot)
        target_epoch = slot.epoch()
        target_root = self.block_root_at_slot(target_epoch.start_slot())
        if beacon_block_root is None or target_root is None:
            logger.debug(f"No block known at or before slot {slot}")
            return None

        committee_size = get_committee_size(self.active_validator_count, slot, committee_index)

        return Attestation(
            aggregation_bits=AggregationBits.zeros(committee_size),
            data=AttestationData(
                slot=slot,
                index=Uint64(committee_index),
                beacon_block_root=beacon_block_root,
                source=self.current_justified,
                target=Checkpoint(epoch=target_epoch, root=target_root),
            ),
            signature=BLSSignature.zero(),
        )


class SnapshotHolder:
    """
    Holds the current chain snapshot and lets it be swapped at runtime.

    Snapshots are immutable, so readers always see a complete view: either
    the previous snapshot or the replacement, never a mix.
    """

    def __init__(self, snapshot: ChainSnapshot | None = None) -> None:
        self._snapshot = snapshot

    def get(self) -> ChainSnapshot | None:
        """Return the current snapshot, or None if none has been loaded."""
        return self._snapshot

    def replace_snapshot(self, snapshot: ChainSnapshot) -> None:
        """Install a new snapshot for subsequent requests."""
        self._snapshot = snapshot
        logger.info(f"Chain snapshot replaced: head_slot={snapshot.head_slot}")
