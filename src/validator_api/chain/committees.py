"""
Committee arithmetic.

Validators are split into committees every epoch. The shuffling decides
WHO sits in which committee, but the committee COUNT and SIZES depend only
on the number of active validators. That is all an unsigned attestation
needs: its aggregation bits have one entry per committee member.
"""

from __future__ import annotations

from validator_api.containers.slot import Slot

from .config import MAX_COMMITTEES_PER_SLOT, SLOTS_PER_EPOCH, TARGET_COMMITTEE_SIZE


def get_committee_count_per_slot(active_validator_count: int) -> int:
    """
    Number of committees attesting in each slot of an epoch.

    Aims for TARGET_COMMITTEE_SIZE members per committee, with at least one
    committee and at most MAX_COMMITTEES_PER_SLOT.
    """
    return max(
        1,
        min(
            int(MAX_COMMITTEES_PER_SLOT),
            active_validator_count // int(SLOTS_PER_EPOCH) // int(TARGET_COMMITTEE_SIZE),
        ),
    )


def get_committee_size(active_validator_count: int, slot: Slot, committee_index: int) -> int:
    """
    Number of validators in the given committee.

    The shuffled validator list is cut into `committees_per_slot * SLOTS_PER_EPOCH`
    contiguous slices. Committee `i` of the k-th slot in the epoch is slice
    `k * committees_per_slot + i`.

    Raises:
        ValueError: If `committee_index` is outside the slot's committees.
    """
    committees_per_slot = get_committee_count_per_slot(active_validator_count)
    if not 0 <= committee_index < committees_per_slot:
        raise ValueError(
            f"Committee index {committee_index} out of range [0, {committees_per_slot})"
        )

    count = committees_per_slot * int(SLOTS_PER_EPOCH)
    index = slot.index_in_epoch() * committees_per_slot + committee_index

    start = active_validator_count * index // count
    end = active_validator_count * (index + 1) // count
    return end - start
