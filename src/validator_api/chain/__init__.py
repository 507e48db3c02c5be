"""Chain configuration, committee arithmetic and chain snapshots."""

from .config import (
    ATTESTATION_LOOKAHEAD_EPOCHS,
    MAX_COMMITTEES_PER_SLOT,
    MAX_VALIDATORS_PER_COMMITTEE,
    SLOTS_PER_EPOCH,
    TARGET_COMMITTEE_SIZE,
)

__all__ = [
    "ATTESTATION_LOOKAHEAD_EPOCHS",
    "MAX_COMMITTEES_PER_SLOT",
    "MAX_VALIDATORS_PER_COMMITTEE",
    "SLOTS_PER_EPOCH",
    "TARGET_COMMITTEE_SIZE",
]
