"""
Chain and Consensus Configuration Specification

Mainnet preset values needed to shape attestations: epoch length and the
parameters that fix how many committees attest in a slot and how large
they are.
"""

from typing_extensions import Final

from validator_api.types import Uint64

# --- Time Parameters ---

SLOTS_PER_EPOCH: Final = Uint64(32)
"""Number of slots in an epoch."""

# --- Committee Parameters ---

MAX_COMMITTEES_PER_SLOT: Final = Uint64(64)
"""Upper bound on the number of committees attesting in a single slot."""

TARGET_COMMITTEE_SIZE: Final = Uint64(128)
"""Committee size the shuffling aims for before splitting into more committees."""

MAX_VALIDATORS_PER_COMMITTEE: Final = Uint64(2048)
"""Maximum number of validators in a committee, bounding aggregation bits."""

# --- Attestation Window ---

ATTESTATION_LOOKAHEAD_EPOCHS: Final = Uint64(1)
"""How far past the head (in epochs) an attestation can still be produced."""
