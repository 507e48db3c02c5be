"""
Attestation container definitions.

Attestations are how validators express their view of the chain.
Each attestation specifies:

- Which committee in which slot is voting
- What the validator thinks is the chain head (beacon block root)
- What is already justified (source)
- What should be justified next (target)

The endpoint hands these out unsigned. The signature field is all zeros and
must be replaced by the validator client before the attestation is used.
"""

from __future__ import annotations

from validator_api.chain.config import MAX_VALIDATORS_PER_COMMITTEE
from validator_api.containers.slot import Slot
from validator_api.types import ApiModel, BaseBitlist, Bytes32, Bytes96, Uint64

from .checkpoint import Checkpoint


class AggregationBits(BaseBitlist):
    """Bitlist marking which committee members took part in an attestation."""

    LIMIT = int(MAX_VALIDATORS_PER_COMMITTEE)


class BLSSignature(Bytes96):
    """A 96-byte BLS signature."""


class AttestationData(ApiModel):
    """Attestation content describing the validator's observed chain view."""

    slot: Slot
    """The slot for which the attestation is made."""

    index: Uint64
    """The index of the committee making the attestation."""

    beacon_block_root: Bytes32
    """Root of the block the validator considers the chain head at `slot`."""

    source: Checkpoint
    """The latest justified checkpoint, as observed by the validator."""

    target: Checkpoint
    """The checkpoint of the epoch containing `slot`."""


class Attestation(ApiModel):
    """An attestation with its aggregation bits and signature."""

    aggregation_bits: AggregationBits
    """Participation bits, one per committee member."""

    data: AttestationData
    """The attestation data being voted on."""

    signature: BLSSignature
    """Signature over the data. Zero-valued until the validator client signs."""
