"""
The container types exchanged by the validator API.

All containers serialize to JSON following the Beacon API conventions:
64-bit integers as decimal strings and byte arrays as 0x-prefixed hex.
"""

from .attestation import AggregationBits, Attestation, AttestationData, BLSSignature
from .checkpoint import Checkpoint
from .slot import Epoch, Slot

__all__ = [
    "AggregationBits",
    "Attestation",
    "AttestationData",
    "BLSSignature",
    "Checkpoint",
    "Epoch",
    "Slot",
]
