"""Checkpoint Container."""

from validator_api.containers.slot import Epoch
from validator_api.types import ApiModel, Bytes32


class Checkpoint(ApiModel):
    """Represents an epoch boundary in the chain's history."""

    epoch: Epoch
    """The epoch the checkpoint belongs to."""

    root: Bytes32
    """The root of the block at the start of that epoch."""
