"""Base models for API payloads and chain data."""

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """
    An immutable model exchanged over the REST API or loaded from files.

    Field names stay in snake case on the wire, following the Beacon API
    conventions (`beacon_block_root`, `aggregation_bits`, ...). Unknown
    fields are rejected.
    """

    model_config = ConfigDict(
        validate_default=True,
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",
    )
