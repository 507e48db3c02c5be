"""Reusable type definitions for the validator API."""

from .base import ApiModel
from .bitfields import BaseBitlist
from .byte_arrays import ZERO_HASH, BaseBytes, Bytes32, Bytes96
from .uint import BaseUint, Uint64

__all__ = [
    # Core types
    "Uint64",
    "BaseUint",
    "BaseBytes",
    "Bytes32",
    "Bytes96",
    "ZERO_HASH",
    "BaseBitlist",
    "ApiModel",
]
