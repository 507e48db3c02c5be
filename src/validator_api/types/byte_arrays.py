"""
Fixed-length byte arrays: block roots and BLS signatures.

On the wire these are 0x-prefixed hex strings. Snapshot files and JSON
bodies carry hex, tests usually build them from raw bytes; both are accepted.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Turn raw bytes, hex text (with or without 0x) or an iterable of octets into bytes.

    Raises:
        ValueError: If hex text is malformed, an octet is out of range, or
            the value has no byte interpretation.
    """
    match value:
        case bytes() | bytearray():
            return bytes(value)
        case str():
            return bytes.fromhex(value.removeprefix("0x"))
        case Iterable():
            return bytes(bytearray(value))
    raise ValueError(f"Cannot interpret {type(value).__name__} as bytes")


class BaseBytes(bytes):
    """`bytes` of exactly LENGTH octets, printed as hex."""

    LENGTH: ClassVar[int]
    """Required number of bytes, set by subclasses."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Raises:
            ValueError: If the value does not hold exactly LENGTH bytes.
        """
        data = _coerce_to_bytes(value)
        if len(data) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} expects exactly {cls.LENGTH} bytes, got {len(data)}")
        return super().__new__(cls, data)

    @classmethod
    def zero(cls) -> Self:
        return cls(bytes(cls.LENGTH))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Pass instances through, build everything else with the constructor, dump hex to JSON."""
        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                core_schema.no_info_plain_validator_function(cls),
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_hex(),
                when_used="json",
            ),
        )

    def to_hex(self) -> str:
        return "0x" + self.hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_hex()})"


class Bytes32(BaseBytes):
    """A 32-byte root."""

    LENGTH = 32


class Bytes96(BaseBytes):
    """A 96-byte BLS signature."""

    LENGTH = 96


ZERO_HASH: Bytes32 = Bytes32.zero()
"""The all-zero root."""
