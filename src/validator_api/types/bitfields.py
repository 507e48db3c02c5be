"""Bitlist type specification.

A bitlist is a variable-length sequence of booleans with a maximum capacity.
Bits are packed little-endian within each byte (bit 0 -> LSB), and a single
delimiter bit set to 1 is appended immediately after the last data bit (which
may create a new byte). The delimiter is how the length survives encoding.

Concrete types inherit from the base class and specify LIMIT:
- class MyBitlist(BaseBitlist): LIMIT = 2048
"""

from __future__ import annotations

from typing import Any, ClassVar, Sequence

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


class BaseBitlist(tuple[bool, ...]):
    """Base class for immutable, variable-length bit lists."""

    LIMIT: ClassVar[int]
    """Maximum number of bits in the list."""

    def __new__(cls, bits: Sequence[bool] = ()) -> Self:
        """
        Create and validate a new bitlist.

        Raises:
            ValueError: If the number of bits exceeds `LIMIT`.
        """
        if not hasattr(cls, "LIMIT"):
            raise TypeError(f"{cls.__name__} must define LIMIT")

        values = tuple(bool(bit) for bit in bits)
        if len(values) > cls.LIMIT:
            raise ValueError(f"{cls.__name__} cannot exceed {cls.LIMIT} bits, got {len(values)}")
        return super().__new__(cls, values)

    @classmethod
    def zeros(cls, length: int) -> Self:
        """Create a bitlist of `length` unset bits."""
        return cls([False] * length)

    def encode_bytes(self) -> bytes:
        """
        Encode to bytes with a trailing delimiter bit.

        An empty list encodes as the single delimiter byte 0b00000001.
        """
        num_bits = len(self)
        result = bytearray(num_bits // 8 + 1)
        for i, bit in enumerate(self):
            if bit:
                result[i // 8] |= 1 << (i % 8)

        # Place delimiter bit (1) immediately after the last data bit.
        result[num_bits // 8] |= 1 << (num_bits % 8)
        return bytes(result)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Decode from bytes with a delimiter bit.

        The delimiter is the highest set bit of the last byte. All bits after
        it must be 0.
        """
        if not data or data[-1] == 0:
            raise ValueError("No delimiter bit found in bitlist data")

        num_bits = (len(data) - 1) * 8 + data[-1].bit_length() - 1
        return cls([bool((data[i // 8] >> (i % 8)) & 1) for i in range(num_bits)])

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from a bit sequence or hex text; serialize to 0x-prefixed hex."""

        def validate(value: Any) -> BaseBitlist:
            if isinstance(value, cls):
                return value
            if isinstance(value, str):
                return cls.decode_bytes(bytes.fromhex(value.removeprefix("0x")))
            if isinstance(value, (bytes, bytearray)):
                return cls.decode_bytes(bytes(value))
            return cls(value)

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda x: "0x" + x.encode_bytes().hex(),
                when_used="json",
            ),
        )

    def __repr__(self) -> str:
        """Return a compact string representation."""
        bits = "".join("1" if bit else "0" for bit in self)
        return f"{type(self).__name__}({bits!r})"
