"""
Fixed-width unsigned integers.

Slots, epochs and indices are distinct types over the same 64-bit range.
Mixing them (or mixing them with plain ints) in arithmetic or comparisons
is rejected, so a slot can never be silently compared to an epoch.

On the wire they follow the Beacon API: decimal strings in JSON.
"""

from __future__ import annotations

from typing import Any, ClassVar, SupportsInt

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self


class BaseUint(int):
    """An `int` constrained to [0, 2**BITS - 1] that only interoperates with its own type."""

    BITS: ClassVar[int]
    """Width of the integer, set by subclasses."""

    def __new__(cls, value: SupportsInt) -> Self:
        """
        Build a value of this type.

        Raises:
            OverflowError: If `value` does not fit in BITS unsigned bits.
        """
        number = int(value)
        if number < 0 or number.bit_length() > cls.BITS:
            raise OverflowError(f"{number} does not fit in {cls.__name__}")
        return super().__new__(cls, number)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Accept ints and decimal strings, dump to decimal strings in JSON mode.

        Python-mode dumps keep the typed value.
        """

        def from_input(value: Any) -> BaseUint:
            if isinstance(value, bool):
                raise ValueError(f"{cls.__name__} does not accept booleans")
            if isinstance(value, str) and not (value.isascii() and value.isdigit()):
                raise ValueError(f"{value!r} is not a decimal {cls.__name__}")
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.no_info_plain_validator_function(
            from_input,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: str(int(instance)),
                when_used="json",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": "^[0-9]+$", "format": f"uint{cls.BITS}"}

    def _operand(self, other: Any, symbol: str) -> int:
        """Unwrap `other` if it has this value's type, otherwise raise TypeError."""
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Unsupported operand type(s) for {symbol}: "
                f"'{type(self).__name__}' and '{type(other).__name__}'"
            )
        return int(other)

    # Arithmetic stays within the type and re-checks the range.

    def __add__(self, other: Any) -> Self:
        return type(self)(int(self) + self._operand(other, "+"))

    def __sub__(self, other: Any) -> Self:
        return type(self)(int(self) - self._operand(other, "-"))

    def __floordiv__(self, other: Any) -> Self:
        return type(self)(int(self) // self._operand(other, "//"))

    def __mod__(self, other: Any) -> Self:
        return type(self)(int(self) % self._operand(other, "%"))

    def __eq__(self, other: object) -> bool:
        return int(self) == self._operand(other, "==")

    def __ne__(self, other: object) -> bool:
        return int(self) != self._operand(other, "!=")

    def __lt__(self, other: Any) -> bool:
        return int(self) < self._operand(other, "<")

    def __le__(self, other: Any) -> bool:
        return int(self) <= self._operand(other, "<=")

    def __gt__(self, other: Any) -> bool:
        return int(self) > self._operand(other, ">")

    def __ge__(self, other: Any) -> bool:
        return int(self) >= self._operand(other, ">=")

    def __hash__(self) -> int:
        # Slot(5) and Epoch(5) must not collide as dict keys.
        return hash((type(self), int(self)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))


class Uint64(BaseUint):
    """Unsigned 64-bit integer."""

    BITS = 64
