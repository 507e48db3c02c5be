"""Tests for the bitlist type."""

import pytest

from validator_api.types import BaseBitlist


class _Bits(BaseBitlist):
    LIMIT = 16


@pytest.mark.parametrize(
    ("bits", "encoded"),
    [
        ([], b"\x01"),
        ([False] * 3, b"\x08"),
        ([True, False, True], b"\x0d"),
        ([False] * 8, b"\x00\x01"),
        ([True] * 9, b"\xff\x03"),
    ],
)
def test_encoding_appends_delimiter_bit(bits: list[bool], encoded: bytes) -> None:
    assert _Bits(bits).encode_bytes() == encoded
    assert _Bits.decode_bytes(encoded) == _Bits(bits)


def test_zeros_has_requested_length() -> None:
    assert len(_Bits.zeros(5)) == 5
    assert not any(_Bits.zeros(5))


def test_rejects_more_bits_than_limit() -> None:
    with pytest.raises(ValueError, match="cannot exceed 16 bits"):
        _Bits([False] * 17)


@pytest.mark.parametrize("data", [b"", b"\x01\x00"])
def test_decode_requires_delimiter(data: bytes) -> None:
    with pytest.raises(ValueError, match="delimiter"):
        _Bits.decode_bytes(data)
