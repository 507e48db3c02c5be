"""Tests for query parameter validation."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from validator_api.api.params import (
    COMMITTEE_INDEX,
    SLOT,
    get_parameter_value,
    parse_attestation_params,
)
from validator_api.containers import Slot
from validator_api.exceptions import InvalidParameterError


def params(slot: str | None = "100", committee_index: str | None = "0") -> dict[str, list[str]]:
    """Build a query mapping, omitting parameters set to None."""
    result: dict[str, list[str]] = {}
    if slot is not None:
        result[SLOT] = [slot]
    if committee_index is not None:
        result[COMMITTEE_INDEX] = [committee_index]
    return result


class TestValidParameters:
    """Inputs that pass validation."""

    def test_parses_slot_and_index(self) -> None:
        assert parse_attestation_params(params()) == (Slot(100), 0)

    def test_accepts_largest_slot(self) -> None:
        slot, _ = parse_attestation_params(params(slot=str(2**64 - 1)))
        assert slot == Slot(2**64 - 1)

    def test_accepts_signed_committee_index(self) -> None:
        assert parse_attestation_params(params(committee_index="+3")) == (Slot(100), 3)

    def test_tolerates_extra_parameters(self) -> None:
        query = params() | {"graffiti": ["hello"]}
        assert parse_attestation_params(query) == (Slot(100), 0)

    def test_uses_first_value_of_repeated_parameter(self) -> None:
        query = {SLOT: ["5", "6"], COMMITTEE_INDEX: ["1", "x"]}
        assert parse_attestation_params(query) == (Slot(5), 1)


class TestParameterCount:
    """The two required names must both be present."""

    @pytest.mark.parametrize("query", [{}, params(committee_index=None), params(slot=None)])
    def test_fewer_than_two_names(self, query: dict[str, list[str]]) -> None:
        with pytest.raises(InvalidParameterError, match="Please specify both slot and committee_index"):
            parse_attestation_params(query)

    def test_two_names_without_slot(self) -> None:
        query = params(slot=None) | {"other": ["1"]}
        with pytest.raises(InvalidParameterError, match="'slot' cannot be null or empty."):
            parse_attestation_params(query)

    def test_two_names_without_committee_index(self) -> None:
        query = params(committee_index=None) | {"other": ["1"]}
        with pytest.raises(InvalidParameterError, match="'committee_index' cannot be null"):
            parse_attestation_params(query)


class TestSlotValidation:
    """The slot must be an unsigned 64-bit decimal."""

    @pytest.mark.parametrize(
        "value",
        ["abc", "-1", "+1", "1.0", "0x10", " 1", "1_000", "١٢", str(2**64)],
    )
    def test_rejects_invalid_slot(self, value: str) -> None:
        with pytest.raises(InvalidParameterError, match="'slot'"):
            parse_attestation_params(params(slot=value))

    @pytest.mark.parametrize("value", ["", "   "])
    def test_rejects_blank_slot(self, value: str) -> None:
        with pytest.raises(InvalidParameterError, match="'slot' cannot be null or empty."):
            parse_attestation_params(params(slot=value))

    def test_rejects_empty_value_list(self) -> None:
        with pytest.raises(InvalidParameterError, match="'slot' cannot be null or empty."):
            get_parameter_value({SLOT: []}, SLOT)

    @given(value=st.text().filter(lambda v: not (v.isascii() and v.isdigit())))
    def test_rejects_any_non_decimal_slot(self, value: str) -> None:
        with pytest.raises(InvalidParameterError, match="'slot'"):
            parse_attestation_params(params(slot=value))


class TestCommitteeIndexValidation:
    """The committee index must be an integer >= 0."""

    @given(index=st.integers(min_value=-(2**31), max_value=-1))
    def test_rejects_negative_index(self, index: int) -> None:
        with pytest.raises(InvalidParameterError, match="needs to be greater than or equal to 0"):
            parse_attestation_params(params(committee_index=str(index)))

    @pytest.mark.parametrize("value", ["one", "1.5", "", "--1", str(2**31), str(-(2**31) - 1)])
    def test_rejects_invalid_index(self, value: str) -> None:
        with pytest.raises(InvalidParameterError, match="'committee_index'"):
            parse_attestation_params(params(committee_index=value))

    @given(index=st.integers(min_value=0, max_value=2**31 - 1))
    def test_accepts_any_non_negative_int32(self, index: int) -> None:
        assert parse_attestation_params(params(committee_index=str(index)))[1] == index
