"""
Query parameter extraction and validation.

Query strings are multi-valued: the same name may appear several times.
Parameters are therefore handled as a mapping from name to the ordered list
of values it was given. Only the first value of a parameter is used.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Final

from aiohttp import web

from validator_api.containers import Slot
from validator_api.exceptions import InvalidParameterError

SLOT: Final = "slot"
"""Query parameter carrying the slot to attest to."""

COMMITTEE_INDEX: Final = "committee_index"
"""Query parameter carrying the index of the attesting committee."""

INT32_MIN: Final = -(2**31)
INT32_MAX: Final = 2**31 - 1

_UNSIGNED_DECIMAL = re.compile(r"[0-9]+")
_SIGNED_DECIMAL = re.compile(r"[+-]?[0-9]+")

QueryParams = Mapping[str, Sequence[str]]
"""Multi-valued query parameters: name to ordered sequence of values."""


def query_params(request: web.Request) -> dict[str, list[str]]:
    """Collect a request's query string into a name -> values mapping."""
    query = request.query
    return {name: query.getall(name) for name in dict.fromkeys(query.keys())}


def get_parameter_value(params: QueryParams, key: str) -> str:
    """
    Return the first value of `key`.

    Raises:
        InvalidParameterError: If the parameter is absent or blank.
    """
    values = params.get(key)
    if not values or not values[0].strip():
        raise InvalidParameterError(f"'{key}' cannot be null or empty.")
    return values[0]


def get_parameter_value_as_slot(params: QueryParams, key: str) -> Slot:
    """
    Parse `key` as an unsigned 64-bit decimal.

    Only ASCII digits are accepted: no sign, no whitespace, no underscores.

    Raises:
        InvalidParameterError: If the value is missing, not a decimal, or too large.
    """
    value = get_parameter_value(params, key)
    if not _UNSIGNED_DECIMAL.fullmatch(value):
        raise InvalidParameterError(f"Invalid value for '{key}': '{value}' is not a uint64.")
    try:
        return Slot(int(value))
    except OverflowError as e:
        raise InvalidParameterError(
            f"Invalid value for '{key}': '{value}' is not a uint64."
        ) from e


def get_parameter_value_as_int(params: QueryParams, key: str) -> int:
    """
    Parse `key` as a signed 32-bit decimal.

    Raises:
        InvalidParameterError: If the value is missing, not a decimal, or out of range.
    """
    value = get_parameter_value(params, key)
    if not _SIGNED_DECIMAL.fullmatch(value):
        raise InvalidParameterError(f"Invalid value for '{key}': '{value}' is not an integer.")

    parsed = int(value)
    if not INT32_MIN <= parsed <= INT32_MAX:
        raise InvalidParameterError(f"Invalid value for '{key}': '{value}' is out of range.")
    return parsed


def parse_attestation_params(params: QueryParams) -> tuple[Slot, int]:
    """
    Validate the query parameters of an attestation request.

    Both `slot` and `committee_index` are required. Other parameters are
    tolerated and ignored.

    Args:
        params: Multi-valued query parameters.

    Returns:
        The slot and the committee index.

    Raises:
        InvalidParameterError: If a parameter is missing, malformed or out of range.
    """
    if len(params) < 2:
        raise InvalidParameterError(f"Please specify both {SLOT} and {COMMITTEE_INDEX}")

    slot = get_parameter_value_as_slot(params, SLOT)
    committee_index = get_parameter_value_as_int(params, COMMITTEE_INDEX)
    if committee_index < 0:
        raise InvalidParameterError(f"'{COMMITTEE_INDEX}' needs to be greater than or equal to 0.")

    return slot, committee_index
