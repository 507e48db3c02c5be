"""
Response composition for the attestation endpoint.

Outcomes are first mapped to a (status, body) pair, then wrapped into an
aiohttp response. Keeping the pair separate makes the mapping testable
without a running server.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Final

from aiohttp import web

from validator_api.containers import Attestation
from validator_api.types import ApiModel

from .errors import ErrorKind, ErrorOutcome

HTTP_OK: Final = 200
HTTP_BAD_REQUEST: Final = 400
HTTP_NOT_FOUND: Final = 404

JSON_CONTENT_TYPE: Final = "application/json"

AttestationSerializer = Callable[[Attestation], str]
"""Turns an attestation into the response body."""


class BadRequest(ApiModel):
    """Body of a 400 response."""

    message: str
    """What was wrong with the request."""


def serialize_attestation(attestation: Attestation) -> str:
    """Serialize an attestation to Beacon API JSON."""
    return attestation.model_dump_json()


def compose_error(outcome: ErrorOutcome) -> tuple[int, str]:
    """
    Map a validation or not-found outcome to a status and body.

    Raises:
        ValueError: For upstream outcomes, which are not answered here.
    """
    match outcome.kind:
        case ErrorKind.VALIDATION:
            return HTTP_BAD_REQUEST, BadRequest(message=outcome.message).model_dump_json()
        case ErrorKind.NOT_FOUND:
            return HTTP_NOT_FOUND, ""
        case _:
            raise ValueError(f"Cannot compose a response for {outcome.kind.name} outcome")


def compose_result(
    attestation: Attestation | None,
    serializer: AttestationSerializer = serialize_attestation,
) -> tuple[int, str]:
    """
    Map a provider result to a status and body.

    A present attestation is serialized with its blank signature. An absent
    one is answered with 404 and no body.
    """
    if attestation is None:
        return compose_error(ErrorOutcome.not_found())
    return HTTP_OK, serializer(attestation)


def to_response(
    status: int,
    body: str,
    headers: Mapping[str, str] | None = None,
) -> web.Response:
    """Wrap a status and body into an aiohttp response. Empty bodies carry no content type."""
    if not body:
        return web.Response(status=status, headers=headers)
    return web.Response(status=status, text=body, content_type=JSON_CONTENT_TYPE, headers=headers)
