"""Unsigned attestation endpoint handler."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from aiohttp import web

from validator_api import metrics
from validator_api.exceptions import InvalidParameterError

from ..errors import ErrorKind, ErrorOutcome, classify_failure
from ..params import parse_attestation_params, query_params
from ..provider import AttestationProvider
from ..responses import (
    AttestationSerializer,
    compose_error,
    compose_result,
    serialize_attestation,
    to_response,
)

logger = logging.getLogger(__name__)

ROUTE: Final = "/validator/attestation"
"""Path of the unsigned attestation endpoint."""

SUCCESSOR_ROUTE: Final = "/eth/v1/validator/attestation_data"
"""Endpoint that replaces this one."""

DEPRECATION_HEADERS: Final = {
    "Deprecation": "true",
    "Link": f'<{SUCCESSOR_ROUTE}>; rel="successor-version"',
}
"""Headers attached to every response of this endpoint."""


@dataclass(frozen=True, slots=True)
class GetAttestation:
    """
    Get an unsigned attestation for a slot from the current state.

    Deprecated: use `/eth/v1/validator/attestation_data` instead.

    The returned attestation is NOT protected against slashing. Signing it
    without checking it against previously signed attestations can result
    in a slashable offence.

    Query parameters:
        - slot (uint64): Non-finalized slot for which to create the attestation.
        - committee_index (integer): Index of the committee making the attestation.

    Response: JSON attestation with a blank signature. The `signature` field
    must be replaced by a valid signature.

    Status Codes:
        200 OK: Attestation returned.
        400 Bad Request: Invalid parameter supplied. Body is {"message": ...}.
        404 Not Found: An attestation could not be created for the slot.

    Any other failure raised by the provider, or while serializing, propagates
    out of the handler unchanged.

    The handler keeps no per-request state and is shared by all requests.
    """

    provider: AttestationProvider
    """Builds the attestations."""

    serializer: AttestationSerializer = serialize_attestation
    """Turns an attestation into the response body."""

    async def handle(self, request: web.Request) -> web.Response:
        """Validate, delegate to the provider, and compose the response."""
        with metrics.attestation_request_time.time():
            try:
                status, body = await self._process(request)
            except Exception:
                metrics.attestation_requests.labels(status="error").inc()
                raise

        metrics.attestation_requests.labels(status=str(status)).inc()
        return to_response(status, body, DEPRECATION_HEADERS)

    async def _process(self, request: web.Request) -> tuple[int, str]:
        try:
            slot, committee_index = parse_attestation_params(query_params(request))
        except InvalidParameterError as e:
            logger.debug(f"Rejected attestation request {request.query_string!r}: {e.message}")
            return compose_error(ErrorOutcome.validation(e.message))

        try:
            attestation = await self.provider.create_unsigned_attestation(slot, committee_index)
        except Exception as e:
            outcome = classify_failure(e)
            if outcome.kind is ErrorKind.VALIDATION:
                logger.debug(f"Provider rejected slot {slot}, committee {committee_index}: {e}")
                return compose_error(outcome)
            raise

        # Serialization failures are not caught: they surface like any
        # other unexpected failure.
        return compose_result(attestation, self.serializer)
