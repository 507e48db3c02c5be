"""
Failure classification for the attestation endpoint.

A failure is classified by what caused it, not by where it surfaced. The
provider may wrap the original error (for example when it retries, or when
work ran in a thread), so classification looks at the root of the explicit
`__cause__` chain.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from validator_api.exceptions import InvalidParameterError


class ErrorKind(Enum):
    """Discriminant of an error outcome."""

    VALIDATION = auto()
    """Caller input is malformed or inconsistent with the chain. Answered with 400."""

    NOT_FOUND = auto()
    """No attestation exists for the request. Answered with 404."""

    UPSTREAM = auto()
    """Anything else. Left to the server's generic failure boundary."""


@dataclass(frozen=True, slots=True)
class ErrorOutcome:
    """An error outcome tagged with its kind."""

    kind: ErrorKind
    """What sort of failure this is."""

    message: str = ""
    """Human readable description, set for validation errors."""

    cause: BaseException | None = None
    """The original exception, set for upstream failures."""

    @classmethod
    def validation(cls, message: str) -> ErrorOutcome:
        return cls(kind=ErrorKind.VALIDATION, message=message)

    @classmethod
    def not_found(cls) -> ErrorOutcome:
        return cls(kind=ErrorKind.NOT_FOUND)

    @classmethod
    def upstream(cls, cause: BaseException) -> ErrorOutcome:
        return cls(kind=ErrorKind.UPSTREAM, cause=cause)


def root_cause(error: BaseException) -> BaseException:
    """
    Follow explicit causes (`raise ... from ...`) to the innermost exception.

    Implicit context is not followed: an exception raised while another was
    being handled was not caused by it.
    """
    seen = {id(error)}
    current = error
    while (cause := current.__cause__) is not None and id(cause) not in seen:
        seen.add(id(cause))
        current = cause
    return current


def classify_failure(error: BaseException) -> ErrorOutcome:
    """Tag a provider failure as a validation error or an upstream failure."""
    cause = root_cause(error)
    if isinstance(cause, InvalidParameterError):
        return ErrorOutcome.validation(cause.message)
    return ErrorOutcome.upstream(error)
