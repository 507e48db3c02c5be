"""Exception hierarchy for the validator API."""

from __future__ import annotations


class ValidatorApiError(Exception):
    """
    Base exception for all validator API errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidParameterError(ValidatorApiError, ValueError):
    """
    Raised when caller-supplied input is malformed or out of range.

    This covers both query parameters that fail to parse and values that
    parse but are inconsistent with the current chain (for example a
    committee index beyond the committee count of the slot). Either way the
    caller gets a 400 with this message.
    """


class ChainNotReadyError(ValidatorApiError):
    """Raised when no chain snapshot is available to build attestations from."""
