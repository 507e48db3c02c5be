"""Tests for failure classification."""

from __future__ import annotations

from validator_api.api.errors import ErrorKind, ErrorOutcome, classify_failure, root_cause
from validator_api.exceptions import ChainNotReadyError, InvalidParameterError


def _chained(inner: BaseException, outer: BaseException) -> BaseException:
    """Raise `outer` from `inner` and return the caught exception."""
    try:
        try:
            raise inner
        except BaseException as e:
            raise outer from e
    except BaseException as caught:
        return caught


def _implicitly_chained(inner: BaseException, outer: BaseException) -> BaseException:
    """Raise `outer` while handling `inner` and return the caught exception."""
    try:
        try:
            raise inner
        except BaseException:
            raise outer
    except BaseException as caught:
        return caught


class TestRootCause:
    """Walking exception chains."""

    def test_unchained_error_is_its_own_root(self) -> None:
        error = RuntimeError("alone")
        assert root_cause(error) is error

    def test_follows_explicit_cause(self) -> None:
        inner = InvalidParameterError("bad state")
        outer = _chained(_chained(inner, RuntimeError("middle")), RuntimeError("outer"))
        assert root_cause(outer) is inner

    def test_ignores_implicit_context(self) -> None:
        outer = _implicitly_chained(KeyError("missing"), RuntimeError("outer"))
        assert root_cause(outer) is outer

    def test_respects_suppressed_context(self) -> None:
        try:
            try:
                raise KeyError("missing")
            except KeyError:
                raise RuntimeError("outer") from None
        except RuntimeError as e:
            assert root_cause(e) is e

    def test_stops_on_cycles(self) -> None:
        a = RuntimeError("a")
        b = RuntimeError("b")
        a.__cause__ = b
        b.__cause__ = a
        assert root_cause(a) is b


class TestClassifyFailure:
    """Tagging provider failures."""

    def test_direct_validation_error(self) -> None:
        outcome = classify_failure(InvalidParameterError("bad state"))
        assert outcome == ErrorOutcome.validation("bad state")

    def test_wrapped_validation_error_uses_root_message(self) -> None:
        error = _chained(InvalidParameterError("bad state"), RuntimeError("wrapper"))
        outcome = classify_failure(error)
        assert outcome.kind is ErrorKind.VALIDATION
        assert outcome.message == "bad state"

    def test_failure_raised_while_handling_validation_error_is_upstream(self) -> None:
        error = _implicitly_chained(
            InvalidParameterError("stale committee cache"), RuntimeError("database on fire")
        )
        outcome = classify_failure(error)
        assert outcome.kind is ErrorKind.UPSTREAM
        assert outcome.cause is error

    def test_validation_error_wrapping_other_cause_is_upstream(self) -> None:
        error = _chained(RuntimeError("disk"), InvalidParameterError("looks invalid"))
        assert classify_failure(error).kind is ErrorKind.UPSTREAM

    def test_plain_value_error_is_upstream(self) -> None:
        error = ValueError("not ours")
        outcome = classify_failure(error)
        assert outcome.kind is ErrorKind.UPSTREAM
        assert outcome.cause is error

    def test_chain_not_ready_is_upstream(self) -> None:
        assert classify_failure(ChainNotReadyError("no snapshot")).kind is ErrorKind.UPSTREAM

    def test_not_found_outcome(self) -> None:
        outcome = ErrorOutcome.not_found()
        assert outcome.kind is ErrorKind.NOT_FOUND
        assert outcome.message == ""
        assert outcome.cause is None
