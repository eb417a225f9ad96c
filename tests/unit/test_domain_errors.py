"""Unit tests for the EventSource error taxonomy.

Tests cover:
- Every ErrorKind maps to exactly one retriability
- Concrete error types pin their kind
- Errors are immutable values (not exceptions)
- String formatting
"""

from dataclasses import FrozenInstanceError

import pytest

from resumable_sse.core.enums import ErrorKind, Retriability
from resumable_sse.domain.errors import (
    CannotCloneRequestError,
    EventSourceError,
    InvalidContentTypeError,
    InvalidStatusCodeError,
    ParseError,
    StreamEndedError,
    TransportError,
    Utf8Error,
)


@pytest.mark.unit
class TestRetriability:
    """Test the kind to retriability mapping."""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (ErrorKind.TRANSPORT, Retriability.RETRIABLE),
            (ErrorKind.STREAM_ENDED, Retriability.RETRIABLE),
            (ErrorKind.INVALID_STATUS_CODE, Retriability.FATAL),
            (ErrorKind.INVALID_CONTENT_TYPE, Retriability.FATAL),
            (ErrorKind.PARSE, Retriability.FATAL),
            (ErrorKind.UTF8, Retriability.FATAL),
        ],
    )
    def test_kind_retriability(self, kind: ErrorKind, expected: Retriability):
        assert kind.retriability is expected

    def test_every_kind_has_retriability(self):
        for kind in ErrorKind:
            assert kind.retriability in set(Retriability)


@pytest.mark.unit
class TestErrorTypes:
    """Test concrete error types."""

    @pytest.mark.parametrize(
        "error,kind,retriable",
        [
            (TransportError(message="reset"), ErrorKind.TRANSPORT, True),
            (StreamEndedError(message="ended"), ErrorKind.STREAM_ENDED, True),
            (
                InvalidStatusCodeError(message="bad", status_code=503),
                ErrorKind.INVALID_STATUS_CODE,
                False,
            ),
            (
                InvalidContentTypeError(message="bad", content_type="text/html"),
                ErrorKind.INVALID_CONTENT_TYPE,
                False,
            ),
            (ParseError(message="bad"), ErrorKind.PARSE, False),
            (Utf8Error(message="bad"), ErrorKind.UTF8, False),
        ],
    )
    def test_kind_and_retriability(
        self, error: EventSourceError, kind: ErrorKind, retriable: bool
    ):
        assert error.kind is kind
        assert error.is_retriable is retriable
        assert isinstance(error, EventSourceError)

    def test_errors_are_not_exceptions(self):
        assert not isinstance(TransportError(message="x"), Exception)

    def test_errors_are_frozen(self):
        error = InvalidStatusCodeError(message="bad", status_code=500)

        with pytest.raises(FrozenInstanceError):
            error.status_code = 200  # type: ignore[misc]

    def test_str_includes_kind(self):
        error = InvalidStatusCodeError(message="Invalid status code: 503", status_code=503)

        assert str(error) == "invalid_status_code: Invalid status code: 503"

    def test_transport_timeout_flag_defaults_false(self):
        assert TransportError(message="x").is_timeout is False

    def test_errors_compare_by_value(self):
        assert ParseError(message="x", line="a") == ParseError(message="x", line="a")


@pytest.mark.unit
class TestCannotCloneRequestError:
    """Test the construction-time exception."""

    def test_is_exception_with_default_message(self):
        error = CannotCloneRequestError()

        assert isinstance(error, Exception)
        assert "replayable" in str(error)
