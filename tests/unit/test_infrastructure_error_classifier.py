"""Unit tests for the error classifier.

Tests cover:
- Response validation (status code, Content-Type presence and media type)
- Exception classification (transport, timeout, tokenizer, unknown)
- Error body truncation
"""

import httpx
import pytest

from resumable_sse.core.constants import RESPONSE_BODY_MAX_LENGTH
from resumable_sse.domain.errors import (
    InvalidContentTypeError,
    InvalidStatusCodeError,
    ParseError,
    SSEEncodingError,
    SSESyntaxError,
    StreamEndedError,
    TransportError,
    Utf8Error,
)
from resumable_sse.infrastructure.errors import (
    check_response,
    classify_exception,
    media_type,
    stream_ended,
)


def response(status_code: int = 200, content_type: str | None = "text/event-stream"):
    headers = {"Content-Type": content_type} if content_type is not None else {}
    return httpx.Response(status_code, headers=headers)


@pytest.mark.unit
class TestCheckResponse:
    """Test response metadata validation."""

    def test_valid_response(self):
        assert check_response(response()) is None

    @pytest.mark.parametrize(
        "content_type",
        [
            "text/event-stream; charset=utf-8",
            "Text/Event-Stream",
            "  text/event-stream ;foo=bar",
        ],
    )
    def test_media_type_parameters_and_case_ignored(self, content_type: str):
        assert check_response(response(content_type=content_type)) is None

    @pytest.mark.parametrize("status_code", [201, 204, 301, 404, 500, 503])
    def test_non_200_status_rejected(self, status_code: int):
        error = check_response(response(status_code))

        assert isinstance(error, InvalidStatusCodeError)
        assert error.status_code == status_code
        assert not error.is_retriable

    def test_status_checked_before_content_type(self):
        error = check_response(response(500, content_type="text/html"))

        assert isinstance(error, InvalidStatusCodeError)

    def test_error_body_truncated(self):
        body = "x" * (RESPONSE_BODY_MAX_LENGTH + 100)

        error = check_response(response(503), body=body)

        assert isinstance(error, InvalidStatusCodeError)
        assert error.response_body == "x" * RESPONSE_BODY_MAX_LENGTH

    def test_empty_error_body_is_none(self):
        error = check_response(response(503), body="")

        assert isinstance(error, InvalidStatusCodeError)
        assert error.response_body is None

    def test_wrong_content_type_rejected(self):
        error = check_response(response(content_type="application/json"))

        assert isinstance(error, InvalidContentTypeError)
        assert error.content_type == "application/json"
        assert not error.is_retriable

    def test_missing_content_type_rejected(self):
        error = check_response(response(content_type=None))

        assert isinstance(error, InvalidContentTypeError)
        assert error.content_type is None


@pytest.mark.unit
class TestMediaType:
    def test_strips_parameters(self):
        assert media_type("Text/Event-Stream; charset=utf-8") == "text/event-stream"


@pytest.mark.unit
class TestClassifyException:
    """Test exception classification."""

    def test_connect_error_is_transport(self):
        error = classify_exception(httpx.ConnectError("refused"))

        assert isinstance(error, TransportError)
        assert error.is_retriable
        assert error.is_timeout is False
        assert error.details == {"error_type": "ConnectError"}

    def test_read_error_is_transport(self):
        assert isinstance(classify_exception(httpx.ReadError("reset")), TransportError)

    def test_timeout_is_transport_with_flag(self):
        error = classify_exception(httpx.ConnectTimeout("slow"))

        assert isinstance(error, TransportError)
        assert error.is_timeout is True

    def test_encoding_error_is_utf8(self):
        error = classify_exception(SSEEncodingError("bad byte"))

        assert isinstance(error, Utf8Error)
        assert not error.is_retriable

    def test_syntax_error_is_parse_with_line(self):
        error = classify_exception(SSESyntaxError("too long", line="data: xxx"))

        assert isinstance(error, ParseError)
        assert error.line == "data: xxx"
        assert not error.is_retriable

    def test_unknown_exception_is_transport(self):
        error = classify_exception(OSError("boom"))

        assert isinstance(error, TransportError)
        assert error.details == {"error_type": "OSError"}


@pytest.mark.unit
class TestStreamEnded:
    def test_stream_ended_is_retriable(self):
        error = stream_ended()

        assert isinstance(error, StreamEndedError)
        assert error.is_retriable
