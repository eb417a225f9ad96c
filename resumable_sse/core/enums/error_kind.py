"""Error kinds and retriability for EventSource failures.

Every failure surfaced by an EventSource belongs to exactly one ErrorKind,
and every ErrorKind is either retriable (the connection is re-established
after a delay) or fatal (the EventSource closes).

Kinds:
- TRANSPORT: network/I-O failure issuing the request or reading the body
- INVALID_STATUS_CODE: response status was not 200
- INVALID_CONTENT_TYPE: Content-Type missing or not text/event-stream
- STREAM_ENDED: server closed the body cleanly
- PARSE: malformed SSE syntax
- UTF8: invalid text encoding in the stream
"""

from enum import Enum


class Retriability(str, Enum):
    """Whether a failure permits reconnection."""

    RETRIABLE = "retriable"
    FATAL = "fatal"


class ErrorKind(str, Enum):
    """Closed taxonomy of EventSource failures (machine-readable)."""

    TRANSPORT = "transport"
    INVALID_STATUS_CODE = "invalid_status_code"
    INVALID_CONTENT_TYPE = "invalid_content_type"
    STREAM_ENDED = "stream_ended"
    PARSE = "parse"
    UTF8 = "utf8"

    @property
    def retriability(self) -> Retriability:
        """Default retriability of this kind."""
        return _RETRIABILITY[self]


_RETRIABILITY: dict[ErrorKind, Retriability] = {
    ErrorKind.TRANSPORT: Retriability.RETRIABLE,
    ErrorKind.INVALID_STATUS_CODE: Retriability.FATAL,
    ErrorKind.INVALID_CONTENT_TYPE: Retriability.FATAL,
    ErrorKind.STREAM_ENDED: Retriability.RETRIABLE,
    ErrorKind.PARSE: Retriability.FATAL,
    ErrorKind.UTF8: Retriability.FATAL,
}
