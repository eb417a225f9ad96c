"""EventSource error types.

These errors are the failure half of ``Result[Event, EventSourceError]``.
Each concrete type pins its ErrorKind, and the kind decides whether the
EventSource reconnects (retriable) or closes (fatal).

Architecture:
- Domain layer errors (part of the public contract)
- Inherit from DomainError (core layer)
- Produced by the error classifier, consumed by retry policies and callers

Usage:
    match item:
        case Failure(error=InvalidStatusCodeError(status_code=status)):
            print(f"server rejected the stream: {status}")
        case Failure(error=error) if error.is_retriable:
            print("reconnecting...")
"""

from dataclasses import dataclass

from resumable_sse.core.enums import ErrorKind, Retriability
from resumable_sse.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class EventSourceError(DomainError):
    """Base EventSource error.

    Attributes:
        kind: ErrorKind of the failure.
        message: Human-readable message.
        details: Additional context (exception type, URL, etc.).
    """

    @property
    def retriability(self) -> Retriability:
        """Retriable or fatal, derived from the kind."""
        return self.kind.retriability

    @property
    def is_retriable(self) -> bool:
        """True when the EventSource may reconnect after this error."""
        return self.retriability is Retriability.RETRIABLE


@dataclass(frozen=True, slots=True, kw_only=True)
class TransportError(EventSourceError):
    """Network/I-O failure issuing the request or reading the body.

    Raised when:
    - Connection is refused or DNS resolution fails
    - TLS handshake fails
    - A timeout enforced by the HTTP client expires
    - The connection drops while reading the body

    Recovery: Reconnect after the retry policy's delay.

    Attributes:
        is_timeout: Whether the failure was an HTTP client timeout.
    """

    kind: ErrorKind = ErrorKind.TRANSPORT
    is_timeout: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidStatusCodeError(EventSourceError):
    """Response status was not 200. Fatal: the origin rejected the stream.

    Attributes:
        status_code: HTTP status returned by the server.
        response_body: Truncated body for debugging, when it was read.
    """

    kind: ErrorKind = ErrorKind.INVALID_STATUS_CODE
    status_code: int
    response_body: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidContentTypeError(EventSourceError):
    """Content-Type missing or not text/event-stream. Fatal.

    Attributes:
        content_type: Raw header value (None when the header was missing).
    """

    kind: ErrorKind = ErrorKind.INVALID_CONTENT_TYPE
    content_type: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StreamEndedError(EventSourceError):
    """Server closed the body cleanly. Retriable (transient disconnect)."""

    kind: ErrorKind = ErrorKind.STREAM_ENDED


@dataclass(frozen=True, slots=True, kw_only=True)
class ParseError(EventSourceError):
    """Malformed SSE syntax. Fatal.

    Attributes:
        line: Offending line (truncated), when known.
    """

    kind: ErrorKind = ErrorKind.PARSE
    line: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Utf8Error(EventSourceError):
    """Stream bytes were not valid UTF-8. Fatal."""

    kind: ErrorKind = ErrorKind.UTF8


class CannotCloneRequestError(Exception):
    """Request body is a one-shot stream, so the request cannot be re-issued."""

    def __init__(self, message: str = "expected a request with a replayable body") -> None:
        super().__init__(message)
