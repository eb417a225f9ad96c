"""Error classifier: failures to EventSourceError values.

Pure functions that map every failure surface of a connection attempt into
the closed ErrorKind taxonomy. Retriability follows from the kind:

    Transport failures (connect or read)   -> TransportError      (retriable)
    Status other than 200                  -> InvalidStatusCode   (fatal)
    Content-Type not text/event-stream     -> InvalidContentType  (fatal)
    Body closed by the server              -> StreamEnded         (retriable)
    SSE syntax violation                   -> ParseError          (fatal)
    Invalid UTF-8                          -> Utf8Error           (fatal)

Anything else that escapes the HTTP client or tokenizer is treated as a
transport failure.
"""

import httpx

from resumable_sse.core.constants import (
    CONTENT_TYPE_HEADER,
    EVENT_STREAM_MEDIA_TYPE,
    RESPONSE_BODY_MAX_LENGTH,
)
from resumable_sse.domain.errors import (
    EventSourceError,
    InvalidContentTypeError,
    InvalidStatusCodeError,
    ParseError,
    SSEEncodingError,
    SSESyntaxError,
    StreamEndedError,
    TransportError,
    Utf8Error,
)


def check_response(
    response: httpx.Response,
    *,
    body: str | None = None,
) -> EventSourceError | None:
    """Validate response metadata before the body is decoded.

    Args:
        response: Response whose headers have arrived.
        body: Error response body, when it was read (truncated for logs).

    Returns:
        None if the response may be decoded, otherwise the fatal error.
    """
    status = response.status_code
    if status != 200:
        return InvalidStatusCodeError(
            message=f"Invalid status code: {status}",
            status_code=status,
            response_body=body[:RESPONSE_BODY_MAX_LENGTH] if body else None,
            details={"reason": response.reason_phrase},
        )

    content_type = response.headers.get(CONTENT_TYPE_HEADER)
    if content_type is None:
        return InvalidContentTypeError(
            message="Missing Content-Type header",
            content_type=None,
        )

    if media_type(content_type) != EVENT_STREAM_MEDIA_TYPE:
        return InvalidContentTypeError(
            message=f"Invalid Content-Type: {content_type!r}",
            content_type=content_type,
        )

    return None


def media_type(content_type: str) -> str:
    """Return the lowercase ``type/subtype`` of a Content-Type value.

    Example:
        >>> media_type("Text/Event-Stream; charset=utf-8")
        'text/event-stream'
    """
    return content_type.split(";", 1)[0].strip().lower()


def classify_exception(exc: Exception) -> EventSourceError:
    """Map an exception raised while connecting or reading to an error value.

    Args:
        exc: Exception from the HTTP client, the byte stream or the tokenizer.

    Returns:
        EventSourceError with the matching kind.
    """
    if isinstance(exc, SSEEncodingError):
        return Utf8Error(message=str(exc))

    if isinstance(exc, SSESyntaxError):
        return ParseError(message=str(exc), line=exc.line)

    if isinstance(exc, httpx.TimeoutException):
        return TransportError(
            message=f"Request timed out: {exc}",
            is_timeout=True,
            details={"error_type": type(exc).__name__},
        )

    if isinstance(exc, httpx.HTTPError):
        return TransportError(
            message=f"Transport failure: {exc}",
            details={"error_type": type(exc).__name__},
        )

    return TransportError(
        message=f"Unexpected failure: {exc!r}",
        details={"error_type": type(exc).__name__},
    )


def stream_ended() -> StreamEndedError:
    """Error for a body the server closed cleanly."""
    return StreamEndedError(message="Stream ended")
