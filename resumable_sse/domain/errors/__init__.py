"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from resumable_sse.domain.errors import EventSourceError, TransportError
    from resumable_sse.domain.errors import SSESyntaxError, SSEEncodingError
"""

from resumable_sse.domain.errors.event_source_error import (
    CannotCloneRequestError,
    EventSourceError,
    InvalidContentTypeError,
    InvalidStatusCodeError,
    ParseError,
    StreamEndedError,
    TransportError,
    Utf8Error,
)
from resumable_sse.domain.errors.tokenizer_error import (
    SSEEncodingError,
    SSESyntaxError,
    TokenizerError,
)

__all__ = [
    "CannotCloneRequestError",
    # EventSource errors (carried in Failure)
    "EventSourceError",
    "InvalidContentTypeError",
    "InvalidStatusCodeError",
    "ParseError",
    "StreamEndedError",
    "TransportError",
    "Utf8Error",
    # Tokenizer exceptions
    "SSEEncodingError",
    "SSESyntaxError",
    "TokenizerError",
]
