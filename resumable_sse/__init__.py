"""Reconnecting Server-Sent Events client for httpx.

Wraps a streaming HTTP request and yields ``Result`` items: an OpenEvent per
connection, MessageEvents as they arrive, and classified errors. Retriable
failures (network errors, the server closing the stream) reconnect after a
backoff delay and replay ``Last-Event-ID``; fatal ones close the source.

Usage:
    from resumable_sse import EventSource, Failure, MessageEvent, Success

    async with EventSource.get("https://example.com/events") as source:
        async for item in source:
            match item:
                case Success(value=MessageEvent() as event):
                    print(event.event, event.data)
                case Failure(error=error):
                    print(f"error: {error}")
"""

from resumable_sse.core.config import EventSourceSettings, get_settings
from resumable_sse.core.enums import ErrorKind, ReadyState, Retriability
from resumable_sse.core.result import Failure, Result, Success
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
from resumable_sse.domain.events import Event, MessageEvent, OpenEvent
from resumable_sse.domain.protocols import RetryPolicyProtocol, SSETokenizerProtocol
from resumable_sse.infrastructure.http import EventSource, RequestTemplate
from resumable_sse.infrastructure.retry import (
    ConstantBackoff,
    ExponentialBackoff,
    NeverRetry,
    default_retry_policy,
)
from resumable_sse.infrastructure.sse import LineTokenizer, StreamDecoder

__version__ = "0.1.0"

__all__ = [
    # Controller
    "EventSource",
    "RequestTemplate",
    # Events
    "Event",
    "MessageEvent",
    "OpenEvent",
    "ReadyState",
    # Results and errors
    "Result",
    "Success",
    "Failure",
    "ErrorKind",
    "Retriability",
    "EventSourceError",
    "TransportError",
    "InvalidStatusCodeError",
    "InvalidContentTypeError",
    "StreamEndedError",
    "ParseError",
    "Utf8Error",
    "CannotCloneRequestError",
    # Retry policies
    "RetryPolicyProtocol",
    "ExponentialBackoff",
    "ConstantBackoff",
    "NeverRetry",
    "default_retry_policy",
    # Decoding
    "SSETokenizerProtocol",
    "LineTokenizer",
    "StreamDecoder",
    # Configuration
    "EventSourceSettings",
    "get_settings",
]
