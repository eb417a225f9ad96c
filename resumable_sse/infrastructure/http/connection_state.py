"""Connection states of an EventSource.

A closed union: exactly one state is current, each carrying only the
resources it owns. The controller dispatches on the state with ``match``.

    New            -> Connecting        (first advance)
    Connecting     -> Open              (200 + text/event-stream)
    Connecting     -> WaitingToRetry    (retriable failure, policy returned a delay)
    Open           -> WaitingToRetry    (stream ended / read failure)
    WaitingToRetry -> Connecting        (delay expired)
    any            -> Closed            (fatal failure, policy gave up, close())
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import TypeAlias

import httpx

from resumable_sse.domain.errors import EventSourceError
from resumable_sse.infrastructure.sse import StreamDecoder


@dataclass(frozen=True, slots=True)
class New:
    """Constructed, not yet polled."""


@dataclass(frozen=True, slots=True)
class Connecting:
    """Request ready to be sent (or in flight)."""

    request: httpx.Request


@dataclass(frozen=True, slots=True)
class Open:
    """Connected: decoding the response body."""

    response: httpx.Response
    decoder: StreamDecoder


@dataclass(frozen=True, slots=True)
class WaitingToRetry:
    """Waiting ``delay`` before reconnecting after ``cause``."""

    delay: timedelta
    cause: EventSourceError


@dataclass(frozen=True, slots=True)
class Closed:
    """Terminal."""


ConnectionState: TypeAlias = New | Connecting | Open | WaitingToRetry | Closed
