"""Domain events package.

Usage:
    from resumable_sse.domain.events import Event, MessageEvent, OpenEvent
"""

from resumable_sse.domain.events.message_event import Event, MessageEvent, OpenEvent
from resumable_sse.domain.events.sse_line import (
    DISPATCH,
    Dispatch,
    SSEComment,
    SSEField,
    SSELine,
)

__all__ = [
    "DISPATCH",
    "Dispatch",
    "Event",
    "MessageEvent",
    "OpenEvent",
    "SSEComment",
    "SSEField",
    "SSELine",
]
