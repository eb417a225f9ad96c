"""Events yielded by an EventSource.

Event types:
    - OpenEvent: emitted once per successful connection
    - MessageEvent: one dispatched SSE message
    - Event: union of the two, carried inside ``Success`` values

Wire Format (SSE spec):
    id: <event_id>
    event: <event_type>
    retry: <reconnect_ms>
    data: <payload line>

Reference:
    - https://html.spec.whatwg.org/multipage/server-sent-events.html
"""

import json
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, TypeAlias

from resumable_sse.core.constants import DEFAULT_EVENT_TYPE


@dataclass(frozen=True, slots=True, kw_only=True)
class OpenEvent:
    """Connection established (status 200, text/event-stream)."""


@dataclass(frozen=True, slots=True, kw_only=True)
class MessageEvent:
    """Immutable SSE message dispatched by a blank line.

    Attributes:
        id: Last event id seen on the stream when this event was dispatched.
        event: Event type (``"message"`` unless set by an ``event`` field).
        data: ``data`` lines joined by ``\\n``.
        retry: Reconnection time requested by the server, if any.

    Example:
        >>> event = MessageEvent(id="42", data='{"price": 10}')
        >>> event.json()
        {'price': 10}
    """

    id: str | None = None
    event: str = DEFAULT_EVENT_TYPE
    data: str = ""
    retry: timedelta | None = None

    @property
    def data_bytes(self) -> bytes:
        """Payload as UTF-8 bytes."""
        return self.data.encode("utf-8")

    def json(self) -> Any:
        """Parse the payload as JSON.

        Raises:
            ValueError: If the payload is not valid JSON.
        """
        return json.loads(self.data)


Event: TypeAlias = OpenEvent | MessageEvent
