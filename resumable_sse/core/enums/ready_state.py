"""EventSource ready states.

Mirrors the readyState values of the browser EventSource API:
- CONNECTING: waiting for a response, or waiting to reconnect
- OPEN: connected and dispatching events
- CLOSED: terminal, no further events
"""

from enum import IntEnum


class ReadyState(IntEnum):
    """Externally visible connection state of an EventSource."""

    CONNECTING = 0
    OPEN = 1
    CLOSED = 2
