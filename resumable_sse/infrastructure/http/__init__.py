"""httpx-backed connection controller.

- EventSource: reconnecting SSE client (connection state machine)
- RequestTemplate: replayable request parts
"""

from resumable_sse.infrastructure.http.event_source import EventSource
from resumable_sse.infrastructure.http.request_template import RequestTemplate

__all__ = ["EventSource", "RequestTemplate"]
