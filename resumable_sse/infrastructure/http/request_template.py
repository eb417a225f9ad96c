"""Replayable request template.

The EventSource re-issues its request on every reconnection, so it keeps
the request's parts (method, URL, headers, body bytes) rather than a
one-shot ``httpx.Request``.
"""

from dataclasses import dataclass

import httpx

from resumable_sse.core.constants import (
    ACCEPT_HEADER,
    EVENT_STREAM_MEDIA_TYPE,
    LAST_EVENT_ID_HEADER,
)
from resumable_sse.domain.errors import CannotCloneRequestError


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestTemplate:
    """Immutable request parts used to build every connection attempt.

    Attributes:
        method: HTTP method (GET unless the server expects a POST body).
        url: Event stream URL.
        headers: Caller-supplied headers.
        content: Request body bytes, if any.
    """

    method: str
    url: httpx.URL
    headers: httpx.Headers
    content: bytes | None = None

    @classmethod
    def from_parts(
        cls,
        method: str,
        url: httpx.URL | str,
        *,
        headers: httpx.Headers | dict[str, str] | None = None,
        content: bytes | str | None = None,
    ) -> "RequestTemplate":
        """Build a template from request parts (str content is UTF-8 encoded)."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        return cls(
            method=method.upper(),
            url=httpx.URL(url),
            headers=httpx.Headers(headers),
            content=content,
        )

    @classmethod
    def from_request(cls, request: httpx.Request) -> "RequestTemplate":
        """Capture an existing request.

        Raises:
            CannotCloneRequestError: If the body is a one-shot stream.
        """
        if not isinstance(request.stream, httpx.ByteStream):
            raise CannotCloneRequestError()
        return cls(
            method=request.method,
            url=request.url,
            headers=httpx.Headers(request.headers),
            content=request.content or None,
        )

    def build(self, last_event_id: str | None = None) -> httpx.Request:
        """Build the request for one connection attempt.

        ``Accept: text/event-stream`` is always present; a caller-supplied
        Accept header is kept when it already lists the event-stream type.
        ``Last-Event-ID`` is set (replacing any caller value) when an id
        is known.

        Args:
            last_event_id: Last non-empty event id seen, if any.

        Returns:
            A fresh httpx.Request.
        """
        headers = self.headers.copy()

        accept = headers.get(ACCEPT_HEADER)
        if accept is None or EVENT_STREAM_MEDIA_TYPE not in accept.lower():
            headers[ACCEPT_HEADER] = EVENT_STREAM_MEDIA_TYPE

        if last_event_id:
            headers[LAST_EVENT_ID_HEADER] = last_event_id

        return httpx.Request(
            self.method,
            self.url,
            headers=headers,
            content=self.content,
        )
