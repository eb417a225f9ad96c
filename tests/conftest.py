"""Pytest configuration and shared helpers for EventSource tests.

Provides:
1. Byte streams that deliver chunks, fail mid-body, or never finish
2. A scripted httpx transport that answers successive requests from a list
   and records every request it receives
3. Response builders for text/event-stream bodies
"""

import asyncio
from collections.abc import AsyncIterator, Sequence
from datetime import timedelta
from unittest.mock import MagicMock

import httpx
import pytest

from resumable_sse.core.config import EventSourceSettings
from resumable_sse.infrastructure.retry import ConstantBackoff


class ChunkedStream(httpx.AsyncByteStream):
    """Response body delivering fixed chunks, then ending or raising.

    Args:
        chunks: Byte chunks delivered in order.
        error: Exception raised after the last chunk (None = clean end).
    """

    def __init__(self, chunks: Sequence[bytes], error: Exception | None = None) -> None:
        self._chunks = list(chunks)
        self._error = error
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error

    async def aclose(self) -> None:
        self.closed = True


class HangingStream(httpx.AsyncByteStream):
    """Response body that delivers chunks and then never ends."""

    def __init__(self, chunks: Sequence[bytes] = ()) -> None:
        self._chunks = list(chunks)
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            yield chunk
        await asyncio.Event().wait()

    async def aclose(self) -> None:
        self.closed = True


def sse_response(
    *chunks: bytes,
    status_code: int = 200,
    content_type: str | None = "text/event-stream",
    error: Exception | None = None,
) -> httpx.Response:
    """Build a streaming response with an event-stream body.

    Example:
        >>> sse_response(b"id: 1\\ndata: a\\n\\n", error=httpx.ReadError("reset"))
    """
    headers = {"Content-Type": content_type} if content_type is not None else {}
    return httpx.Response(
        status_code,
        headers=headers,
        stream=ChunkedStream(chunks, error=error),
    )


class ScriptedTransport(httpx.AsyncBaseTransport):
    """Answers each request with the next scripted response or exception.

    Attributes:
        requests: Every request received, in order.
    """

    def __init__(self, script: Sequence[httpx.Response | Exception]) -> None:
        self._script = list(script)
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._script:
            raise AssertionError(f"unexpected request #{len(self.requests)}")
        item = self._script.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class HangingTransport(httpx.AsyncBaseTransport):
    """Never answers; records requests."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        await asyncio.Event().wait()
        raise AssertionError("unreachable")


def scripted_client(
    *script: httpx.Response | Exception,
) -> tuple[httpx.AsyncClient, ScriptedTransport]:
    """AsyncClient backed by a ScriptedTransport."""
    transport = ScriptedTransport(script)
    return httpx.AsyncClient(transport=transport), transport


@pytest.fixture
def settings() -> EventSourceSettings:
    """Deterministic settings (no jitter) independent of the environment."""
    return EventSourceSettings(
        reconnection_time_ms=300,
        backoff_factor=2.0,
        max_backoff_ms=5000,
        backoff_jitter=0.0,
        max_retries=None,
    )


@pytest.fixture
def no_delay() -> ConstantBackoff:
    """Retry immediately, forever."""
    return ConstantBackoff(timedelta(0))


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double whose bind() returns itself."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger
