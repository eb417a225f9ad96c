"""EventSource: a reconnecting Server-Sent Events client over httpx.

Turns one streaming HTTP request into a durable event stream. Each call to
``advance()`` moves the connection state machine forward and returns one
item:

    Success(OpenEvent())      connection established (once per connection)
    Success(MessageEvent())   one dispatched event
    Failure(error)            classified failure; the source keeps going
                              when the error is retriable and the retry
                              policy returned a delay, otherwise it closes
    None                      exhausted (closed)

Architecture:
    - Single logical task: work happens only while the caller awaits
      ``advance()``; at most one network operation or timer is pending
    - Failures never raise; they are classified into EventSourceError values
    - Retry decisions are delegated to an injected RetryPolicyProtocol
    - ``close()`` cancels the pending request, read or timer immediately

Reference:
    - https://html.spec.whatwg.org/multipage/server-sent-events.html
"""

import asyncio
from collections.abc import Awaitable, Callable
from datetime import timedelta
from types import TracebackType
from typing import Any, Self, TypeVar

import httpx

from resumable_sse.core.config import EventSourceSettings, get_settings
from resumable_sse.core.container import get_logger
from resumable_sse.core.enums import ReadyState
from resumable_sse.core.result import Failure, Result, Success
from resumable_sse.domain.errors import EventSourceError
from resumable_sse.domain.events import Event, MessageEvent, OpenEvent
from resumable_sse.domain.protocols import (
    LoggerProtocol,
    RetryPolicyProtocol,
    SSETokenizerProtocol,
)
from resumable_sse.infrastructure.errors import (
    check_response,
    classify_exception,
    stream_ended,
)
from resumable_sse.infrastructure.http.connection_state import (
    Closed,
    Connecting,
    ConnectionState,
    New,
    Open,
    WaitingToRetry,
)
from resumable_sse.infrastructure.http.request_template import RequestTemplate
from resumable_sse.infrastructure.retry import default_retry_policy
from resumable_sse.infrastructure.sse import LineTokenizer, StreamDecoder

T = TypeVar("T")


class _ClosedWhileWaiting(Exception):
    """The pending operation was cancelled by close()."""


class EventSource:
    """Reconnecting SSE client (async iterator of Results).

    Attributes:
        url: Event stream URL.

    Example:
        >>> async with httpx.AsyncClient(timeout=None) as client:
        ...     async with EventSource(client, "https://example.com/events") as source:
        ...         async for item in source:
        ...             match item:
        ...                 case Success(value=MessageEvent() as event):
        ...                     print(event.id, event.data)
        ...                 case Failure(error=error):
        ...                     print(f"error: {error}")
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: httpx.URL | str,
        *,
        method: str = "GET",
        headers: httpx.Headers | dict[str, str] | None = None,
        content: bytes | str | None = None,
        retry_policy: RetryPolicyProtocol | None = None,
        reconnection_time: timedelta | None = None,
        last_event_id: str | None = None,
        tokenizer_factory: Callable[[], SSETokenizerProtocol] | None = None,
        logger: LoggerProtocol | None = None,
        settings: EventSourceSettings | None = None,
    ) -> None:
        """Initialize the EventSource (no I/O until the first advance).

        Args:
            client: HTTP client used for every connection attempt.
            url: Event stream URL.
            method: HTTP method.
            headers: Extra request headers (Accept is added when missing).
            content: Request body, replayed on every reconnection.
            retry_policy: Reconnection strategy (default: exponential backoff).
            reconnection_time: Initial reconnection time (default from settings).
            last_event_id: Resume from this id (sent on the first request too).
            tokenizer_factory: Builds a tokenizer per response body.
            logger: Structured logger (default: process logger).
            settings: Settings override (default: cached process settings).
        """
        settings = settings or get_settings()
        self._template = RequestTemplate.from_parts(
            method, url, headers=headers, content=content
        )
        self._client = client
        self._owns_client = False
        self._retry_policy = retry_policy or default_retry_policy(settings)
        self._reconnection_time = (
            reconnection_time if reconnection_time is not None else settings.reconnection_time
        )
        self._last_event_id = last_event_id or None
        self._tokenizer_factory = tokenizer_factory or (
            lambda: LineTokenizer(max_line_length=settings.max_line_length)
        )

        self._state: ConnectionState = New()
        self._attempt_count = 0
        self._started = False
        self._pending: asyncio.Future[Any] | None = None
        self._close_requested = False

        self.url = self._template.url
        self._logger = (logger or get_logger()).bind(
            url=str(self.url.copy_with(query=None)),
        )

    @classmethod
    def from_request(
        cls,
        client: httpx.AsyncClient,
        request: httpx.Request,
        **kwargs: Any,
    ) -> Self:
        """Wrap an existing httpx.Request.

        Raises:
            CannotCloneRequestError: If the request body cannot be replayed.
        """
        template = RequestTemplate.from_request(request)
        return cls(
            client,
            template.url,
            method=template.method,
            headers=template.headers,
            content=template.content,
            **kwargs,
        )

    @classmethod
    def get(cls, url: httpx.URL | str, **kwargs: Any) -> Self:
        """GET event source with its own client (closed together with the source).

        The client applies the configured connect timeout and no read
        timeout, since event streams may stay idle for long periods.
        """
        settings = kwargs.get("settings") or get_settings()
        client = httpx.AsyncClient(
            timeout=httpx.Timeout(None, connect=settings.connect_timeout),
        )
        source = cls(client, url, **kwargs)
        source._owns_client = True
        return source

    # ------------------------------------------------------------------
    # Public state
    # ------------------------------------------------------------------

    @property
    def ready_state(self) -> ReadyState:
        """CONNECTING (including waiting to retry), OPEN or CLOSED."""
        match self._state:
            case Open():
                return ReadyState.OPEN
            case Closed():
                return ReadyState.CLOSED
            case _:
                return ReadyState.CONNECTING

    @property
    def last_event_id(self) -> str | None:
        """Last non-empty event id seen (sent as Last-Event-ID on reconnect)."""
        return self._last_event_id

    @property
    def reconnection_time(self) -> timedelta:
        """Current reconnection time (server ``retry:`` overrides the default)."""
        return self._reconnection_time

    @property
    def attempt_count(self) -> int:
        """Reconnection attempts since the last successful open."""
        return self._attempt_count

    def set_retry_policy(self, policy: RetryPolicyProtocol) -> None:
        """Install a retry policy.

        Raises:
            RuntimeError: If the source has already been polled.
        """
        if self._started:
            raise RuntimeError("retry policy must be set before the first advance()")
        self._retry_policy = policy

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def __aiter__(self) -> Self:
        return self

    async def __anext__(self) -> Result[Event, EventSourceError]:
        item = await self.advance()
        if item is None:
            raise StopAsyncIteration
        return item

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def advance(self) -> Result[Event, EventSourceError] | None:
        """Advance the state machine to the next item.

        Returns:
            Success(OpenEvent | MessageEvent), Failure(EventSourceError),
            or None once the source is closed.
        """
        self._started = True

        while True:
            match self._state:
                case Closed():
                    return None

                case New():
                    self._state = Connecting(request=self._build_request())

                case Connecting(request=request):
                    return await self._connect(request)

                case Open(response=response, decoder=decoder):
                    return await self._read(response, decoder)

                case WaitingToRetry(delay=delay):
                    try:
                        await self._wait(asyncio.sleep(delay.total_seconds()))
                    except _ClosedWhileWaiting:
                        return None
                    if self._close_requested:
                        return None
                    self._state = Connecting(request=self._build_request())

    async def close(self) -> None:
        """Close the source: cancel pending work and release the connection.

        Idempotent. No error is surfaced and no further items are produced.
        """
        if self._close_requested:
            return
        self._close_requested = True

        state = self._state
        self._state = Closed()

        if self._pending is not None:
            self._pending.cancel()
        if isinstance(state, Open):
            await state.response.aclose()
        if self._owns_client:
            await self._client.aclose()

        self._logger.info("event_source_closed", last_event_id=self._last_event_id)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def _connect(self, request: httpx.Request) -> Result[Event, EventSourceError] | None:
        self._logger.debug(
            "event_source_connecting",
            attempt=self._attempt_count,
            last_event_id=self._last_event_id,
        )
        try:
            response = await self._wait(self._client.send(request, stream=True))
        except _ClosedWhileWaiting:
            return None
        except Exception as e:
            return await self._fail(classify_exception(e))

        if self._close_requested:
            await response.aclose()
            return None

        body = None
        if response.status_code != 200:
            try:
                body = await self._read_error_body(response)
            except _ClosedWhileWaiting:
                await response.aclose()
                return None

        error = check_response(response, body=body)
        if error is not None:
            await response.aclose()
            return await self._fail(error)

        decoder = StreamDecoder(
            response.aiter_bytes(),
            tokenizer=self._tokenizer_factory(),
            last_event_id=self._last_event_id,
        )
        self._state = Open(response=response, decoder=decoder)
        self._logger.info("event_source_opened", attempts=self._attempt_count)
        self._attempt_count = 0
        return Success(value=OpenEvent())

    async def _read(
        self,
        response: httpx.Response,
        decoder: StreamDecoder,
    ) -> Result[Event, EventSourceError] | None:
        try:
            event = await self._wait(decoder.next_event())
        except _ClosedWhileWaiting:
            return None
        except Exception as e:
            self._adopt_reconnection_time(decoder)
            await response.aclose()
            return await self._fail(classify_exception(e))

        if self._close_requested:
            return None

        self._adopt_reconnection_time(decoder)
        if event is None:
            await response.aclose()
            return await self._fail(stream_ended())

        self._handle_message(event)
        return Success(value=event)

    async def _read_error_body(self, response: httpx.Response) -> str | None:
        """Read a rejected response's body for the error value (best effort)."""
        try:
            content = await self._wait(response.aread())
        except httpx.HTTPError as e:
            self._logger.debug("event_source_error_body_unreadable", error_type=type(e).__name__)
            return None
        return content.decode("utf-8", errors="replace")

    def _handle_message(self, event: MessageEvent) -> None:
        if event.id:
            self._last_event_id = event.id

    def _adopt_reconnection_time(self, decoder: StreamDecoder) -> None:
        if (
            decoder.reconnection_time is not None
            and decoder.reconnection_time != self._reconnection_time
        ):
            self._reconnection_time = decoder.reconnection_time
            self._logger.debug(
                "event_source_reconnection_time_updated",
                reconnection_time_ms=int(self._reconnection_time.total_seconds() * 1000),
            )

    async def _fail(self, error: EventSourceError) -> Failure[EventSourceError]:
        """Surface an error and move to WaitingToRetry or Closed."""
        if not error.is_retriable:
            self._logger.error(
                "event_source_fatal_error",
                error_kind=error.kind.value,
                error_message=error.message,
            )
            await self._terminate()
            return Failure(error=error)

        delay = self._retry_policy.retry(
            self._attempt_count,
            error,
            reconnection_time=self._reconnection_time,
        )
        if delay is None:
            self._logger.error(
                "event_source_gave_up",
                error_kind=error.kind.value,
                attempts=self._attempt_count,
            )
            await self._terminate()
            return Failure(error=error)

        self._attempt_count += 1
        self._state = WaitingToRetry(delay=delay, cause=error)
        self._logger.warning(
            "event_source_retry_scheduled",
            error_kind=error.kind.value,
            attempt=self._attempt_count,
            delay_ms=int(delay.total_seconds() * 1000),
        )
        return Failure(error=error)

    async def _terminate(self) -> None:
        self._state = Closed()
        if self._owns_client:
            await self._client.aclose()

    def _build_request(self) -> httpx.Request:
        return self._template.build(self._last_event_id)

    async def _wait(self, awaitable: Awaitable[T]) -> T:
        """Await one suspension point so close() can cancel it.

        Raises:
            _ClosedWhileWaiting: If close() cancelled the operation.
        """
        pending = asyncio.ensure_future(awaitable)
        self._pending = pending
        try:
            return await pending
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if self._close_requested and (current is None or not current.cancelling()):
                raise _ClosedWhileWaiting() from None
            raise
        except Exception:
            if self._close_requested:
                raise _ClosedWhileWaiting() from None
            raise
        finally:
            self._pending = None
