"""Stream decoder: response bytes to MessageEvents.

Drives an SSE tokenizer over a live byte stream and assembles its line
tokens into events following the SSE dispatch rules:
- A blank line dispatches the pending event unless no ``data`` line was seen
- ``data`` lines are joined with ``\\n``
- ``event`` sets the event type (``"message"`` when never set)
- ``id`` updates the stream's last event id unless the value contains NUL
- ``retry`` is honored only when its value is all ASCII digits and fits in
  a timedelta
- Comments and unknown fields are ignored
- An event still pending when the stream ends is discarded

The decoder is a pure transformation: it holds no connection state and
lets read errors from the byte stream (and tokenizer exceptions) propagate
unmodified for the caller to classify.
"""

from collections import deque
from collections.abc import AsyncIterator, Iterable
from datetime import timedelta

from resumable_sse.core.constants import DEFAULT_EVENT_TYPE
from resumable_sse.domain.events import Dispatch, MessageEvent, SSEField, SSELine
from resumable_sse.domain.protocols import SSETokenizerProtocol
from resumable_sse.infrastructure.sse.tokenizer import LineTokenizer


class StreamDecoder:
    """Lazy async sequence of MessageEvents over a byte stream.

    Attributes:
        last_event_id: Last ``id`` seen on this stream (seeded on reconnect).
        reconnection_time: Last valid ``retry`` value seen on this stream,
            including one sent in a block that never dispatched.

    Example:
        >>> decoder = StreamDecoder(response.aiter_bytes())
        >>> async for event in decoder:
        ...     print(event.event, event.data)
    """

    def __init__(
        self,
        byte_stream: AsyncIterator[bytes],
        *,
        tokenizer: SSETokenizerProtocol | None = None,
        last_event_id: str | None = None,
    ) -> None:
        self._byte_stream = byte_stream
        self._tokenizer = tokenizer or LineTokenizer()
        self._ready: deque[MessageEvent] = deque()
        self._finished = False

        self.last_event_id = last_event_id
        self.reconnection_time: timedelta | None = None

        self._reset_pending()

    def __aiter__(self) -> "StreamDecoder":
        return self

    async def __anext__(self) -> MessageEvent:
        event = await self.next_event()
        if event is None:
            raise StopAsyncIteration
        return event

    async def next_event(self) -> MessageEvent | None:
        """Read until the next event is dispatched.

        Returns:
            The next MessageEvent, or None once the byte stream has ended.

        Raises:
            Exception: Whatever the byte stream or tokenizer raises.
        """
        while not self._ready:
            if self._finished:
                return None

            try:
                chunk = await anext(self._byte_stream)
            except StopAsyncIteration:
                self._finished = True
                self._process(self._tokenizer.flush())
                # An unterminated event never dispatches
                self._reset_pending()
                continue

            if chunk:
                self._process(self._tokenizer.feed(chunk))

        return self._ready.popleft()

    def _process(self, lines: Iterable[SSELine]) -> None:
        for line in lines:
            match line:
                case Dispatch():
                    self._dispatch()
                case SSEField(name="data", value=value):
                    self._data.append(value)
                case SSEField(name="event", value=value):
                    self._event_type = value
                case SSEField(name="id", value=value):
                    if "\0" not in value:
                        self.last_event_id = value
                case SSEField(name="retry", value=value):
                    if value.isascii() and value.isdigit():
                        self._set_retry(int(value))
                case _:
                    # Comments and unknown fields
                    pass

    def _set_retry(self, milliseconds: int) -> None:
        try:
            retry = timedelta(milliseconds=milliseconds)
        except OverflowError:
            # Beyond timedelta.max: ignored like any other unusable value
            return
        self._retry = retry
        self.reconnection_time = retry

    def _dispatch(self) -> None:
        if self._data:
            self._ready.append(
                MessageEvent(
                    id=self.last_event_id,
                    event=self._event_type or DEFAULT_EVENT_TYPE,
                    data="\n".join(self._data),
                    retry=self._retry,
                )
            )
        self._reset_pending()

    def _reset_pending(self) -> None:
        self._data: list[str] = []
        self._event_type = DEFAULT_EVENT_TYPE
        self._retry: timedelta | None = None
