"""Incremental SSE line tokenizer.

Implements SSETokenizerProtocol for ``text/event-stream`` bodies:
- Strict, incremental UTF-8 decoding (multi-byte sequences may straddle chunks)
- Line terminators ``\\r\\n``, ``\\n`` and ``\\r`` (a trailing ``\\r`` waits for
  the next chunk so a split ``\\r\\n`` is not read as two line breaks)
- A leading byte order mark is skipped once
- ``name: value`` splitting on the first colon, one leading space stripped

Reference:
    - https://html.spec.whatwg.org/multipage/server-sent-events.html#event-stream-interpretation
"""

import codecs
import re

from resumable_sse.core.constants import MAX_LINE_LENGTH_DEFAULT
from resumable_sse.domain.errors import SSEEncodingError, SSESyntaxError
from resumable_sse.domain.events import DISPATCH, SSEComment, SSEField, SSELine

_LINE_END = re.compile(r"\r\n|\r|\n")
_BOM = "\ufeff"
_PREVIEW_LENGTH = 80


class LineTokenizer:
    """Turns byte chunks into SSE line tokens.

    One instance per response body; the tokenizer keeps the partial line
    and partial UTF-8 sequence between ``feed`` calls.

    Attributes:
        max_line_length: Longest accepted line in characters.

    Example:
        >>> tokenizer = LineTokenizer()
        >>> tokenizer.feed(b"data: hello\\n\\n")
        [SSEField(name='data', value='hello'), Dispatch()]
    """

    def __init__(self, *, max_line_length: int = MAX_LINE_LENGTH_DEFAULT) -> None:
        self.max_line_length = max_line_length
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
        self._buffer = ""
        self._pending_cr = False
        self._at_start = True

    def feed(self, chunk: bytes) -> list[SSELine]:
        """Consume a chunk and return tokens for every completed line.

        Raises:
            SSEEncodingError: If the chunk is not valid UTF-8.
            SSESyntaxError: If a line exceeds ``max_line_length``.
        """
        return self._consume(self._decode(chunk, final=False))

    def flush(self) -> list[SSELine]:
        """Finish the stream, returning tokens for an unterminated last line.

        Raises:
            SSEEncodingError: If the stream ended inside a UTF-8 sequence.
        """
        tokens = self._consume(self._decode(b"", final=True))
        if self._buffer:
            tokens.append(self._tokenize(self._buffer))
            self._buffer = ""
        return tokens

    def _decode(self, chunk: bytes, *, final: bool) -> str:
        try:
            text = self._decoder.decode(chunk, final)
        except UnicodeDecodeError as e:
            raise SSEEncodingError(f"Invalid UTF-8 in event stream: {e.reason}") from e

        if self._at_start and text:
            self._at_start = False
            if text.startswith(_BOM):
                text = text[1:]
        return text

    def _consume(self, text: str) -> list[SSELine]:
        if not text:
            return []

        if self._pending_cr:
            self._pending_cr = False
            if text.startswith("\n"):
                text = text[1:]

        buffer = self._buffer + text
        tokens: list[SSELine] = []
        start = 0
        for match in _LINE_END.finditer(buffer):
            tokens.append(self._tokenize(buffer[start : match.start()]))
            start = match.end()

        # A lone \r at the very end may be the first half of \r\n
        if start and start == len(buffer) and buffer.endswith("\r"):
            self._pending_cr = True

        self._buffer = buffer[start:]
        self._check_length(self._buffer)
        return tokens

    def _tokenize(self, line: str) -> SSELine:
        self._check_length(line)

        if not line:
            return DISPATCH

        if line.startswith(":"):
            return SSEComment(line[1:].removeprefix(" "))

        name, colon, value = line.partition(":")
        if not colon:
            return SSEField(name, "")
        return SSEField(name, value.removeprefix(" "))

    def _check_length(self, line: str) -> None:
        if len(line) > self.max_line_length:
            raise SSESyntaxError(
                f"Event stream line exceeds {self.max_line_length} characters",
                line=line[:_PREVIEW_LENGTH],
            )
