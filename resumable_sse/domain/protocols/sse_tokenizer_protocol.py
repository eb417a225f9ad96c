"""SSETokenizerProtocol: bytes in, line tokens out.

The tokenizer owns line splitting (``\\n``, ``\\r\\n``, ``\\r``) and UTF-8
decoding. It does not interpret fields across lines; the stream decoder
assembles its tokens into events.

Failure contract:
    - SSEEncodingError for invalid UTF-8
    - SSESyntaxError for syntax violations
"""

from typing import Protocol

from resumable_sse.domain.events import SSELine


class SSETokenizerProtocol(Protocol):
    """Incremental SSE tokenizer (one instance per response body)."""

    def feed(self, chunk: bytes) -> list[SSELine]:
        """Consume a chunk and return the tokens for every completed line.

        Raises:
            SSEEncodingError: If the bytes are not valid UTF-8.
            SSESyntaxError: If a line violates SSE syntax.
        """
        ...

    def flush(self) -> list[SSELine]:
        """Signal end of input and return tokens for a trailing line, if any."""
        ...
