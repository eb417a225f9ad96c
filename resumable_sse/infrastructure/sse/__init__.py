"""SSE decoding package.

- LineTokenizer: bytes to line tokens (SSETokenizerProtocol)
- StreamDecoder: line tokens to MessageEvents
"""

from resumable_sse.infrastructure.sse.decoder import StreamDecoder
from resumable_sse.infrastructure.sse.tokenizer import LineTokenizer

__all__ = ["LineTokenizer", "StreamDecoder"]
