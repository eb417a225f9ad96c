"""Exceptions raised by SSE tokenizers.

Tokenizers report malformed input by raising; the error classifier maps
these exceptions to ParseError and Utf8Error values.
"""


class TokenizerError(Exception):
    """Base class for tokenizer failures."""


class SSESyntaxError(TokenizerError):
    """Input violates SSE line syntax.

    Attributes:
        line: Offending line (may be truncated).
    """

    def __init__(self, message: str, *, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class SSEEncodingError(TokenizerError):
    """Input is not valid UTF-8."""
