"""Core error base for railway-oriented error handling.

Errors are data, not exceptions: they flow to the caller inside
``Failure`` values. Only misuse of the API (programming errors) raises.

Error Hierarchy:
    DomainError (base - does NOT inherit from Exception)
    └── EventSourceError (resumable_sse.domain.errors)
        ├── TransportError
        ├── InvalidStatusCodeError
        ├── InvalidContentTypeError
        ├── StreamEndedError
        ├── ParseError
        └── Utf8Error
"""

from dataclasses import dataclass
from typing import Any

from resumable_sse.core.enums import ErrorKind


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (does NOT inherit from Exception).

    Attributes:
        kind: Machine-readable error kind (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    kind: ErrorKind
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.kind.value}: {self.message}"
