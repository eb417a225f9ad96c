"""LoggerProtocol definition for structured logging.

The EventSource logs connection lifecycle transitions through this protocol
so callers can inject their own logger. Implementations MUST keep logs
structured (message + key-value context).

Log Levels used by the library:
    - DEBUG: Request issued, event dispatched bookkeeping
    - INFO: Connection opened, closed by the caller
    - WARNING: Retriable failure, reconnection scheduled
    - ERROR: Fatal failure or retry policy gave up

Security:
    - Event payloads are never logged (they may carry user data)
    - Request headers are never logged (they may carry credentials)

Usage:
    from resumable_sse.core.container import get_logger

    logger = get_logger().bind(url=url)
    logger.info("event_source_opened", attempt=0)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    A structlog ``BoundLogger`` satisfies this protocol, as does
    ``ConsoleAdapter``.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Snake_case event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(self, message: str, /, **context: Any) -> None:
        """Log an error-level message.

        Args:
            message: Snake_case event name.
            **context: Structured key-value context fields; implementations
                may accept an ``error`` exception and expand it.
        """
        ...

    def critical(self, message: str, /, **context: Any) -> None:
        """Log a critical-level message."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Example:
            source_logger = logger.bind(url=url)
            source_logger.info("event_source_opened")  # url included
        """
        ...
