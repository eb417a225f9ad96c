"""Logging adapters (structlog)."""

from resumable_sse.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
