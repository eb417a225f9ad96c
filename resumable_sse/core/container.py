"""Composition root for process-wide collaborators.

Centralizes construction of the shared logger so every EventSource in a
process logs through the same adapter unless one is injected explicitly.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from resumable_sse.core.config import get_settings

if TYPE_CHECKING:
    from resumable_sse.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the process-scoped logger singleton.

    The adapter only reconfigures structlog when
    ``RESUMABLE_SSE_CONFIGURE_LOGGING`` is enabled; otherwise it logs through
    whatever structlog configuration the host application installed.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from resumable_sse.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.log_json,
        level=settings.log_level,
        configure=settings.configure_logging,
    ).bind(library="resumable_sse")
