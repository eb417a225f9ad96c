"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from resumable_sse.core.enums import ErrorKind, ReadyState, Retriability
"""

from resumable_sse.core.enums.error_kind import ErrorKind, Retriability
from resumable_sse.core.enums.ready_state import ReadyState

__all__ = ["ErrorKind", "ReadyState", "Retriability"]
