"""Infrastructure errors package.

Usage:
    from resumable_sse.infrastructure.errors import check_response, classify_exception

Note:
    The error types themselves are defined in resumable_sse.domain.errors
    because they are part of the public Result contract.
"""

from resumable_sse.infrastructure.errors.classifier import (
    check_response,
    classify_exception,
    media_type,
    stream_ended,
)

__all__ = [
    "check_response",
    "classify_exception",
    "media_type",
    "stream_ended",
]
