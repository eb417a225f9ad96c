"""Centralized constants for internal implementation details.

This module contains protocol constants and defaults, NOT
environment-specific configuration. For tunable settings use
`resumable_sse/core/config.py` instead.

Categories:
- Protocol: media type, header names, field names
- Defaults: reconnection timing and backoff
- Limits: truncation and safety limits

Example:
    >>> from resumable_sse.core.constants import EVENT_STREAM_MEDIA_TYPE
    >>> headers = {ACCEPT_HEADER: EVENT_STREAM_MEDIA_TYPE}
"""

# =============================================================================
# Protocol
# =============================================================================

EVENT_STREAM_MEDIA_TYPE: str = "text/event-stream"
"""Media type a server must answer with (parameters ignored)."""

ACCEPT_HEADER: str = "Accept"
"""Request header advertising the event-stream media type."""

LAST_EVENT_ID_HEADER: str = "Last-Event-ID"
"""Request header carrying the last seen event id on reconnect."""

CONTENT_TYPE_HEADER: str = "Content-Type"
"""Response header validated before decoding the body."""

DEFAULT_EVENT_TYPE: str = "message"
"""Event type used when a message never sets an `event` field."""


# =============================================================================
# Defaults
# =============================================================================

RECONNECTION_TIME_MS_DEFAULT: int = 300
"""Initial reconnection delay in milliseconds (first backoff step)."""

BACKOFF_FACTOR_DEFAULT: float = 2.0
"""Multiplier applied to the delay on each further attempt."""

MAX_BACKOFF_MS_DEFAULT: int = 5_000
"""Upper bound for the exponential backoff delay in milliseconds."""

BACKOFF_JITTER_DEFAULT: float = 0.1
"""Relative jitter applied to backoff delays (0.1 = plus/minus 10%)."""

CONNECT_TIMEOUT_DEFAULT: float = 10.0
"""Connect timeout for clients created by EventSource.get(), in seconds."""


# =============================================================================
# Limits
# =============================================================================

MAX_LINE_LENGTH_DEFAULT: int = 1024 * 1024
"""Longest accepted SSE line in characters before the stream is rejected."""

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum characters of an error response body kept for debugging."""
