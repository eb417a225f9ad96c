"""RetryPolicyProtocol: decides whether and when to reconnect.

The EventSource consults its policy every time a retriable failure moves
it into the waiting-to-retry state. The policy is a narrow capability:
one method, given the attempt number, the classified error and the
current reconnection time, returning a delay or ``None`` to give up.

Architecture:
    - Protocol-based (structural typing, no inheritance)
    - Injected at construction or via ``EventSource.set_retry_policy``
    - Queried fresh on every failure; implementations may keep history

Reference:
    - resumable_sse/infrastructure/retry/policies.py (built-in policies)
"""

from datetime import timedelta
from typing import Protocol

from resumable_sse.domain.errors import EventSourceError


class RetryPolicyProtocol(Protocol):
    """Protocol for reconnection strategies.

    Example:
        >>> class GiveUpAfterThree:
        ...     def retry(self, attempt, error, *, reconnection_time):
        ...         return reconnection_time if attempt < 3 else None
        >>> source.set_retry_policy(GiveUpAfterThree())
    """

    def retry(
        self,
        attempt: int,
        error: EventSourceError,
        *,
        reconnection_time: timedelta,
    ) -> timedelta | None:
        """Compute the delay before the next reconnection attempt.

        Args:
            attempt: Reconnection attempts made since the last successful
                open (0 for the first retry after a connection drops).
            error: Classified failure that triggered the retry.
            reconnection_time: Current reconnection time, the default
                delay or the last ``retry:`` value sent by the server.
                A hint the policy may ignore.

        Returns:
            Delay to wait before reconnecting, or None to give up
            (the EventSource then closes).
        """
        ...
