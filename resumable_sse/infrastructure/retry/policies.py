"""Built-in retry policies (RetryPolicyProtocol implementations).

Policies:
    - ExponentialBackoff: reconnection time doubled per attempt, capped, jittered
    - ConstantBackoff: same delay every attempt
    - NeverRetry: give up on the first failure

Every built-in policy gives up immediately on fatal errors. Policies do not
inherit from RetryPolicyProtocol (structural typing).
"""

import math
import random
from datetime import timedelta

from resumable_sse.core.config import EventSourceSettings, get_settings
from resumable_sse.domain.errors import EventSourceError

# Keeps factor ** attempt finite for long-running retry loops
_MAX_EXPONENT = 64

# Jittered delays at or beyond this are returned as timedelta.max
_MAX_DELAY_SECONDS = timedelta.max.total_seconds()


class ExponentialBackoff:
    """Exponential backoff starting at the current reconnection time.

    delay = min(reconnection_time * factor ** attempt,
                max(max_delay, reconnection_time)) * uniform(1 - jitter, 1 + jitter)

    The cap never undercuts the reconnection time, so a server asking for
    ``retry: 10000`` waits at least about 10 seconds.

    Attributes:
        factor: Multiplier per attempt.
        max_delay: Cap for the exponential term.
        max_retries: Retries allowed since the last successful open
            (None = retry forever).
        jitter: Relative jitter (0 disables jitter).

    Example:
        >>> policy = ExponentialBackoff(max_retries=5, jitter=0.0)
        >>> policy.retry(2, error, reconnection_time=timedelta(seconds=1))
        datetime.timedelta(seconds=4)
    """

    def __init__(
        self,
        *,
        factor: float = 2.0,
        max_delay: timedelta = timedelta(seconds=5),
        max_retries: int | None = None,
        jitter: float = 0.1,
        rng: random.Random | None = None,
    ) -> None:
        if factor < 1.0:
            raise ValueError("factor must be >= 1.0")
        if not 0.0 <= jitter <= 1.0:
            raise ValueError("jitter must be between 0 and 1")
        self.factor = factor
        self.max_delay = max_delay
        self.max_retries = max_retries
        self.jitter = jitter
        self._rng = rng or random.Random()

    def retry(
        self,
        attempt: int,
        error: EventSourceError,
        *,
        reconnection_time: timedelta,
    ) -> timedelta | None:
        """Return the backoff delay, or None for fatal errors and exhausted retries."""
        if not error.is_retriable:
            return None
        if self.max_retries is not None and attempt >= self.max_retries:
            return None

        base = reconnection_time.total_seconds()
        cap = max(self.max_delay.total_seconds(), base)
        delay = self._capped_delay(base, cap, min(attempt, _MAX_EXPONENT))
        if self.jitter:
            delay *= self._rng.uniform(1.0 - self.jitter, 1.0 + self.jitter)
        if delay >= _MAX_DELAY_SECONDS:
            return timedelta.max
        return timedelta(seconds=delay)

    def _capped_delay(self, base: float, cap: float, exponent: int) -> float:
        """min(base * factor ** exponent, cap) without overflowing the power."""
        if base <= 0.0:
            return 0.0
        # Compared in the log domain: cap / base >= 1 since cap >= base
        if exponent * math.log(self.factor) >= math.log(cap / base):
            return cap
        return base * self.factor**exponent


class ConstantBackoff:
    """Fixed delay between attempts.

    Attributes:
        delay: Delay per attempt (None = use the reconnection time).
        max_retries: Retries allowed since the last successful open.
    """

    def __init__(
        self,
        delay: timedelta | None = None,
        *,
        max_retries: int | None = None,
    ) -> None:
        self.delay = delay
        self.max_retries = max_retries

    def retry(
        self,
        attempt: int,
        error: EventSourceError,
        *,
        reconnection_time: timedelta,
    ) -> timedelta | None:
        if not error.is_retriable:
            return None
        if self.max_retries is not None and attempt >= self.max_retries:
            return None
        return self.delay if self.delay is not None else reconnection_time


class NeverRetry:
    """Close on the first failure."""

    def retry(
        self,
        attempt: int,
        error: EventSourceError,
        *,
        reconnection_time: timedelta,
    ) -> timedelta | None:
        return None


def default_retry_policy(settings: EventSourceSettings | None = None) -> ExponentialBackoff:
    """Build the default policy from settings.

    Args:
        settings: Settings to read (defaults to the cached process settings).

    Returns:
        ExponentialBackoff configured from RESUMABLE_SSE_* variables.
    """
    settings = settings or get_settings()
    return ExponentialBackoff(
        factor=settings.backoff_factor,
        max_delay=settings.max_backoff,
        max_retries=settings.max_retries,
        jitter=settings.backoff_jitter,
    )
