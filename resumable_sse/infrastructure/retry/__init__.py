"""Retry policies package."""

from resumable_sse.infrastructure.retry.policies import (
    ConstantBackoff,
    ExponentialBackoff,
    NeverRetry,
    default_retry_policy,
)

__all__ = [
    "ConstantBackoff",
    "ExponentialBackoff",
    "NeverRetry",
    "default_retry_policy",
]
