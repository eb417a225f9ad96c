"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from resumable_sse.domain.protocols import RetryPolicyProtocol
"""

from resumable_sse.domain.protocols.logger_protocol import LoggerProtocol
from resumable_sse.domain.protocols.retry_policy_protocol import RetryPolicyProtocol
from resumable_sse.domain.protocols.sse_tokenizer_protocol import SSETokenizerProtocol

__all__ = [
    "LoggerProtocol",
    "RetryPolicyProtocol",
    "SSETokenizerProtocol",
]
