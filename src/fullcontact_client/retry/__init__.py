"""
Retry policy for FullContact calls.

Main Components:
    - RetryPolicy: Protocol the dispatcher queries for retry decisions
    - DefaultRetryPolicy: Status-code based policy with exponential backoff
    - MAX_RETRY_ATTEMPTS: Hard per-call ceiling on retries
    - attempt_ceiling: Effective retry budget for a policy
"""

from fullcontact_client.retry.policy import (
    DEFAULT_RETRYABLE_STATUS_CODES,
    DefaultRetryPolicy,
    MAX_RETRY_ATTEMPTS,
    RetryPolicy,
    attempt_ceiling,
)

__all__ = [
    "DEFAULT_RETRYABLE_STATUS_CODES",
    "DefaultRetryPolicy",
    "MAX_RETRY_ATTEMPTS",
    "RetryPolicy",
    "attempt_ceiling",
]
