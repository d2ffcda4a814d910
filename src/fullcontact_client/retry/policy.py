"""
Retry policy for FullContact calls.

The policy is a pure decision object: it says whether a status code should
be retried and how long to wait before a given retry attempt. The dispatcher
owns the loop and enforces MAX_RETRY_ATTEMPTS regardless of configuration.
"""

from typing import Iterable, Protocol

import structlog


logger = structlog.get_logger(__name__)

# Hard ceiling on retry attempts per call, applied on top of any policy.
MAX_RETRY_ATTEMPTS = 5

DEFAULT_RETRYABLE_STATUS_CODES = frozenset({429, 503})
DEFAULT_RETRY_ATTEMPTS = 1
DEFAULT_RETRY_DELAY_MILLIS = 1000


class RetryPolicy(Protocol):
    """
    Protocol for retry policies.
    
    Implementations must be safe to share across concurrent calls: they are
    queried from many background tasks and must not hold per-call state.
    """

    def should_retry(self, status_code: int) -> bool:
        """Whether a response with this status code should be retried."""
        ...

    def retry_attempts(self) -> int:
        """Configured number of retries after the first attempt."""
        ...

    def retry_delay_millis(self) -> int:
        """Base delay before the first retry, in milliseconds."""
        ...

    def delay_for_attempt(self, attempt: int) -> float:
        """Seconds to wait before retry number `attempt` (1-indexed)."""
        ...


class DefaultRetryPolicy:
    """
    Exponential backoff without jitter on a configurable set of status codes.
    
    Retry n waits `retry_delay_millis * 2^(n-1)` milliseconds. With the
    defaults a 429 or 503 is retried once after one second.
    """

    def __init__(
        self,
        retryable_status_codes: Iterable[int] = DEFAULT_RETRYABLE_STATUS_CODES,
        retry_attempts: int = DEFAULT_RETRY_ATTEMPTS,
        retry_delay_millis: int = DEFAULT_RETRY_DELAY_MILLIS,
    ):
        """
        Initialize retry policy.
        
        Args:
            retryable_status_codes: Status codes that trigger a retry
            retry_attempts: Retries after the first attempt (clamped to
                MAX_RETRY_ATTEMPTS by the dispatcher)
            retry_delay_millis: Base backoff delay in milliseconds
        """
        if retry_attempts < 0:
            raise ValueError("retry_attempts must be >= 0")
        if retry_delay_millis < 0:
            raise ValueError("retry_delay_millis must be >= 0")
        
        self._retryable_status_codes = frozenset(retryable_status_codes)
        self._retry_attempts = retry_attempts
        self._retry_delay_millis = retry_delay_millis
        
        if retry_attempts > MAX_RETRY_ATTEMPTS:
            logger.warning(
                "Configured retry attempts exceed ceiling",
                retry_attempts=retry_attempts,
                ceiling=MAX_RETRY_ATTEMPTS,
            )

    @property
    def retryable_status_codes(self) -> frozenset[int]:
        return self._retryable_status_codes

    def should_retry(self, status_code: int) -> bool:
        return status_code in self._retryable_status_codes

    def retry_attempts(self) -> int:
        return self._retry_attempts

    def retry_delay_millis(self) -> int:
        return self._retry_delay_millis

    def delay_for_attempt(self, attempt: int) -> float:
        if attempt < 1:
            raise ValueError("attempt numbers start at 1")
        return self._retry_delay_millis * (1 << (attempt - 1)) / 1000.0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"retryable_status_codes={sorted(self._retryable_status_codes)}, "
            f"retry_attempts={self._retry_attempts}, "
            f"retry_delay_millis={self._retry_delay_millis})"
        )


def attempt_ceiling(policy: RetryPolicy) -> int:
    """Number of retries a call may make: min(configured, MAX_RETRY_ATTEMPTS)."""
    return max(0, min(policy.retry_attempts(), MAX_RETRY_ATTEMPTS))
