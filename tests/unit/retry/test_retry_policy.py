"""
Unit tests for DefaultRetryPolicy and the attempt ceiling.
"""

import pytest

from fullcontact_client.retry.policy import (
    DefaultRetryPolicy,
    MAX_RETRY_ATTEMPTS,
    attempt_ceiling,
)


# ============================================================================
# should_retry
# ============================================================================


@pytest.mark.parametrize("status_code", [429, 503])
def test_default_policy_retries_throttling_and_unavailable(status_code):
    assert DefaultRetryPolicy().should_retry(status_code) is True


@pytest.mark.parametrize("status_code", [200, 202, 204, 400, 401, 404, 500, 502])
def test_default_policy_does_not_retry_other_codes(status_code):
    assert DefaultRetryPolicy().should_retry(status_code) is False


def test_retryable_codes_are_configurable():
    policy = DefaultRetryPolicy(retryable_status_codes=[500, 502, 504])

    assert policy.should_retry(502) is True
    assert policy.should_retry(429) is False
    assert policy.retryable_status_codes == frozenset({500, 502, 504})


def test_empty_retryable_codes_never_retry():
    policy = DefaultRetryPolicy(retryable_status_codes=[])

    assert not any(policy.should_retry(code) for code in range(100, 600))


# ============================================================================
# Backoff delays
# ============================================================================


def test_delay_doubles_per_attempt():
    policy = DefaultRetryPolicy(retry_delay_millis=250)

    delays = [policy.delay_for_attempt(n) for n in range(1, 6)]

    assert delays == [0.25, 0.5, 1.0, 2.0, 4.0]


def test_delay_with_default_base_is_one_second():
    assert DefaultRetryPolicy().delay_for_attempt(1) == 1.0


def test_zero_base_delay_means_no_wait():
    policy = DefaultRetryPolicy(retry_delay_millis=0)

    assert policy.delay_for_attempt(3) == 0.0


def test_attempt_numbers_start_at_one():
    with pytest.raises(ValueError):
        DefaultRetryPolicy().delay_for_attempt(0)


# ============================================================================
# Configuration bounds
# ============================================================================


def test_defaults_match_documented_values():
    policy = DefaultRetryPolicy()

    assert policy.retry_attempts() == 1
    assert policy.retry_delay_millis() == 1000


@pytest.mark.parametrize(
    "kwargs",
    [{"retry_attempts": -1}, {"retry_delay_millis": -5}],
)
def test_negative_configuration_rejected(kwargs):
    with pytest.raises(ValueError):
        DefaultRetryPolicy(**kwargs)


@pytest.mark.parametrize(
    "configured, expected",
    [(0, 0), (1, 1), (3, 3), (5, 5), (6, 5), (50, 5)],
)
def test_attempt_ceiling_clamps_to_maximum(configured, expected):
    policy = DefaultRetryPolicy(retry_attempts=configured)

    assert attempt_ceiling(policy) == expected


def test_ceiling_constant_is_five():
    assert MAX_RETRY_ATTEMPTS == 5


def test_repr_lists_configuration():
    text = repr(DefaultRetryPolicy(retryable_status_codes=[503, 429], retry_attempts=2))

    assert "[429, 503]" in text
    assert "retry_attempts=2" in text
