"""
Unit tests for Prometheus instrumentation of dispatched calls.
"""

import pytest
from prometheus_client import REGISTRY

from fullcontact_client.client.dispatcher import Dispatcher
from fullcontact_client.models.enums import RequestKind
from fullcontact_client.retry.policy import DefaultRetryPolicy

URL = "https://api.fullcontact.com/v3/identity.delete"


def sample(name: str, **labels: str) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.asyncio
async def test_retries_and_outcome_are_counted(make_config, scripted, recorded_sleep):
    kind = RequestKind.IDENTITY_DELETE.value
    retries_before = sample("fullcontact_retries_total", kind=kind, reason="status")
    success_before = sample("fullcontact_requests_total", kind=kind, outcome="success")
    latency_before = sample("fullcontact_request_latency_seconds_count", kind=kind)

    handler = scripted(429, 429, 204)
    policy = DefaultRetryPolicy(retry_attempts=3, retry_delay_millis=1)
    dispatcher = Dispatcher(make_config(handler, retry_policy=policy), sleep=recorded_sleep)
    await dispatcher.dispatch(RequestKind.IDENTITY_DELETE, URL, b"{}")

    assert sample("fullcontact_retries_total", kind=kind, reason="status") == retries_before + 2
    assert sample("fullcontact_requests_total", kind=kind, outcome="success") == success_before + 1
    assert sample("fullcontact_request_latency_seconds_count", kind=kind) == latency_before + 1


@pytest.mark.asyncio
async def test_local_rejection_counted_as_error(make_client, scripted):
    kind = RequestKind.COMPANY_SEARCH.value
    before = sample("fullcontact_requests_total", kind=kind, outcome="error")

    await make_client(scripted(200)).company_search(None)

    assert sample("fullcontact_requests_total", kind=kind, outcome="error") == before + 1
