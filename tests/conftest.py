"""Shared test fixtures and configuration for all tests.

Provides a scripted httpx transport double, client configuration factories
and a recording backoff sleep so retry tests run without real delays.
"""

import json
from typing import Any, Callable
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from fullcontact_client.client.client_config import ClientConfig
from fullcontact_client.client.credentials import StaticCredentialsProvider
from fullcontact_client.client.endpoints import DEFAULT_BASE_URL
from fullcontact_client.client.fullcontact_client import FullContactClient
from fullcontact_client.retry.policy import DefaultRetryPolicy


class ScriptedHandler:
    """httpx.MockTransport handler replaying a script of responses.

    Script entries, consumed one per request (the last one repeats):
        - int: empty response with that status
        - (status, body) or (status, body, headers): body may be bytes/str
          (sent raw) or any JSON-serializable value
        - Exception instance: raised as a transport failure
        - callable(request) -> httpx.Response
    """

    def __init__(self, *script: Any):
        if not script:
            raise ValueError("script must not be empty")
        self.script = list(script)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        entry = self.script[min(len(self.requests), len(self.script)) - 1]

        if isinstance(entry, Exception):
            raise entry
        if isinstance(entry, int):
            return httpx.Response(entry)
        if callable(entry):
            return entry(request)

        status, body, *rest = entry
        headers = rest[0] if rest else None
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body, headers=headers)
        return httpx.Response(status, json=body, headers=headers)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def json_bodies(self) -> list[Any]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def api_key() -> str:
    return "test-api-key"


@pytest.fixture
def credentials(api_key: str) -> StaticCredentialsProvider:
    return StaticCredentialsProvider(api_key)


@pytest.fixture
def recorded_sleep() -> AsyncMock:
    """Backoff sleep that records requested delays instead of waiting.

    Usage:
        delays = [c.args[0] for c in recorded_sleep.await_args_list]
    """
    return AsyncMock(return_value=None)


@pytest_asyncio.fixture
async def make_config(credentials: StaticCredentialsProvider):
    """Factory fixture building a ClientConfig around a mock transport.

    Usage:
        async def test_something(make_config):
            config = make_config(ScriptedHandler(200), retry_policy=...)
    """
    created: list[httpx.AsyncClient] = []

    def _create(
        handler: Callable[[httpx.Request], httpx.Response],
        *,
        retry_policy: DefaultRetryPolicy | None = None,
        headers: dict[str, str] | None = None,
        base_url: str = DEFAULT_BASE_URL,
        validators: dict | None = None,
        credentials_provider: Any = None,
    ) -> ClientConfig:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        created.append(http_client)
        return ClientConfig(
            credentials=credentials_provider or credentials,
            http_client=http_client,
            retry_policy=retry_policy or DefaultRetryPolicy(retry_delay_millis=100),
            headers=headers or {},
            base_url=base_url,
            validators=validators or {},
        )

    yield _create

    for http_client in created:
        await http_client.aclose()


@pytest.fixture
def make_client(make_config, recorded_sleep: AsyncMock):
    """Factory fixture building a FullContactClient around a mock transport."""
    def _create(handler: Callable[[httpx.Request], httpx.Response], **config_kwargs: Any) -> FullContactClient:
        return FullContactClient(make_config(handler, **config_kwargs), sleep=recorded_sleep)

    return _create


@pytest.fixture
def scripted():
    """Expose ScriptedHandler to tests without importing conftest."""
    return ScriptedHandler
