"""
Process-wide client configuration.

A ClientConfig is built once and shared read-only by every in-flight call.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

import httpx
import structlog

from fullcontact_client.client.credentials import (
    CredentialsProvider,
    EnvironmentCredentialsProvider,
    StaticCredentialsProvider,
)
from fullcontact_client.client.endpoints import DEFAULT_BASE_URL, endpoint_for
from fullcontact_client.client.validators import DEFAULT_VALIDATORS, Validator
from fullcontact_client.config import Settings
from fullcontact_client.models.enums import RequestKind
from fullcontact_client.retry.policy import DefaultRetryPolicy, RetryPolicy


logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable configuration shared by all calls of one client.
    
    Attributes:
        credentials: Source of the bearer token, queried on every attempt
        http_client: Shared transport; must be safe for concurrent use
        retry_policy: Retry decisions and backoff delays
        headers: Static headers added to every request
        base_url: Prefix for the six endpoint paths
        validators: Per-kind field validators (defaults filled in)
    """

    credentials: CredentialsProvider
    http_client: httpx.AsyncClient
    retry_policy: RetryPolicy = field(default_factory=DefaultRetryPolicy)
    headers: Mapping[str, str] = field(default_factory=dict)
    base_url: str = DEFAULT_BASE_URL
    validators: Mapping[RequestKind, Validator] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        merged = {**DEFAULT_VALIDATORS, **self.validators}
        object.__setattr__(self, "validators", MappingProxyType(merged))

    def url_for(self, kind: RequestKind) -> str:
        return endpoint_for(kind).url(self.base_url)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        credentials: Optional[CredentialsProvider] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "ClientConfig":
        """
        Build a configuration from Settings.
        
        Credentials default to FULLCONTACT_API_KEY when set, otherwise the
        FC_API_KEY environment variable. A new AsyncClient is created when
        none is given.
        """
        if credentials is None:
            if settings.API_KEY:
                credentials = StaticCredentialsProvider(settings.API_KEY)
            else:
                credentials = EnvironmentCredentialsProvider()
        
        if http_client is None:
            http_client = build_http_client(settings)
        
        retry_policy = DefaultRetryPolicy(
            retryable_status_codes=settings.RETRYABLE_STATUS_CODES,
            retry_attempts=settings.RETRY_ATTEMPTS,
            retry_delay_millis=settings.RETRY_DELAY_MILLIS,
        )
        
        logger.info(
            "Client configuration loaded",
            base_url=settings.BASE_URL,
            retry_policy=repr(retry_policy),
            credentials=repr(credentials),
        )
        
        return cls(
            credentials=credentials,
            http_client=http_client,
            retry_policy=retry_policy,
            headers=headers or {},
            base_url=settings.BASE_URL,
        )


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared AsyncClient with timeout and pool limits from settings."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.TIMEOUT_SECONDS),
        limits=httpx.Limits(
            max_connections=settings.MAX_CONNECTIONS,
            max_keepalive_connections=settings.MAX_KEEPALIVE_CONNECTIONS,
        ),
    )
