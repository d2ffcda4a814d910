"""
Asynchronous client for the FullContact v3 API.

Covers six fixed JSON endpoints:
- Person enrich, company enrich, company search
- Identity map, resolve and delete

Each call validates and serializes its request up front, then dispatches it
as a background asyncio task with bounded exponential-backoff retries. The
caller receives a future that resolves to exactly one APIResponse.
"""

from fullcontact_client.client import (
    ClientConfig,
    EnvironmentCredentialsProvider,
    FullContactClient,
    FullContactError,
    RotatingCredentialsProvider,
    StaticCredentialsProvider,
)
from fullcontact_client.logging_config import configure_logging
from fullcontact_client.models import APIResponse, RequestKind
from fullcontact_client.retry import DefaultRetryPolicy, MAX_RETRY_ATTEMPTS

__version__ = "0.1.0"

__all__ = [
    "APIResponse",
    "ClientConfig",
    "DefaultRetryPolicy",
    "EnvironmentCredentialsProvider",
    "FullContactClient",
    "FullContactError",
    "MAX_RETRY_ATTEMPTS",
    "RequestKind",
    "RotatingCredentialsProvider",
    "StaticCredentialsProvider",
    "configure_logging",
]
