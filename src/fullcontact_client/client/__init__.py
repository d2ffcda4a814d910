"""
FullContact client: facade, dispatcher and their collaborators.

Components:
- FullContactClient: Per-endpoint entry points returning futures
- Dispatcher: Bounded retry loop producing exactly one outcome per call
- classify: Terminal response -> typed APIResponse
- build_request: Per-attempt POST request with fresh credentials
- ClientConfig: Immutable shared configuration
- Credentials providers and exceptions
"""

from fullcontact_client.client.client_config import ClientConfig, build_http_client
from fullcontact_client.client.credentials import (
    CredentialsProvider,
    EnvironmentCredentialsProvider,
    RotatingCredentialsProvider,
    StaticCredentialsProvider,
)
from fullcontact_client.client.classifier import classify
from fullcontact_client.client.dispatcher import Dispatcher
from fullcontact_client.client.endpoints import (
    ENDPOINTS,
    TEST_TYPE_HEADER,
    USER_AGENT,
    Endpoint,
)
from fullcontact_client.client.exceptions import (
    FullContactConfigurationError,
    FullContactConstructionError,
    FullContactDeserializationError,
    FullContactError,
    FullContactSerializationError,
    FullContactTransportError,
    FullContactValidationError,
)
from fullcontact_client.client.fullcontact_client import FullContactClient
from fullcontact_client.client.request_builder import build_request

__all__ = [
    "ClientConfig",
    "build_http_client",
    "CredentialsProvider",
    "EnvironmentCredentialsProvider",
    "RotatingCredentialsProvider",
    "StaticCredentialsProvider",
    "classify",
    "Dispatcher",
    "ENDPOINTS",
    "TEST_TYPE_HEADER",
    "USER_AGENT",
    "Endpoint",
    "FullContactConfigurationError",
    "FullContactConstructionError",
    "FullContactDeserializationError",
    "FullContactError",
    "FullContactSerializationError",
    "FullContactTransportError",
    "FullContactValidationError",
    "FullContactClient",
    "build_request",
]
