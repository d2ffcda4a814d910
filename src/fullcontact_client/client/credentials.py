"""
API key providers.

The request builder asks its provider for a key on every attempt, so a
provider that changes its answer rotates keys even in the middle of a retry
sequence. Providers are read from many tasks at once.
"""

import os
import threading
from typing import Protocol

import structlog

from fullcontact_client.client.exceptions import FullContactConfigurationError


logger = structlog.get_logger(__name__)

DEFAULT_API_KEY_ENV_VAR = "FC_API_KEY"


class CredentialsProvider(Protocol):
    """Source of the bearer token sent with each request."""

    def get_api_key(self) -> str:
        ...


class StaticCredentialsProvider:
    """Fixed API key supplied at construction."""

    def __init__(self, api_key: str):
        if not api_key or not api_key.strip():
            raise FullContactConfigurationError("API key must not be blank")
        self._api_key = api_key.strip()

    def get_api_key(self) -> str:
        return self._api_key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(api_key=***)"


class EnvironmentCredentialsProvider:
    """
    Reads the API key from an environment variable on every call.
    
    The variable must be set when the provider is created; later changes to
    the environment are picked up by subsequent requests.
    """

    def __init__(self, variable: str = DEFAULT_API_KEY_ENV_VAR):
        self.variable = variable
        if not os.environ.get(variable, "").strip():
            raise FullContactConfigurationError(
                f"Environment variable {variable} is not set",
                details={"variable": variable},
            )

    def get_api_key(self) -> str:
        api_key = os.environ.get(self.variable, "").strip()
        if not api_key:
            raise FullContactConfigurationError(
                f"Environment variable {self.variable} is no longer set",
                details={"variable": self.variable},
            )
        return api_key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(variable={self.variable})"


class RotatingCredentialsProvider:
    """API key holder that can be swapped while calls are in flight."""

    def __init__(self, api_key: str):
        self._lock = threading.Lock()
        self._api_key = StaticCredentialsProvider(api_key).get_api_key()

    def get_api_key(self) -> str:
        with self._lock:
            return self._api_key

    def rotate(self, api_key: str) -> None:
        new_key = StaticCredentialsProvider(api_key).get_api_key()
        with self._lock:
            self._api_key = new_key
        logger.info("API key rotated")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(api_key=***)"
