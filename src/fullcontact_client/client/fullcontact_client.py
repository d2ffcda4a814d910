"""
FullContact client facade.

Each public method validates and serializes its request synchronously, then
launches dispatch as a background asyncio task and returns a future at once.
Local failures are delivered through an already-resolved future, so callers
consume every outcome the same way:

    async with FullContactClient() as client:
        handle = client.person_enrich(PersonRequest(emails=["a@b.com"]))
        response = await handle
"""

import asyncio
import json
from collections.abc import Mapping
from typing import Any, Optional

import structlog
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from fullcontact_client.client.client_config import ClientConfig
from fullcontact_client.client.dispatcher import Dispatcher, Sleep
from fullcontact_client.client.endpoints import endpoint_for
from fullcontact_client.client.exceptions import (
    FullContactSerializationError,
    FullContactValidationError,
)
from fullcontact_client.config import Settings, settings as default_settings
from fullcontact_client.models.api_response import APIResponse
from fullcontact_client.models.enums import RequestKind
from fullcontact_client.monitoring.metrics import requests_total


logger = structlog.get_logger(__name__)


class FullContactClient:
    """
    Asynchronous FullContact v3 client.
    
    Methods must be called from a running event loop. Each returns an
    asyncio.Future[APIResponse] that resolves exactly once. There is no
    cancellation: a dispatched call runs until it produces its outcome.
    Callers wanting a deadline can use
    asyncio.wait_for(asyncio.shield(handle), timeout).
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        settings: Optional[Settings] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        """
        Initialize client.
        
        Args:
            config: Ready-made configuration. When omitted one is built from
                settings and the client owns (and closes) its HTTP client.
            settings: Settings used when config is omitted
            sleep: Backoff sleep, injectable for tests
        """
        self._owns_http_client = config is None
        if config is None:
            config = ClientConfig.from_settings(settings or default_settings)
        self.config = config
        self._dispatcher = Dispatcher(config, sleep=sleep)
        self._in_flight: set[asyncio.Task] = set()
        
        logger.info(
            "FullContact client initialized",
            base_url=config.base_url,
            owns_http_client=self._owns_http_client,
        )

    # === Public API ===

    def person_enrich(self, request: Any) -> "asyncio.Future[APIResponse]":
        """Person enrich: takes a PersonRequest (or mapping)."""
        return self.call(RequestKind.PERSON_ENRICH, request)

    def company_enrich(self, request: Any) -> "asyncio.Future[APIResponse]":
        """Company enrich: takes a CompanyRequest with a domain."""
        return self.call(RequestKind.COMPANY_ENRICH, request)

    def company_search(self, request: Any) -> "asyncio.Future[APIResponse]":
        """Company search: takes a CompanyRequest with a company name."""
        return self.call(RequestKind.COMPANY_SEARCH, request)

    def identity_map(self, request: Any) -> "asyncio.Future[APIResponse]":
        """Identity map: takes a ResolveRequest with a record ID."""
        return self.call(RequestKind.IDENTITY_MAP, request)

    def identity_resolve(self, request: Any) -> "asyncio.Future[APIResponse]":
        """Identity resolve: takes a ResolveRequest."""
        return self.call(RequestKind.IDENTITY_RESOLVE, request)

    def identity_delete(self, request: Any) -> "asyncio.Future[APIResponse]":
        """Identity delete: takes a ResolveRequest with a record or person ID."""
        return self.call(RequestKind.IDENTITY_DELETE, request)

    def call(self, kind: RequestKind, request: Any) -> "asyncio.Future[APIResponse]":
        """
        Validate, serialize and dispatch one request of the given kind.
        
        Returns:
            Future resolving to the call's APIResponse
        
        Raises:
            RuntimeError: No running event loop
        """
        loop = asyncio.get_running_loop()
        
        try:
            body = self._prepare(kind, request)
        except FullContactValidationError as e:
            logger.info("Request rejected locally", kind=kind.value, error=e.message)
            requests_total.labels(kind=kind.value, outcome="error").inc()
            handle = loop.create_future()
            handle.set_result(APIResponse(error=e))
            return handle
        
        task = loop.create_task(
            self._dispatcher.dispatch(kind, self.config.url_for(kind), body),
            name=f"fullcontact-{kind.value}",
        )
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    @property
    def in_flight(self) -> int:
        """Number of dispatched calls that have not produced an outcome yet."""
        return len(self._in_flight)

    async def close(self) -> None:
        """
        Wait for in-flight calls, then close the HTTP client if this client
        created it.
        """
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)
        if self._owns_http_client and not self.config.http_client.is_closed:
            await self.config.http_client.aclose()
            logger.debug("Closed FullContact HTTP client")

    async def __aenter__(self) -> "FullContactClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # === Internals ===

    def _prepare(self, kind: RequestKind, request: Any) -> bytes:
        label = endpoint_for(kind).request_label
        if request is None:
            raise FullContactValidationError(
                f"{label} Request can't be None",
                details={"kind": kind.value},
            )
        if not isinstance(request, (BaseModel, Mapping)):
            raise FullContactValidationError(
                f"{label} Request must be a model or mapping, got {type(request).__name__}",
                details={"kind": kind.value},
            )
        
        try:
            reason = self.config.validators[kind](request)
        except Exception as e:
            logger.warning(
                "Request validator raised",
                kind=kind.value,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise FullContactValidationError(
                f"Validator for {kind.value} failed: {e}",
                details={"kind": kind.value, "error_type": type(e).__name__},
            ) from e
        if reason:
            raise FullContactValidationError(reason, details={"kind": kind.value})
        
        return serialize_request(kind, request)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.config.base_url})"


def serialize_request(kind: RequestKind, request: Any) -> bytes:
    """
    Encode a request model or mapping as JSON bytes.
    
    Raises:
        FullContactSerializationError: The request is not JSON-serializable
    """
    try:
        if isinstance(request, BaseModel):
            return request.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        # NaN and Infinity are not valid JSON
        return json.dumps(dict(request), allow_nan=False).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise FullContactSerializationError(
            f"Failed to serialize {kind.value} request: {e}",
            details={"kind": kind.value, "error_type": type(e).__name__},
        ) from e
