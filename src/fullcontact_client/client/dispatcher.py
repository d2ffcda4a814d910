"""
Executes the attempt sequence for one call.

The dispatcher sends the first attempt, then retries transport errors and
retryable statuses with exponential backoff until the policy stops asking
for retries or the attempt ceiling (min(configured, MAX_RETRY_ATTEMPTS)) is
reached. Whatever happens, dispatch() returns exactly one APIResponse.

Attempts of one call are strictly sequential. The only suspension points
are the network call and the backoff sleep, both inside the call's own task.
"""

import asyncio
import time
from typing import Awaitable, Callable, Optional

import httpx
import structlog

from fullcontact_client.client.classifier import (
    classification_override,
    classify,
    error_response,
)
from fullcontact_client.client.client_config import ClientConfig
from fullcontact_client.client.exceptions import FullContactError, FullContactTransportError
from fullcontact_client.client.request_builder import build_request
from fullcontact_client.models.api_response import APIResponse
from fullcontact_client.models.enums import RequestKind
from fullcontact_client.monitoring.metrics import (
    request_latency_seconds,
    requests_total,
    retries_total,
)
from fullcontact_client.retry.policy import attempt_ceiling


logger = structlog.get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class Dispatcher:
    """
    Bounded retry loop around the shared HTTP transport.
    
    Attributes:
        config: Shared client configuration
        sleep: Awaitable used for backoff (asyncio.sleep unless injected)
    """

    def __init__(self, config: ClientConfig, sleep: Sleep = asyncio.sleep):
        self.config = config
        self.sleep = sleep

    async def dispatch(self, kind: RequestKind, url: str, body: bytes) -> APIResponse:
        """
        Run the full attempt sequence and classify the terminal result.
        
        Unexpected exceptions are turned into an error outcome rather than
        escaping, so the caller's future always resolves with an APIResponse.
        """
        start_time = time.monotonic()
        log = logger.bind(kind=kind.value, url=url)
        
        try:
            outcome = await self._dispatch(kind, url, body, log)
        except Exception as e:
            log.exception("Unexpected error during dispatch", error_type=type(e).__name__)
            error = FullContactError(
                f"Unexpected error: {e}",
                details={"kind": kind.value, "error_type": type(e).__name__},
            )
            error.__cause__ = e
            outcome = error_response(error)
        
        request_latency_seconds.labels(kind=kind.value).observe(time.monotonic() - start_time)
        requests_total.labels(kind=kind.value, outcome=outcome_label(outcome)).inc()
        return outcome

    async def _dispatch(self, kind: RequestKind, url: str, body: bytes, log) -> APIResponse:
        policy = self.config.retry_policy
        ceiling = attempt_ceiling(policy)
        attempts_done = 0
        
        while True:
            try:
                response, error = await self._attempt(url, body)
            except FullContactError as e:
                # Construction problems are not retried.
                log.error("Request construction failed", error=e.message)
                return error_response(e)
            
            if error is not None:
                reason = "transport"
            elif policy.should_retry(response.status_code):
                reason = "status"
            else:
                break
            
            if attempts_done >= ceiling:
                log.warning(
                    "Retry budget exhausted",
                    attempts=attempts_done + 1,
                    reason=reason,
                    status_code=response.status_code if response is not None else None,
                )
                break
            
            if response is not None:
                await response.aclose()
            
            attempts_done += 1
            delay = policy.delay_for_attempt(attempts_done)
            retries_total.labels(kind=kind.value, reason=reason).inc()
            log.info(
                "Retrying request",
                retry=attempts_done,
                ceiling=ceiling,
                reason=reason,
                status_code=response.status_code if response is not None else None,
                backoff_seconds=delay,
            )
            await self.sleep(delay)
        
        if error is not None:
            return error_response(error)
        
        log.debug(
            "Received terminal response",
            status_code=response.status_code,
            attempts=attempts_done + 1,
        )
        return await classify(kind, response, classification_override(response))

    async def _attempt(
        self, url: str, body: bytes
    ) -> tuple[Optional[httpx.Response], Optional[FullContactTransportError]]:
        """
        Build and send one request.
        
        Returns (response, None) when a response arrived, (None, error) on a
        transport-level failure.
        
        Raises:
            FullContactError: The request could not be built
        """
        request = build_request(url, body, self.config.credentials, self.config.headers)
        try:
            response = await self.config.http_client.send(request, stream=True)
        except httpx.TransportError as e:
            logger.warning(
                "Transport error",
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            error = FullContactTransportError(
                f"Transport error: {e}",
                details={"url": url, "error_type": type(e).__name__},
            )
            error.__cause__ = e
            return None, error
        return response, None


def outcome_label(outcome: APIResponse) -> str:
    if outcome.error is not None:
        return "error"
    return "success" if outcome.is_successful else "failure"
