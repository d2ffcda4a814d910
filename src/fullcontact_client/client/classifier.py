"""
Maps a terminal raw outcome to a typed APIResponse.

The endpoint table decides the payload shape and success codes. A response
header set by test doubles (TEST_TYPE_HEADER) can override which kind's rule
is applied; the dispatcher reads it and passes it in explicitly.
"""

from typing import Optional

import httpx
import pydantic
import structlog

from fullcontact_client.client.endpoints import TEST_TYPE_HEADER, endpoint_for
from fullcontact_client.client.exceptions import FullContactDeserializationError
from fullcontact_client.models.api_response import APIResponse
from fullcontact_client.models.enums import RequestKind


logger = structlog.get_logger(__name__)


def classification_override(response: httpx.Response) -> Optional[RequestKind]:
    """Read the test-type header, if any, as a RequestKind."""
    hint = response.headers.get(TEST_TYPE_HEADER)
    if not hint:
        return None
    kind = RequestKind.from_hint(hint)
    if kind is None:
        logger.warning("Ignoring unknown classification override", header_value=hint)
    return kind


def error_response(error: Exception) -> APIResponse:
    """Outcome for a call that produced no HTTP response."""
    return APIResponse(error=error)


async def classify(
    kind: RequestKind,
    response: httpx.Response,
    override_kind: Optional[RequestKind] = None,
) -> APIResponse:
    """
    Read, decode and close a terminal response.
    
    The body is decoded only when non-blank; a blank body or a bare JSON
    null yields the endpoint's zero-value payload. The response is closed
    on every path.
    
    Args:
        kind: Kind of the endpoint that was called
        response: Terminal response (opened with stream=True)
        override_kind: Kind whose classification rule should be used instead
    
    Returns:
        APIResponse with either a typed payload or a deserialization error
    """
    effective_kind = override_kind or kind
    endpoint = endpoint_for(effective_kind)
    status_code = response.status_code
    status = f"{status_code} {response.reason_phrase}".strip()
    
    try:
        body = await response.aread()
    except httpx.HTTPError as e:
        logger.warning(
            "Failed to read response body",
            kind=effective_kind.value,
            status_code=status_code,
            error=str(e),
        )
        return APIResponse(
            status_code=status_code,
            status=status,
            raw_http_response=response,
            error=FullContactDeserializationError(
                f"Failed to read response body: {e}",
                details={"kind": effective_kind.value, "status_code": status_code},
            ),
        )
    finally:
        await response.aclose()
    
    # A bare JSON null decodes to the zero value, same as a blank body.
    if body.strip() not in (b"", b"null"):
        try:
            payload = endpoint.adapter.validate_json(body)
        except pydantic.ValidationError as e:
            logger.warning(
                "Failed to decode response body",
                kind=effective_kind.value,
                status_code=status_code,
                error_count=e.error_count(),
            )
            error = FullContactDeserializationError(
                f"Invalid {effective_kind.value} response body",
                details={
                    "kind": effective_kind.value,
                    "status_code": status_code,
                    "errors": e.errors(include_url=False),
                },
            )
            error.__cause__ = e
            return APIResponse(
                status_code=status_code,
                status=status,
                raw_http_response=response,
                error=error,
            )
    else:
        payload = endpoint.empty_payload()
    
    return APIResponse(
        is_successful=endpoint.is_success(status_code),
        status_code=status_code,
        status=status,
        raw_http_response=response,
        **{endpoint.payload_field: payload},
    )
