"""
Builds the POST request for one attempt.

A fresh request is built per attempt so that the bearer token is read from
the credentials provider each time.
"""

from typing import Mapping

import httpx
import structlog

from fullcontact_client.client.credentials import CredentialsProvider
from fullcontact_client.client.endpoints import USER_AGENT
from fullcontact_client.client.exceptions import FullContactConstructionError


logger = structlog.get_logger(__name__)


def build_request(
    url: str,
    body: bytes,
    credentials: CredentialsProvider,
    static_headers: Mapping[str, str] | None = None,
) -> httpx.Request:
    """
    Assemble a POST request with auth, content-type and user-agent headers.
    
    Caller-supplied static headers are applied first; the three fixed
    headers always win over a static header of the same name.
    
    Raises:
        FullContactConstructionError: URL or headers cannot form a valid request
    """
    try:
        headers = httpx.Headers(static_headers or {})
        headers["Authorization"] = f"Bearer {credentials.get_api_key()}"
        headers["Content-Type"] = "application/json"
        headers["User-Agent"] = USER_AGENT
        request = httpx.Request("POST", url, content=body, headers=headers)
    except (httpx.InvalidURL, ValueError, TypeError) as e:
        logger.error("Failed to build request", url=url, error=str(e))
        raise FullContactConstructionError(
            f"Cannot build request for {url}: {e}",
            details={"url": url, "error_type": type(e).__name__},
        ) from e
    
    if request.url.scheme not in ("http", "https") or not request.url.host:
        logger.error("Refusing non-absolute request URL", url=url)
        raise FullContactConstructionError(
            f"Request URL must be an absolute http(s) URL: {url}",
            details={"url": url},
        )
    return request
