"""
Terminal outcome of one dispatched call.

An APIResponse is produced exactly once per call and delivered through the
call's future. Error and typed payload are mutually exclusive.
"""

from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, model_validator

from fullcontact_client.models.response_models import (
    CompanyResponse,
    CompanySearchResponse,
    PersonResponse,
    ResolveResponse,
)


class APIResponse(BaseModel):
    """
    Result of a FullContact call.
    
    Attributes:
        is_successful: Status code is a defined business outcome for the
            endpoint family (includes 404 "not found")
        status_code: HTTP status, absent when no response was received
        status: Status line text, e.g. "200 OK"
        error: Local validation, transport or deserialization failure
        raw_http_response: Terminal httpx response (body already read and closed)
        person_response / company_response / company_search_response /
        resolve_response: Typed payload for the endpoint that was classified
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)
    
    is_successful: bool = False
    status_code: Optional[int] = None
    status: Optional[str] = None
    error: Optional[Exception] = None
    raw_http_response: Optional[httpx.Response] = None
    
    person_response: Optional[PersonResponse] = None
    company_response: Optional[CompanyResponse] = None
    company_search_response: Optional[list[CompanySearchResponse]] = None
    resolve_response: Optional[ResolveResponse] = None
    
    @model_validator(mode="after")
    def _error_excludes_payload(self) -> "APIResponse":
        if self.error is not None and self.has_payload:
            raise ValueError("APIResponse cannot carry both an error and a payload")
        return self
    
    @property
    def has_payload(self) -> bool:
        return any(
            payload is not None
            for payload in (
                self.person_response,
                self.company_response,
                self.company_search_response,
                self.resolve_response,
            )
        )
    
    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404
