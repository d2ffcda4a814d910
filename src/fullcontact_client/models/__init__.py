"""
Pydantic data models for the FullContact client.

Includes:
- Enums (RequestKind, EndpointFamily)
- Request models (PersonRequest, CompanyRequest, ResolveRequest)
- Response payloads (PersonResponse, CompanyResponse, ...)
- APIResponse, the terminal outcome of a call
"""

from fullcontact_client.models.enums import EndpointFamily, RequestKind
from fullcontact_client.models.request_models import (
    CompanyRequest,
    Location,
    PersonName,
    PersonRequest,
    Profile,
    ResolveRequest,
)
from fullcontact_client.models.response_models import (
    CompanyResponse,
    CompanySearchResponse,
    PersonResponse,
    ResolveResponse,
)
from fullcontact_client.models.api_response import APIResponse

__all__ = [
    # Enums
    "EndpointFamily",
    "RequestKind",
    # Request models
    "CompanyRequest",
    "Location",
    "PersonName",
    "PersonRequest",
    "Profile",
    "ResolveRequest",
    # Response payloads
    "CompanyResponse",
    "CompanySearchResponse",
    "PersonResponse",
    "ResolveResponse",
    # Outcome
    "APIResponse",
]
