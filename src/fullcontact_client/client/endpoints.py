"""
Fixed endpoint table: RequestKind -> path, classification family, payload shape.

This table is the single source for both directions of the mapping: the
facade looks up the URL to call, and the classifier looks up how to decode
the response.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from pydantic import TypeAdapter

from fullcontact_client.models.enums import EndpointFamily, RequestKind
from fullcontact_client.models.response_models import (
    CompanyResponse,
    CompanySearchResponse,
    PersonResponse,
    ResolveResponse,
)

DEFAULT_BASE_URL = "https://api.fullcontact.com/v3/"
USER_AGENT = "FullContact_Python_Client_V0.1.0"

# Response header a test double can set to force another kind's classification.
TEST_TYPE_HEADER = "X-FC-Client-Test-Type"


@dataclass(frozen=True)
class Endpoint:
    """
    One row of the endpoint table.
    
    Attributes:
        kind: Request kind served by this endpoint
        family: Classification family (decides the success codes)
        payload_field: APIResponse field that receives the decoded payload
        adapter: pydantic TypeAdapter for the payload shape
        empty_payload: Factory for the zero-value payload of an empty body
        request_label: Request type named in local rejection messages
    """

    kind: RequestKind
    family: EndpointFamily
    payload_field: str
    adapter: TypeAdapter
    empty_payload: Callable[[], Any]
    request_label: str

    @property
    def path(self) -> str:
        return self.kind.value

    def url(self, base_url: str = DEFAULT_BASE_URL) -> str:
        return f"{base_url.rstrip('/')}/{self.path}"

    def is_success(self, status_code: int) -> bool:
        return status_code in self.family.success_codes


def _enrich(
    kind: RequestKind, field: str, shape: Any, empty: Callable[[], Any], label: str
) -> Endpoint:
    return Endpoint(kind, EndpointFamily.ENRICH, field, TypeAdapter(shape), empty, label)


def _resolve(kind: RequestKind) -> Endpoint:
    return Endpoint(
        kind,
        EndpointFamily.RESOLVE,
        "resolve_response",
        TypeAdapter(ResolveResponse),
        ResolveResponse,
        "Resolve",
    )


ENDPOINTS: Mapping[RequestKind, Endpoint] = MappingProxyType({
    RequestKind.PERSON_ENRICH: _enrich(
        RequestKind.PERSON_ENRICH, "person_response", PersonResponse, PersonResponse, "Person"
    ),
    RequestKind.COMPANY_ENRICH: _enrich(
        RequestKind.COMPANY_ENRICH, "company_response", CompanyResponse, CompanyResponse, "Company"
    ),
    RequestKind.COMPANY_SEARCH: _enrich(
        RequestKind.COMPANY_SEARCH,
        "company_search_response",
        list[CompanySearchResponse],
        list,
        "Company",
    ),
    RequestKind.IDENTITY_MAP: _resolve(RequestKind.IDENTITY_MAP),
    RequestKind.IDENTITY_RESOLVE: _resolve(RequestKind.IDENTITY_RESOLVE),
    RequestKind.IDENTITY_DELETE: _resolve(RequestKind.IDENTITY_DELETE),
})


def endpoint_for(kind: RequestKind) -> Endpoint:
    return ENDPOINTS[kind]
