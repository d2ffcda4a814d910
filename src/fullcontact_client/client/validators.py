"""
Per-kind field validators.

A validator takes the request (pydantic model or plain mapping) and returns
None when it passes or a reason string when it does not. The client accepts
overrides per kind; these are the defaults.
"""

from typing import Any, Callable, Mapping, Optional

from fullcontact_client.models.enums import RequestKind
from fullcontact_client.models.request_models import request_identifiers

Validator = Callable[[Any], Optional[str]]

_IDENTIFIER_FIELDS = ("emails", "phones", "maids", "profiles")


def _has_identifier(fields: dict[str, Any]) -> bool:
    if any(fields.get(name) for name in _IDENTIFIER_FIELDS):
        return True
    return bool(fields.get("name")) and bool(fields.get("location"))


def validate_person_enrich(request: Any) -> Optional[str]:
    # Person enrich accepts any combination of query fields.
    return None


def validate_company_enrich(request: Any) -> Optional[str]:
    fields = request_identifiers(request)
    if not fields.get("domain"):
        return "Company Domain is mandatory for Company Enrich"
    return None


def validate_company_search(request: Any) -> Optional[str]:
    fields = request_identifiers(request)
    if not fields.get("companyName"):
        return "Company Name is mandatory for Company Search"
    return None


def validate_identity_map(request: Any) -> Optional[str]:
    fields = request_identifiers(request)
    if not fields.get("recordId"):
        return "Record ID is mandatory for Identity Map"
    if fields.get("personId"):
        return "Person ID not supported for Identity Map"
    if not _has_identifier(fields):
        return "At least one identifier is required for Identity Map"
    return None


def validate_identity_resolve(request: Any) -> Optional[str]:
    fields = request_identifiers(request)
    if fields.get("recordId") and fields.get("personId"):
        return "Both Record ID and Person ID cannot be provided for Identity Resolve"
    if not (fields.get("recordId") or fields.get("personId") or _has_identifier(fields)):
        return "Record ID, Person ID or an identifier is required for Identity Resolve"
    return None


def validate_identity_delete(request: Any) -> Optional[str]:
    fields = request_identifiers(request)
    if not (fields.get("recordId") or fields.get("personId")):
        return "Record ID or Person ID is mandatory for Identity Delete"
    return None


DEFAULT_VALIDATORS: Mapping[RequestKind, Validator] = {
    RequestKind.PERSON_ENRICH: validate_person_enrich,
    RequestKind.COMPANY_ENRICH: validate_company_enrich,
    RequestKind.COMPANY_SEARCH: validate_company_search,
    RequestKind.IDENTITY_MAP: validate_identity_map,
    RequestKind.IDENTITY_RESOLVE: validate_identity_resolve,
    RequestKind.IDENTITY_DELETE: validate_identity_delete,
}
