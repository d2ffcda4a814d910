"""
Request value objects sent to the FullContact API.

Models carry the commonly used query fields with camelCase wire aliases.
Unknown fields are allowed and forwarded untouched, so newer API options can
be sent without a client release.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class PersonName(_WireModel):
    """Structured person name used as a query identifier."""
    
    given: Optional[str] = None
    family: Optional[str] = None
    full: Optional[str] = None


class Location(_WireModel):
    """Postal location used together with a name to query a person."""
    
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    region_code: Optional[str] = None
    postal_code: Optional[str] = None


class Profile(_WireModel):
    """Social profile reference (service + username or URL)."""
    
    service: Optional[str] = None
    username: Optional[str] = None
    userid: Optional[str] = None
    url: Optional[str] = None


class PersonRequest(_WireModel):
    """Query for the person enrich endpoint."""
    
    emails: Optional[list[str]] = None
    phones: Optional[list[str]] = None
    profiles: Optional[list[Profile]] = None
    name: Optional[PersonName] = None
    location: Optional[Location] = None
    maids: Optional[list[str]] = None
    record_id: Optional[str] = None
    person_id: Optional[str] = None
    webhook_url: Optional[str] = None
    confidence: Optional[str] = None
    infer: Optional[bool] = None
    data_filter: Optional[list[str]] = None


class CompanyRequest(_WireModel):
    """Query for the company enrich and company search endpoints."""
    
    domain: Optional[str] = None
    company_name: Optional[str] = None
    sort: Optional[str] = None
    location: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None
    webhook_url: Optional[str] = None


class ResolveRequest(_WireModel):
    """Query for the identity map, resolve and delete endpoints."""
    
    emails: Optional[list[str]] = None
    phones: Optional[list[str]] = None
    maids: Optional[list[str]] = None
    profiles: Optional[list[Profile]] = None
    name: Optional[PersonName] = None
    location: Optional[Location] = None
    record_id: Optional[str] = None
    person_id: Optional[str] = None
    
    def has_identifier(self) -> bool:
        """True when at least one contact identifier is populated."""
        return bool(
            self.emails
            or self.phones
            or self.maids
            or self.profiles
            or (self.name is not None and self.location is not None)
        )


def request_identifiers(request: Any) -> dict[str, Any]:
    """Return the populated top-level wire fields of a request model or mapping."""
    if isinstance(request, BaseModel):
        return request.model_dump(by_alias=True, exclude_none=True)
    return {key: value for key, value in dict(request).items() if value is not None}
