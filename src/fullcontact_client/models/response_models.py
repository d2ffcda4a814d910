"""
Typed payloads returned by the FullContact API.

Every field is optional: an empty response body (e.g. a 404 "not found" or a
202 "queued") still produces a zero-value instance. Unknown keys are kept so
callers can reach fields this client does not model yet.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _PayloadModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class PersonResponse(_PayloadModel):
    """Person enrich payload."""
    
    full_name: Optional[str] = None
    age_range: Optional[str] = None
    gender: Optional[str] = None
    location: Optional[str] = None
    title: Optional[str] = None
    organization: Optional[str] = None
    twitter: Optional[str] = None
    linkedin: Optional[str] = None
    facebook: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None
    website: Optional[str] = None
    details: Optional[dict[str, Any]] = None
    updated: Optional[str] = None


class CompanyResponse(_PayloadModel):
    """Company enrich payload."""
    
    name: Optional[str] = None
    location: Optional[str] = None
    twitter: Optional[str] = None
    linkedin: Optional[str] = None
    facebook: Optional[str] = None
    bio: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    employees: Optional[int] = None
    founded: Optional[int] = None
    category: Optional[str] = None
    details: Optional[dict[str, Any]] = None
    updated: Optional[str] = None


class CompanySearchResponse(_PayloadModel):
    """One candidate company returned by company search."""
    
    lookup_domain: Optional[str] = None
    org_name: Optional[str] = None
    logo: Optional[str] = None
    location: Optional[dict[str, Any]] = None


class ResolveResponse(_PayloadModel):
    """Identity map / resolve / delete payload."""
    
    record_ids: Optional[list[str]] = None
    person_ids: Optional[list[str]] = None
    partner_ids: Optional[list[str]] = None
