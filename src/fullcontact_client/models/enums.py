"""
Enumerations for FullContact client data models.

Both enums are closed sets - the API surface is fixed at six endpoints.
"""

from enum import Enum
from typing import Optional


class RequestKind(str, Enum):
    """
    The six FullContact v3 call types.
    
    Values are the endpoint path segments, so a kind can be recovered from
    either its own value or a full endpoint URL.
    """
    
    PERSON_ENRICH = "person.enrich"
    COMPANY_ENRICH = "company.enrich"
    COMPANY_SEARCH = "company.search"
    IDENTITY_MAP = "identity.map"
    IDENTITY_RESOLVE = "identity.resolve"
    IDENTITY_DELETE = "identity.delete"
    
    @classmethod
    def from_hint(cls, hint: Optional[str]) -> Optional["RequestKind"]:
        """Parse a kind value or endpoint URL; None when it names no kind."""
        if not hint:
            return None
        segment = hint.strip().rstrip("/").rsplit("/", 1)[-1]
        try:
            return cls(segment)
        except ValueError:
            return None


class EndpointFamily(str, Enum):
    """
    Response-classification family of an endpoint.
    
    The family decides which status codes count as business success.
    404 is a defined "not found" outcome in both families.
    """
    
    ENRICH = "enrich"
    RESOLVE = "resolve"
    
    @property
    def success_codes(self) -> frozenset[int]:
        if self is EndpointFamily.ENRICH:
            return frozenset({200, 202, 404})
        return frozenset({200, 204, 404})
