"""
Custom exceptions for the FullContact client.

Every failure a call can surface is a FullContactError subclass carried in
APIResponse.error. The subclass tells the caller where the call failed:
before dispatch (validation, serialization), while building the request,
on the wire, or while decoding the body.
"""


class FullContactError(Exception):
    """
    Base exception for all FullContact client errors.
    
    Carries a human-readable message plus a details dict with structured
    context (request kind, attempt, status code, ...).
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FullContactConfigurationError(FullContactError):
    """
    Raised when the client cannot be configured.
    
    Examples: no API key available, blank static credentials.
    Raised synchronously at construction, never delivered through a future.
    """
    pass


class FullContactValidationError(FullContactError):
    """
    Raised locally when a request is absent or fails field validation.
    
    Never retried; no network call is made.
    """
    pass


class FullContactSerializationError(FullContactValidationError):
    """
    Raised locally when a request cannot be serialized to JSON.
    """
    pass


class FullContactConstructionError(FullContactError):
    """
    Raised when an HTTP request cannot be built from URL and body.
    
    Not expected in normal operation; surfaces immediately without retry.
    """
    pass


class FullContactTransportError(FullContactError):
    """
    Raised when no response was received (connection refused, timeout,
    DNS failure, ...).
    
    Retried up to the attempt ceiling; the last one becomes terminal.
    The underlying httpx exception is kept as __cause__.
    """
    pass


class FullContactDeserializationError(FullContactError):
    """
    Raised when a response body cannot be read or decoded into the
    payload shape of its endpoint.
    
    Not retried - the round trip already happened.
    """
    pass
