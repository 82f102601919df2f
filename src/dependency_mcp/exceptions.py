"""dependency-mcp exception hierarchy.

All public exceptions inherit from DependencyMCPError, giving callers a single
base class to catch when they want to handle any lookup failure without
swallowing unrelated errors.

A package that does not exist is not an exception: handlers report it as a
result with ``found=False``.
"""

from __future__ import annotations


class DependencyMCPError(Exception):
    """Base exception for all dependency-mcp errors."""


class ValidationError(DependencyMCPError):
    """Raised when caller input has the wrong shape or size.

    Covers empty or oversized package names and versions, and empty or
    oversized batches. Raised before any network access.
    """


class UnsupportedRegistryError(DependencyMCPError):
    """Raised when a registry tag is not one of the supported registries."""


class RegistryRequestError(DependencyMCPError):
    """Raised when a request to a remote registry fails.

    Base class for every transport-level failure. The Maven retry wrapper
    retries on this class and nothing else.
    """


class RateLimitedError(RegistryRequestError):
    """Raised when the registry answers HTTP 429."""


class HttpError(RegistryRequestError):
    """Raised for a non-2xx answer that is neither 404 nor 429."""

    def __init__(self, message: str, *, status: int, status_text: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.status_text = status_text


class ServerError(HttpError):
    """Raised when the registry answers with a 5xx status."""


class NetworkError(RegistryRequestError):
    """Raised when the registry host cannot be resolved or refuses connections."""


class RequestTimeoutError(RegistryRequestError):
    """Raised when a request exceeds the configured timeout."""


class MalformedResponseError(RegistryRequestError):
    """Raised when a registry returns a body that cannot be decoded as JSON."""
