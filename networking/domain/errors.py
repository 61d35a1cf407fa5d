"""Errors raised while turning an endpoint into a dispatched request."""
from __future__ import annotations


class NetworkingError(Exception):
    """Base for failures classified by the networking layer itself."""


class InvalidBaseURLError(NetworkingError):
    """Raised when the configured base URL does not parse."""


class InvalidEndpointError(NetworkingError):
    """Raised when base URL and endpoint compose into an unresolvable URL."""


class InvalidResponseError(NetworkingError):
    """Raised when the transport completes with neither a response nor an error."""


class MissingReferenceError(NetworkingError):
    """Raised when the transport's client was released before the call completed."""
