"""Transport port: contract for dispatching a built request.

The provider depends on this port; infrastructure (e.g. httpx) implements it.
The error set is transport-defined; the classes below are what the bundled
transports raise.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from networking.domain.models import TransportRequest, TransportResponse


class TransportError(Exception):
    """Base for transport failures (network, status, etc.)."""


class TransportTimeoutError(TransportError):
    """Raised when the request times out."""


class TransportStatusError(TransportError):
    """Raised for non-2xx responses when the transport is asked to check status."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class RequestTimeout:
    """Connect and read timeouts in seconds."""

    connect_seconds: float
    read_seconds: float


@runtime_checkable
class Transport(Protocol):
    """Port: send one request, get back raw bytes and metadata."""

    async def send(self, request: TransportRequest) -> TransportResponse:
        """Dispatch the request; raise a transport-defined error on failure."""
        ...

    async def close(self) -> None:
        """Release resources. No-op allowed if nothing to close."""
        ...
