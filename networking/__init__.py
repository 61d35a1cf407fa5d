"""Endpoint-based async HTTP networking layer."""
from networking.application.endpoint_provider import EndpointProvider
from networking.domain.errors import (
    InvalidBaseURLError,
    InvalidEndpointError,
    InvalidResponseError,
    MissingReferenceError,
    NetworkingError,
)
from networking.domain.events import ErrorReceived, RequestSent, ResponseReceived, TransportEvent
from networking.domain.models import Endpoint, HTTPMethod, TransportRequest, TransportResponse
from networking.domain.request_builder import build_request
from networking.infrastructure.http.error_transport import ErrorTransport
from networking.infrastructure.http.httpx_transport import HttpxTransport
from networking.infrastructure.serialization.json_codec import JsonDecoder, JsonEncoder
from networking.ports.transport import (
    RequestTimeout,
    Transport,
    TransportError,
    TransportStatusError,
    TransportTimeoutError,
)

__all__ = [
    "Endpoint",
    "EndpointProvider",
    "ErrorReceived",
    "ErrorTransport",
    "HTTPMethod",
    "HttpxTransport",
    "InvalidBaseURLError",
    "InvalidEndpointError",
    "InvalidResponseError",
    "JsonDecoder",
    "JsonEncoder",
    "MissingReferenceError",
    "NetworkingError",
    "RequestSent",
    "RequestTimeout",
    "ResponseReceived",
    "Transport",
    "TransportError",
    "TransportEvent",
    "TransportRequest",
    "TransportResponse",
    "TransportStatusError",
    "TransportTimeoutError",
    "build_request",
]
