"""Observation events emitted by transports around a single dispatch.

All events of one call share the same correlation id so an external observer
can pair them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from uuid import UUID

from networking.constants import TRANSPORT_EVENT
from networking.domain.models import TransportRequest, TransportResponse


@dataclass(frozen=True)
class RequestSent:
    request: TransportRequest
    correlation_id: UUID
    kind: str = TRANSPORT_EVENT.REQUEST_SENT


@dataclass(frozen=True)
class ResponseReceived:
    response: TransportResponse
    correlation_id: UUID
    kind: str = TRANSPORT_EVENT.RESPONSE_RECEIVED


@dataclass(frozen=True)
class ErrorReceived:
    error: BaseException
    correlation_id: UUID
    kind: str = TRANSPORT_EVENT.ERROR_RECEIVED


TransportEvent = Union[RequestSent, ResponseReceived, ErrorReceived]
