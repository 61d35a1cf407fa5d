from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

import pytest
from pydantic import BaseModel

from networking.domain.events import TransportEvent
from networking.domain.models import Endpoint, HTTPMethod, TransportRequest, TransportResponse


class Launch(BaseModel):
    id: str


@dataclass(frozen=True)
class EmptyEndpoint(Endpoint):
    pass


@dataclass(frozen=True)
class LaunchesEndpoint(Endpoint):
    path: str = "/launches"


@dataclass(frozen=True)
class InvalidPathEndpoint(Endpoint):
    path: str = ":-80"


@dataclass(frozen=True)
class FilledEndpoint(Endpoint):
    path: str = "/path"
    queries: Mapping[str, str] = field(default_factory=lambda: {"query": "param"})
    headers: Mapping[str, str] = field(default_factory=lambda: {"header": "value"})
    body: Any = field(default_factory=lambda: Launch(id="id"))


class RecordingTransport:
    """Implements Transport for tests; records requests and answers with a canned response."""

    def __init__(
        self,
        body: bytes = b"[]",
        *,
        status_code: int = 200,
        echo_url: bool = False,
    ) -> None:
        self.requests: list[TransportRequest] = []
        self.closed = False
        self._body = body
        self._status_code = status_code
        self._echo_url = echo_url

    async def send(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        body = json.dumps({"id": request.url}).encode() if self._echo_url else self._body
        return TransportResponse(body=body, status_code=self._status_code, url=request.url)

    async def close(self) -> None:
        self.closed = True


class RecordingObserver:
    """Implements TransportObserver for tests."""

    def __init__(self, *, raise_on_notify: Exception | None = None) -> None:
        self.events: list[TransportEvent] = []
        self._raise_on_notify = raise_on_notify

    def notify(self, event: TransportEvent) -> None:
        self.events.append(event)
        if self._raise_on_notify is not None:
            raise self._raise_on_notify


@pytest.fixture()
def all_methods() -> list[HTTPMethod]:
    return list(HTTPMethod)
