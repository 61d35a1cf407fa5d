"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


def _freeze(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"


@dataclass(frozen=True)
class Endpoint:
    """Declarative description of one HTTP call.

    Every field has a default, so concrete endpoints only redeclare what differs:

        @dataclass(frozen=True)
        class LaunchesEndpoint(Endpoint):
            path: str = "/launches"

    Queries and headers are stored read-only. Endpoints compare by value but
    are not hashable, since the body may be any serializable value.
    """

    __hash__ = None  # type: ignore[assignment]

    path: str = ""
    method: HTTPMethod = HTTPMethod.GET
    queries: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # keeps @dataclass from generating a field-based hash on subclasses
        cls.__hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "queries", _freeze(self.queries))
        object.__setattr__(self, "headers", _freeze(self.headers))


@dataclass(frozen=True)
class TransportRequest:
    """Fully resolved request handed to a transport (value object, read-only headers)."""

    __hash__ = None  # type: ignore[assignment]

    url: str
    method: HTTPMethod
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _freeze(self.headers))


@dataclass(frozen=True)
class TransportResponse:
    """Raw body plus response metadata returned by a transport (value object, read-only headers)."""

    __hash__ = None  # type: ignore[assignment]

    body: bytes
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    url: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _freeze(self.headers))
