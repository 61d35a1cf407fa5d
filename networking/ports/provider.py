"""Port: typed request/response over an endpoint description."""
from __future__ import annotations

from typing import Protocol, TypeVar

from networking.domain.models import Endpoint

T = TypeVar("T")


class NetworkingProvider(Protocol):
    """Builds, dispatches and decodes a single endpoint call."""

    async def send_request(self, endpoint: Endpoint, response_type: type[T]) -> T: ...
