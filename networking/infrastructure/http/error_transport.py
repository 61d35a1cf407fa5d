"""Transport that always fails with a pre-configured error. No I/O."""
from __future__ import annotations

from networking.domain.models import TransportRequest, TransportResponse
from networking.ports.transport import Transport


class ErrorTransport(Transport):
    def __init__(self, error: Exception) -> None:
        self._error = error

    async def send(self, request: TransportRequest) -> TransportResponse:
        raise self._error

    async def close(self) -> None:
        return
