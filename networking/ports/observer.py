"""Port: optional sink for transport observation events."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from networking.domain.events import TransportEvent


@runtime_checkable
class TransportObserver(Protocol):
    """Receives sent/received/failed events. Never part of the result path."""

    def notify(self, event: TransportEvent) -> None: ...
