"""Transport factory: selects implementation from settings. Only place that imports concrete transports."""
from __future__ import annotations

import httpx

from networking.config.settings import Settings
from networking.infrastructure.http.httpx_transport import HttpxTransport
from networking.ports.observer import TransportObserver
from networking.ports.transport import RequestTimeout, Transport


def create_transport(settings: Settings, *, observer: TransportObserver | None = None) -> Transport:
    backend = settings.transport_backend.strip().lower()

    if backend == "httpx":
        return HttpxTransport(
            httpx.AsyncClient(),
            timeout=RequestTimeout(
                connect_seconds=settings.connect_timeout_seconds,
                read_seconds=settings.read_timeout_seconds,
            ),
            follow_redirects=settings.follow_redirects,
            raise_for_status=settings.raise_for_status,
            observer=observer,
        )

    raise ValueError(f"Unsupported transport backend: {backend}")
