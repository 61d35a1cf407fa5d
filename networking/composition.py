"""Composition root: build and lifecycle-manage concrete dependencies.

Composition may: import concrete classes, call factories, store interface types,
manage high-level lifecycle.
"""
from __future__ import annotations

from typing import Any

from loguru import logger

from networking.application.endpoint_provider import EndpointProvider
from networking.config.settings import Settings
from networking.constants import SERVICE_NAME
from networking.infrastructure.http.factory import create_transport
from networking.infrastructure.observation.logging_observer import LoggingTransportObserver
from networking.infrastructure.serialization.json_codec import JsonDecoder, JsonEncoder
from networking.ports.transport import Transport


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class NetworkingDependencies:
    """Holds the wired transport and provider and their lifecycle."""

    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._transport: Transport | None = None
        self._provider: EndpointProvider | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def provider(self) -> EndpointProvider:
        if self._provider is None:
            raise RuntimeError("provider is not initialized")
        return self._provider

    def connect(self) -> None:
        observer = LoggingTransportObserver() if self._settings.log_events else None
        self._transport = create_transport(self._settings, observer=observer)

        global_headers: dict[str, str] = {}
        if self._settings.user_agent:
            global_headers["User-Agent"] = self._settings.user_agent

        self._provider = EndpointProvider(
            self._transport,
            base_url=self._settings.base_url,
            headers=global_headers,
            encoder=JsonEncoder(),
            decoder=JsonDecoder(strict=self._settings.decode_strict),
        )
        _log("provider_ready", base_url=self._settings.base_url, backend=self._settings.transport_backend)

    async def close(self) -> None:
        if self._transport is not None:
            try:
                await self._transport.close()
            except Exception as exc:
                logger.warning("transport close failed: {}", exc)
            self._transport = None
        self._provider = None


def create_networking_dependencies(settings: Settings | None = None) -> NetworkingDependencies:
    return NetworkingDependencies(settings=settings or Settings())
