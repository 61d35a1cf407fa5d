"""Observer that writes transport events as structured loguru records."""
from __future__ import annotations

from typing import Any

from loguru import logger

from networking.constants import SERVICE_NAME
from networking.domain.events import ErrorReceived, RequestSent, ResponseReceived, TransportEvent


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class LoggingTransportObserver:
    """TransportObserver implementation; bodies are logged by size only."""

    def notify(self, event: TransportEvent) -> None:
        correlation_id = str(event.correlation_id)
        if isinstance(event, RequestSent):
            _log(
                event.kind,
                correlation_id=correlation_id,
                method=event.request.method.value,
                url=event.request.url,
                body_length=len(event.request.body or b""),
            )
        elif isinstance(event, ResponseReceived):
            _log(
                event.kind,
                correlation_id=correlation_id,
                status_code=event.response.status_code,
                url=event.response.url,
                body_length=len(event.response.body),
            )
        elif isinstance(event, ErrorReceived):
            logger.bind(
                service_name=SERVICE_NAME,
                event=event.kind,
                correlation_id=correlation_id,
                error_type=type(event.error).__name__,
            ).warning("{}", event.error)
