"""Concrete transport implementation using httpx (injected where Transport is needed)."""
from __future__ import annotations

from typing import Any
from uuid import uuid4

import httpx
from loguru import logger

from networking.domain.errors import InvalidResponseError, MissingReferenceError
from networking.domain.events import ErrorReceived, RequestSent, ResponseReceived, TransportEvent
from networking.domain.models import TransportRequest, TransportResponse
from networking.ports.observer import TransportObserver
from networking.ports.transport import (
    RequestTimeout,
    Transport,
    TransportError,
    TransportStatusError,
    TransportTimeoutError,
)


class HttpxTransport(Transport):
    """Transport implementation using httpx.AsyncClient.

    Every call gets its own correlation id; the optional observer sees
    RequestSent before the dispatch completes and then exactly one of
    ResponseReceived or ErrorReceived. Observer failures are logged and dropped.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        timeout: RequestTimeout | None = None,
        follow_redirects: bool = True,
        raise_for_status: bool = False,
        observer: TransportObserver | None = None,
    ) -> None:
        self._client = client
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._raise_for_status = raise_for_status
        self._observer = observer

    async def send(self, request: TransportRequest) -> TransportResponse:
        if self._client.is_closed:
            raise MissingReferenceError(f"http client closed before sending to {request.url}")

        correlation_id = uuid4()
        self._notify(RequestSent(request=request, correlation_id=correlation_id))

        try:
            response = await self._dispatch(request)
        except Exception as exc:
            self._notify(ErrorReceived(error=exc, correlation_id=correlation_id))
            raise

        self._notify(ResponseReceived(response=response, correlation_id=correlation_id))
        return response

    async def close(self) -> None:
        await self._client.aclose()

    async def _dispatch(self, request: TransportRequest) -> TransportResponse:
        try:
            http_request = self._client.build_request(
                request.method.value,
                request.url,
                headers=request.headers,
                content=request.body,
                **self._timeout_kwargs(),
            )
        except (httpx.InvalidURL, ValueError, TypeError) as exc:
            # e.g. header values httpx cannot encode
            raise TransportError(f"cannot build request for {request.url}: {exc}") from exc

        try:
            response = await self._client.send(http_request, follow_redirects=self._follow_redirects)
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(f"timeout while requesting {http_request.url}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"request to {http_request.url} failed: {exc}") from exc
        except UnicodeError as exc:
            raise TransportError(f"cannot encode request to {http_request.url}: {exc}") from exc

        if response is None:
            raise InvalidResponseError(f"no response and no error for {http_request.url}")

        if self._raise_for_status and not response.is_success:
            raise TransportStatusError(
                f"http status {response.status_code} for {http_request.url}",
                status_code=response.status_code,
            )

        return TransportResponse(
            body=response.content,
            status_code=response.status_code,
            headers=dict(response.headers),
            url=str(response.url),
        )

    def _timeout_kwargs(self) -> dict[str, Any]:
        if self._timeout is None:
            return {}
        return {
            "timeout": httpx.Timeout(
                connect=self._timeout.connect_seconds,
                read=self._timeout.read_seconds,
                write=self._timeout.read_seconds,
                pool=self._timeout.connect_seconds,
            )
        }

    def _notify(self, event: TransportEvent) -> None:
        if self._observer is None:
            return
        try:
            self._observer.notify(event)
        except Exception as exc:
            logger.warning("transport observer failed on {}: {}", event.kind, exc)
