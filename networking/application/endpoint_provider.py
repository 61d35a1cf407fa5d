from __future__ import annotations

from typing import Any, Mapping, TypeVar

from loguru import logger

from networking.constants import DISPATCH_STATE, SERVICE_NAME
from networking.domain.models import Endpoint
from networking.domain.request_builder import build_request
from networking.infrastructure.serialization.json_codec import JsonDecoder, JsonEncoder
from networking.ports.provider import NetworkingProvider
from networking.ports.serialization import Decoder, Encoder
from networking.ports.transport import Transport

T = TypeVar("T")


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


class EndpointProvider(NetworkingProvider):
    """
    Sends requests built from Endpoint descriptions and decodes the response body.

    Each call goes BUILT -> DISPATCHED -> DECODED, or stops at FAILED with the
    first error raised by the builder, the transport or the decoder, unchanged.
    The provider only holds its configuration, so concurrent calls share nothing
    mutable. Response metadata is dropped; only the body is decoded.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        base_url: str,
        headers: Mapping[str, str] | None = None,
        encoder: Encoder | None = None,
        decoder: Decoder | None = None,
    ) -> None:
        self._transport = transport
        self._base_url = base_url
        self._headers = dict(headers) if headers else {}
        self._encoder = encoder or JsonEncoder()
        self._decoder = decoder or JsonDecoder()

    @property
    def base_url(self) -> str:
        return self._base_url

    async def send_request(self, endpoint: Endpoint, response_type: type[T]) -> T:
        stage = "build"
        try:
            request = build_request(
                endpoint,
                base_url=self._base_url,
                headers=self._headers,
                encoder=self._encoder,
            )
            _log(DISPATCH_STATE.BUILT, method=request.method.value, url=request.url)

            stage = "dispatch"
            response = await self._transport.send(request)
            _log(DISPATCH_STATE.DISPATCHED, url=request.url, status_code=response.status_code)

            stage = "decode"
            result = self._decoder.decode(response.body, response_type)
        except Exception as exc:
            _log(DISPATCH_STATE.FAILED, stage=stage, error=str(exc), error_type=type(exc).__name__)
            raise

        _log(DISPATCH_STATE.DECODED, url=request.url)
        return result
