"""Ports: body encoding and response decoding."""
from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Encoder(Protocol):
    def encode(self, value: Any) -> bytes: ...


@runtime_checkable
class Decoder(Protocol):
    def decode(self, data: bytes, response_type: type[T]) -> T: ...
