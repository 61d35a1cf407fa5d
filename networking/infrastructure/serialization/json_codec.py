"""JSON encoder/decoder backed by pydantic TypeAdapter.

Works with pydantic models, dataclasses, TypedDicts and plain containers.
Serialization and validation errors are pydantic's own and are not wrapped.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


@lru_cache(maxsize=256)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


class JsonEncoder:
    """Encoder implementation producing UTF-8 JSON bytes."""

    def __init__(self, *, by_alias: bool = False, exclude_none: bool = False) -> None:
        self._by_alias = by_alias
        self._exclude_none = exclude_none

    def encode(self, value: Any) -> bytes:
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        return _adapter(type(value)).dump_json(
            value,
            by_alias=self._by_alias,
            exclude_none=self._exclude_none,
        )


class JsonDecoder:
    """Decoder implementation validating JSON bytes into the requested type."""

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict

    def decode(self, data: bytes, response_type: type[T]) -> T:
        return _adapter(response_type).validate_json(data, strict=self._strict)
