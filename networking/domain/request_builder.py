"""Request builder: turns an Endpoint into an immutable TransportRequest.

Pure function, no I/O. URL composition follows plain string concatenation of
the base path and the endpoint path; the only normalisation applied is
percent-encoding of characters that are not allowed in a path.
"""
from __future__ import annotations

from typing import Mapping
from urllib.parse import SplitResult, quote, urlencode, urlsplit, urlunsplit

import httpx

from networking.domain.errors import InvalidBaseURLError, InvalidEndpointError
from networking.domain.models import Endpoint, TransportRequest
from networking.ports.serialization import Encoder

_PATH_SAFE_CHARS = "/:@!$&'()*+,;=-._~%"


def build_request(
    endpoint: Endpoint,
    *,
    base_url: str,
    headers: Mapping[str, str] | None = None,
    encoder: Encoder,
) -> TransportRequest:
    """Build the request for ``endpoint`` against ``base_url``.

    Raises InvalidBaseURLError, InvalidEndpointError, or whatever the encoder
    raises for the body.
    """
    components = _split_base_url(base_url)

    query = components.query
    if endpoint.queries:
        query = urlencode(list(endpoint.queries.items()), quote_via=quote)

    url = _resolve_url(components._replace(path=components.path + endpoint.path, query=query))

    body: bytes | None = None
    if endpoint.body is not None:
        body = encoder.encode(endpoint.body)

    return TransportRequest(
        url=url,
        method=endpoint.method,
        headers=merge_headers(endpoint.headers, headers or {}),
        body=body,
    )


def merge_headers(
    endpoint_headers: Mapping[str, str],
    global_headers: Mapping[str, str],
) -> dict[str, str]:
    """Endpoint headers win on conflict; names compare case-insensitively."""
    merged = dict(endpoint_headers)
    present = {name.lower() for name in merged}
    for name, value in global_headers.items():
        if name.lower() in present:
            continue
        merged[name] = value
        present.add(name.lower())
    return merged


def _split_base_url(base_url: str) -> SplitResult:
    try:
        components = urlsplit(base_url)
        # .port validates range and digits lazily
        components.port
    except ValueError as exc:
        raise InvalidBaseURLError(f"invalid base url {base_url!r}: {exc}") from exc

    if not components.scheme or not components.hostname:
        raise InvalidBaseURLError(f"base url {base_url!r} must be absolute")
    return components


def _resolve_url(components: SplitResult) -> str:
    path = components.path
    if path and not path.startswith("/"):
        raise InvalidEndpointError(f"path {path!r} cannot follow host {components.netloc!r}")

    url = urlunsplit(components._replace(path=quote(path, safe=_PATH_SAFE_CHARS)))
    try:
        httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidEndpointError(f"cannot resolve url {url!r}: {exc}") from exc
    return url
