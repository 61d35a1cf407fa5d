"""Unit tests for settings-driven composition."""
from __future__ import annotations

import pytest

from networking.application.endpoint_provider import EndpointProvider
from networking.composition import create_networking_dependencies
from networking.config.settings import Settings
from networking.infrastructure.http.factory import create_transport
from networking.infrastructure.http.httpx_transport import HttpxTransport


@pytest.fixture()
def env(monkeypatch):
    monkeypatch.setenv("NETWORKING_BASE_URL", "https://api.example.com/v1")
    monkeypatch.setenv("NETWORKING_USER_AGENT", "networking-tests/1.0")
    monkeypatch.setenv("NETWORKING_READ_TIMEOUT_SECONDS", "3.5")
    return monkeypatch


def test_settings_read_from_environment(env):
    settings = Settings()

    assert settings.base_url == "https://api.example.com/v1"
    assert settings.read_timeout_seconds == 3.5
    assert settings.connect_timeout_seconds == 5.0
    assert settings.raise_for_status is False
    assert settings.transport_backend == "httpx"


@pytest.mark.asyncio
async def test_connect_wires_provider_and_close_releases_transport(env):
    dependencies = create_networking_dependencies(Settings())
    dependencies.connect()

    provider = dependencies.provider
    assert isinstance(provider, EndpointProvider)
    assert provider.base_url == "https://api.example.com/v1"
    assert provider._headers == {"User-Agent": "networking-tests/1.0"}
    assert isinstance(provider._transport, HttpxTransport)

    await dependencies.close()
    with pytest.raises(RuntimeError):
        _ = dependencies.provider


def test_provider_access_before_connect_raises(env):
    dependencies = create_networking_dependencies(Settings())

    with pytest.raises(RuntimeError, match="not initialized"):
        _ = dependencies.provider


def test_unsupported_backend_rejected(env):
    env.setenv("NETWORKING_TRANSPORT_BACKEND", "carrier-pigeon")

    with pytest.raises(ValueError, match="Unsupported transport backend"):
        create_transport(Settings())
