"""Settings for the networking layer."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    base_url: str = Field(..., validation_alias="NETWORKING_BASE_URL")
    user_agent: str = Field("", validation_alias="NETWORKING_USER_AGENT")

    transport_backend: str = Field("httpx", validation_alias="NETWORKING_TRANSPORT_BACKEND")
    connect_timeout_seconds: float = Field(5.0, validation_alias="NETWORKING_CONNECT_TIMEOUT_SECONDS")
    read_timeout_seconds: float = Field(15.0, validation_alias="NETWORKING_READ_TIMEOUT_SECONDS")
    follow_redirects: bool = Field(True, validation_alias="NETWORKING_FOLLOW_REDIRECTS")
    # Off by default: non-2xx bodies are handed to the decoder like any other.
    raise_for_status: bool = Field(False, validation_alias="NETWORKING_RAISE_FOR_STATUS")

    log_events: bool = Field(True, validation_alias="NETWORKING_LOG_EVENTS")
    decode_strict: bool = Field(False, validation_alias="NETWORKING_DECODE_STRICT")
