"""Demo: fetch one random user through the provider and log the username.

Run with ``python -m networking.main``; NETWORKING_BASE_URL defaults to the
random-data API when not set.
"""
import asyncio
import os
from dataclasses import dataclass

from loguru import logger
from pydantic import BaseModel

from networking.composition import create_networking_dependencies
from networking.config.settings import Settings
from networking.constants import SERVICE_NAME
from networking.domain.models import Endpoint

DEMO_BASE_URL = "https://random-data-api.com/api/v2"


class User(BaseModel):
    username: str


@dataclass(frozen=True)
class UsersEndpoint(Endpoint):
    path: str = "/users"


async def run_demo() -> User:
    os.environ.setdefault("NETWORKING_BASE_URL", DEMO_BASE_URL)
    dependencies = create_networking_dependencies(Settings())
    dependencies.connect()
    try:
        user = await dependencies.provider.send_request(UsersEndpoint(), User)
    finally:
        await dependencies.close()
    logger.bind(service_name=SERVICE_NAME, event="demo_user_received", username=user.username).info("")
    return user


def main() -> None:
    try:
        asyncio.run(run_demo())
    except KeyboardInterrupt:
        logger.bind(service_name=SERVICE_NAME, event="demo_interrupted").info("")
    except Exception as e:
        logger.exception("demo failed: {}", e)
        raise


if __name__ == "__main__":
    main()
