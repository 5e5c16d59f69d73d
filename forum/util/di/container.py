"""Dependency injection container."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are loaded from environment variables by the config provider.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    Calling this again replaces the attached container, which is how tests
    swap in in-memory persistence.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)


@asynccontextmanager
async def container_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the attached container on shutdown.

    Closing runs provider finalizers, which disposes the database engine's
    connection pool.
    """
    yield
    logfire.info("Closing DI container")
    await app.state.dishka_container.close()
