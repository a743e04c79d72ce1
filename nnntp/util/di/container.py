"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from nnntp.util.di import instantiate_providers


def create_container() -> AsyncContainer:
    """Build the production container.

    Nothing is resolved here. Settings are read from the environment the
    first time something asks for them.
    """
    return make_async_container(*instantiate_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app so DishkaRoute handlers can use it."""
    setup_dishka(container, app)
