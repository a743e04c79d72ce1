"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from nnntp.interface.api.routes import health, protocol
from nnntp.util.di.container import create_container, setup_di
from nnntp.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to use instead of the production one

    Returns:
        Application with the protocol routes registered
    """
    app_instance = FastAPI(
        title="NNNTP",
        description="Usenet-style bulletin board over JSON envelopes",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(protocol.router)

    return app_instance


# Create app instance for uvicorn
app = create_app()
