"""Logfire setup and library instrumentation.

Application code logs through logfire directly:

    import logfire

    logfire.info("Post created", post_id=post_id, group=group)

    with logfire.span("post_service.create_post", group=group):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.engine import Engine

from nnntp.config import Settings

SERVICE_NAME = "nnntp"

# Polled by load balancers, not worth a trace each time
UNTRACED_URLS = ["/health"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Console output is always on. Cloud sending follows
    ObservabilitySettings.sends_to_logfire.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.sends_to_logfire

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every protocol request with its path, status and duration.

    Protocol routes read the raw request body, so credentials inside the
    envelope never become span attributes.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, excluded_urls=UNTRACED_URLS)


def instrument_sqlalchemy(engine: Engine) -> None:
    """Trace every statement run on an engine.

    Args:
        engine: SQLAlchemy engine
    """
    logfire.instrument_sqlalchemy(engine=engine)
