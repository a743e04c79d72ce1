#!/usr/bin/env python3
"""Start the NNNTP server with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from nnntp.config import Settings
from nnntp.util.logging import setup_logging
from nnntp.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Starting NNNTP server", host=settings.host, port=settings.port)

        uvicorn.run(
            "nnntp.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the process exits with the failure
        raise


if __name__ == "__main__":
    sys.exit(main())
