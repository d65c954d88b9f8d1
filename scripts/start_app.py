#!/usr/bin/env python3
"""Serve the guest link API with uvicorn.

The application is built by ``create_app`` through uvicorn's factory mode,
after logging and Logfire are configured, so startup failures (bad settings,
unreachable database) are recorded too.
"""

import sys

import logfire
import uvicorn

from shareport.config import Settings
from shareport.util.logging import setup_logging
from shareport.util.observability import configure_logfire

APP_FACTORY = "shareport.interface.api.app:create_app"


def main() -> int:
    """Run the API server until it is stopped."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting guest link API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )

    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=settings.environment == "development",
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
