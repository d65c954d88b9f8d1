"""Observability configuration using Logfire.

Logfire carries both traces and structured logs. Domain services open a span
per operation and log events with guest link IDs as attributes; request
bodies are never logged.

Usage:
    import logfire

    logfire.info("Guest link created", guest_link_id=str(link.id))

    with logfire.span("guest_link_service.create_guest_link"):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from shareport.config import Settings

SERVICE_NAME = "shareport"
SERVICE_VERSION = "0.1.0"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Console output is always on. Telemetry goes to Logfire cloud when
    OBSERVABILITY__SEND_TO_LOGFIRE says so, or otherwise whenever
    OBSERVABILITY__LOGFIRE_TOKEN is set.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    config_kwargs = {
        "service_name": SERVICE_NAME,
        "service_version": SERVICE_VERSION,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if observability.logfire_token:
        config_kwargs["token"] = observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def _map_request_attributes(request, attributes):
    """Tag request spans with the guest link they address, if any."""
    result = {**attributes}
    guest_link_id = getattr(request, "path_params", {}).get("guest_link_id")
    if guest_link_id is not None:
        result["guest_link_id"] = guest_link_id
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``.

    Headers are not captured; admin credentials may travel in them.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL query run through ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
