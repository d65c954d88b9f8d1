"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shareport.config import Settings
from shareport.interface.api.routes import guest_links, health
from shareport.util.di.container import create_container, setup_di
from shareport.util.observability import SERVICE_VERSION, instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, scripts/start_app.py handles this.

    Args:
        container: DI container to use; defaults to the production container
    """
    settings = Settings()

    app_instance = FastAPI(
        title="shareport API",
        description="Guest links: time-boxed, quota-bound upload links for shareport",
        version=SERVICE_VERSION,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(guest_links.router)

    return app_instance
