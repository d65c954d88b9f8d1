"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from shareport.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component gets its production implementation: the
    system clock and the PostgreSQL guest link store.

    Returns:
        Configured DI container
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app``.

    Routes declared with ``DishkaRoute`` resolve their ``FromDishka``
    parameters from a request scope opened per HTTP request; the container
    is closed when the application shuts down.

    Args:
        app: FastAPI application
        container: DI container (production or test)
    """
    setup_dishka(container, app)
