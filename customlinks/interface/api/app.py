"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from customlinks.interface.api.routes import api, auth, health, links
from customlinks.util.di.container import create_container, setup_di
from customlinks.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; defaults to the production container

    Returns:
        Configured application
    """
    # Outbound identity provider calls
    instrument_httpx()

    app_instance = FastAPI(
        title="Custom Links",
        description="Redirect service for custom short links owned by verified users",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())

    # Catch-all redirect router must come last
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(api.router)
    app_instance.include_router(links.router)

    return app_instance
