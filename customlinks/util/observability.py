"""Logfire setup and instrumentation.

Domain services emit spans and events directly:

    with logfire.span("link_service.create", key=key.relative, owner=owner):
        ...
        logfire.info("Link created", key=key.relative)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from customlinks.config import Settings

SERVICE_NAME = "custom-links"

# Health probes would drown out redirect traffic
EXCLUDED_URLS = "/health"


def should_send(settings: Settings) -> bool:
    """Export to Logfire when forced on, or when a token is configured."""
    forced = settings.observability.send_to_logfire
    if forced is not None:
        return forced
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire; console-only unless exporting."""
    send_to_logfire = should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
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
        providers=settings.auth.providers,
    )


def _request_attributes(request, attributes):
    """Attach the requested path (the link key for redirects) to request spans."""
    result = {**attributes}
    url = getattr(request, "url", None)
    if url is not None:
        result["path"] = url.path
    client = getattr(request, "client", None)
    if client:
        result["client_host"] = client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=EXCLUDED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace link and user queries, tagged with span context comments."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace token and userinfo calls to identity providers."""
    logfire.instrument_httpx()
