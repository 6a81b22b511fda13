"""Redirect routes.

Registered last: ``/{link}`` matches any path the other routers don't.
"""

import logging
from urllib.parse import quote

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from customlinks.application.usecase.link import ResolveLinkRequest, ResolveLinkUseCase
from customlinks.config import Settings
from customlinks.domain.error import NotFoundError
from customlinks.domain.value import LinkKey

logger = logging.getLogger(__name__)

router = APIRouter(tags=["redirects"], route_class=DishkaRoute)


class LandingResponse(BaseModel):
    """Landing page response."""

    service: str
    origin: str
    url: str | None = None  # Missing link the visitor was sent back from


@router.get("/", response_model=LandingResponse)
async def landing(settings: FromDishka[Settings], url: str | None = None) -> LandingResponse:
    """Landing endpoint; ``url`` names a link that didn't exist."""
    return LandingResponse(service="custom-links", origin=settings.api.base_url, url=url)


@router.get("/{link:path}")
async def follow_link(
    link: str, resolve_link_use_case: FromDishka[ResolveLinkUseCase]
) -> RedirectResponse:
    """Redirect to a link's target, counting the click.

    A missing link redirects to the landing page with ``?url=/<link>`` so
    the visitor can create it.

    Raises:
        HTTPException: 500 on backend failure
    """
    try:
        result = await resolve_link_use_case.execute(ResolveLinkRequest(link=link))
    except NotFoundError:
        return RedirectResponse(
            url=f"/?url={quote(LinkKey.normalize(link).relative)}",
            status_code=status.HTTP_302_FOUND,
        )
    except Exception as e:
        logger.exception(f"Failed to resolve {link}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        )

    return RedirectResponse(url=result.target, status_code=status.HTTP_302_FOUND)
