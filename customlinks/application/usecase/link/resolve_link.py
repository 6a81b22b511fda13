"""Resolve link use case."""

from pydantic import BaseModel

from customlinks.domain.service import LinkService
from customlinks.domain.value import LinkKey


class ResolveLinkRequest(BaseModel):
    """Resolve link request."""

    link: str


class ResolveLinkResponse(BaseModel):
    """Resolve link response."""

    key: str
    target: str
    clicks: int


class ResolveLinkUseCase:
    """Use case for following a link, counting the click."""

    def __init__(self, link_service: LinkService) -> None:
        self.link_service = link_service

    async def execute(self, request: ResolveLinkRequest) -> ResolveLinkResponse:
        """Resolve a link and record the access.

        Raises:
            NotFoundError: If the link doesn't exist
        """
        link = await self.link_service.resolve(LinkKey.normalize(request.link))
        return ResolveLinkResponse(
            key=link.key.relative, target=str(link.target), clicks=link.clicks
        )
