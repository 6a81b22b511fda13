"""Get link info use case."""

from datetime import datetime

from pydantic import BaseModel

from customlinks.domain.service import LinkService
from customlinks.domain.value import LinkKey


class GetLinkInfoRequest(BaseModel):
    """Get link info request."""

    link: str


class GetLinkInfoResponse(BaseModel):
    """Link info projection."""

    location: str
    owner: str
    count: int
    created: datetime
    updated: datetime


class GetLinkInfoUseCase:
    """Use case for reading a link without counting a click."""

    def __init__(self, link_service: LinkService) -> None:
        self.link_service = link_service

    async def execute(self, request: GetLinkInfoRequest) -> GetLinkInfoResponse:
        """Look up a link.

        Raises:
            NotFoundError: If the link doesn't exist
        """
        link = await self.link_service.get_link(LinkKey.normalize(request.link))
        return GetLinkInfoResponse(
            location=str(link.target),
            owner=link.owner,
            count=link.clicks,
            created=link.created_at,
            updated=link.updated_at,
        )
