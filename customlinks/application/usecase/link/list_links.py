"""List links use case."""

from pydantic import BaseModel

from customlinks.domain.service import LinkService


class ListLinksRequest(BaseModel):
    """List links request."""

    owner: str
    origin: str


class LinkSummary(BaseModel):
    """Single link in a listing."""

    key: str
    url: str
    location: str
    count: int


class ListLinksResponse(BaseModel):
    """List links response."""

    links: list[LinkSummary]


class ListLinksUseCase:
    """Use case for listing the links a user owns."""

    def __init__(self, link_service: LinkService) -> None:
        self.link_service = link_service

    async def execute(self, request: ListLinksRequest) -> ListLinksResponse:
        links = await self.link_service.list_links(request.owner)
        return ListLinksResponse(
            links=[
                LinkSummary(
                    key=link.key.relative,
                    url=link.key.full(request.origin),
                    location=str(link.target),
                    count=link.clicks,
                )
                for link in links
            ]
        )
