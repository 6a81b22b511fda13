"""Delete link use case."""

from pydantic import BaseModel

from customlinks.application import message
from customlinks.domain.service import LinkService
from customlinks.domain.value import LinkKey


class DeleteLinkRequest(BaseModel):
    """Delete link request."""

    link: str
    user_id: str
    origin: str


class DeleteLinkResponse(BaseModel):
    """Delete link response."""

    key: str
    message: str


class DeleteLinkUseCase:
    """Use case for deleting an owned link."""

    def __init__(self, link_service: LinkService) -> None:
        self.link_service = link_service

    async def execute(self, request: DeleteLinkRequest) -> DeleteLinkResponse:
        """Execute delete flow.

        Raises:
            NotFoundError: If the link doesn't exist
            ForbiddenError: If the caller doesn't own the link
        """
        key = LinkKey.normalize(request.link)
        await self.link_service.delete(key, request.user_id)
        return DeleteLinkResponse(
            key=key.relative, message=message.deleted(key, request.origin)
        )
