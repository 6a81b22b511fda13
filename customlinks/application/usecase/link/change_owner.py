"""Change link owner use case."""

from pydantic import BaseModel

from customlinks.application import message
from customlinks.domain.service import LinkService
from customlinks.domain.value import LinkKey


class ChangeOwnerRequest(BaseModel):
    """Change owner request."""

    link: str
    owner: str  # New owner
    user_id: str  # Verified caller
    origin: str


class ChangeOwnerResponse(BaseModel):
    """Change owner response."""

    key: str
    owner: str
    changed: bool
    message: str


class ChangeOwnerUseCase:
    """Use case for transferring an owned link."""

    def __init__(self, link_service: LinkService) -> None:
        self.link_service = link_service

    async def execute(self, request: ChangeOwnerRequest) -> ChangeOwnerResponse:
        """Execute change owner flow.

        Raises:
            NotFoundError: If the link doesn't exist
            ForbiddenError: If the caller doesn't own the link
        """
        key = LinkKey.normalize(request.link)
        change = await self.link_service.change_owner(
            key, request.owner, request.user_id
        )

        owner = change.link.owner
        if change.changed:
            text = message.owner_changed(key, owner, request.origin)
        else:
            text = message.owner_unchanged(key, owner, request.origin)

        return ChangeOwnerResponse(
            key=key.relative, owner=owner, changed=change.changed, message=text
        )
