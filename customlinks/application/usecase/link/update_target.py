"""Update link target use case."""

from pydantic import BaseModel

from customlinks.application import message
from customlinks.domain.service import LinkService
from customlinks.domain.value import LinkKey


class UpdateTargetRequest(BaseModel):
    """Update target request."""

    link: str
    target: str
    user_id: str  # Verified caller
    origin: str


class UpdateTargetResponse(BaseModel):
    """Update target response."""

    key: str
    target: str
    changed: bool
    message: str


class UpdateTargetUseCase:
    """Use case for pointing an owned link at a new target."""

    def __init__(self, link_service: LinkService) -> None:
        self.link_service = link_service

    async def execute(self, request: UpdateTargetRequest) -> UpdateTargetResponse:
        """Execute update target flow.

        Raises:
            InvalidTargetError: If the target is empty or not http(s)
            NotFoundError: If the link doesn't exist
            ForbiddenError: If the caller doesn't own the link
        """
        key = LinkKey.normalize(request.link)
        change = await self.link_service.update_target(
            key, request.target, request.user_id
        )

        target = str(change.link.target)
        if change.changed:
            text = message.target_updated(key, target, request.origin)
        else:
            text = message.target_unchanged(key, target, request.origin)

        return UpdateTargetResponse(
            key=key.relative, target=target, changed=change.changed, message=text
        )
