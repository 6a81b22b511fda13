"""Create link use case."""

from pydantic import BaseModel

from customlinks.application import message
from customlinks.domain.service import LinkService
from customlinks.domain.value import LinkKey


class CreateLinkRequest(BaseModel):
    """Create link request."""

    link: str  # Raw custom link, normalized here
    target: str
    owner: str  # Verified user ID
    origin: str


class CreateLinkResponse(BaseModel):
    """Create link response."""

    key: str
    target: str
    owner: str
    message: str


class CreateLinkUseCase:
    """Use case for creating a link."""

    def __init__(self, link_service: LinkService) -> None:
        """Initialize create link use case.

        Args:
            link_service: Link domain service
        """
        self.link_service = link_service

    async def execute(self, request: CreateLinkRequest) -> CreateLinkResponse:
        """Execute create link flow.

        Args:
            request: Create link request

        Returns:
            The new link and a confirmation message

        Raises:
            InvalidLinkError: If the custom link is empty or reserved
            InvalidTargetError: If the target is empty or not http(s)
            AlreadyExistsError: If the link is taken
        """
        key = LinkKey.normalize(request.link)
        link = await self.link_service.create(key, request.target, request.owner)

        return CreateLinkResponse(
            key=link.key.relative,
            target=str(link.target),
            owner=link.owner,
            message=message.created(link.key, str(link.target), request.origin),
        )
