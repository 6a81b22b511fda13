"""Link directory domain service."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import NoReturn

import logfire

from customlinks.domain.error import (
    ForbiddenError,
    InvalidLinkError,
    NotFoundError,
    ReservedLinkError,
)
from customlinks.domain.model.link import Link
from customlinks.domain.repository import LinkRepository
from customlinks.domain.value import LinkKey, Target
from customlinks.domain.value.identifiers import normalize_user_id

from .base import Service


@dataclass
class LinkChange:
    """Result of an owner-only mutation.

    ``changed`` is False when the requested value equalled the current one,
    in which case nothing was written.
    """

    link: Link
    changed: bool


class LinkService(Service):
    """Domain service for link directory operations.

    Every mutating operation takes the caller's verified user ID. The
    service trusts it: verification happens before a request gets here.
    """

    def __init__(self, link_repository: LinkRepository) -> None:
        """Initialize link service.

        Args:
            link_repository: Link repository
        """
        self.link_repository = link_repository

    async def create(self, key: LinkKey, target: str, owner: str) -> Link:
        """Create a new link.

        Args:
            key: Canonical link key
            target: Raw redirect target
            owner: Verified user ID of the creator

        Returns:
            The new link, with zero clicks

        Raises:
            InvalidLinkError: If key is the root key
            ReservedLinkError: If key is a path the service answers itself
            InvalidTargetError: If target is empty or not http(s)
            AlreadyExistsError: If the key is already taken
        """
        with logfire.span("link_service.create", key=key.relative, owner=owner):
            if key.is_root:
                raise InvalidLinkError(key)
            if key.is_reserved:
                raise ReservedLinkError(key)
            valid_target = Target.parse(target)

            link = Link(key=key, target=valid_target, owner=owner)
            saved = await self.link_repository.save(link, insert_only=True)
            logfire.info(
                "Link created",
                key=key.relative,
                target=str(saved.target),
                owner=saved.owner,
            )
            return saved

    async def get_link(self, key: LinkKey) -> Link:
        """Get a link without recording an access.

        Args:
            key: Canonical link key

        Returns:
            The link

        Raises:
            NotFoundError: If link doesn't exist
        """
        with logfire.span("link_service.get_link", key=key.relative):
            link = await self.link_repository.find_by_key(key)
            if link is None:
                logfire.warn("Link not found", key=key.relative)
                raise NotFoundError(key)
            return link

    async def resolve(self, key: LinkKey) -> Link:
        """Get a link and count the access.

        Args:
            key: Canonical link key

        Returns:
            The link with its click count already incremented

        Raises:
            NotFoundError: If link doesn't exist (nothing is counted)
        """
        with logfire.span("link_service.resolve", key=key.relative):
            link = await self.link_repository.increment_clicks(key)
            if link is None:
                logfire.info("Unknown link requested", key=key.relative)
                raise NotFoundError(key)
            logfire.info("Link resolved", key=key.relative, clicks=link.clicks)
            return link

    async def list_links(self, owner: str) -> list[Link]:
        """List the links a user owns, ordered by key."""
        with logfire.span("link_service.list_links", owner=owner):
            links = await self.link_repository.find_by_owner(normalize_user_id(owner))
            logfire.info("Links listed", owner=owner, count=len(links))
            return links

    async def update_target(self, key: LinkKey, target: str, user_id: str) -> LinkChange:
        """Point a link at a new target.

        Args:
            key: Canonical link key
            target: Raw redirect target
            user_id: Verified user ID of the caller

        Returns:
            The resulting link and whether anything changed

        Raises:
            InvalidTargetError: If target is empty or not http(s)
            NotFoundError: If link doesn't exist
            ForbiddenError: If the caller doesn't own the link
        """
        with logfire.span(
            "link_service.update_target", key=key.relative, user_id=user_id
        ):
            new_target = Target.parse(target)
            link = await self._get_owned_link(key, user_id)

            if link.target == new_target:
                logfire.info("Link target unchanged", key=key.relative)
                return LinkChange(link=link, changed=False)

            saved = await self.link_repository.update_target(
                key,
                new_target,
                expected_owner=link.owner,
                updated_at=datetime.now(timezone.utc),
            )
            if saved is None:
                await self._raise_write_missed(key, user_id)
            logfire.info(
                "Link target updated",
                key=key.relative,
                old_target=str(link.target),
                new_target=str(saved.target),
            )
            return LinkChange(link=saved, changed=True)

    async def change_owner(
        self, key: LinkKey, new_owner: str, user_id: str
    ) -> LinkChange:
        """Transfer a link to another user.

        Args:
            key: Canonical link key
            new_owner: User ID of the new owner
            user_id: Verified user ID of the caller

        Returns:
            The resulting link and whether anything changed

        Raises:
            NotFoundError: If link doesn't exist
            ForbiddenError: If the caller doesn't own the link
        """
        with logfire.span(
            "link_service.change_owner",
            key=key.relative,
            user_id=user_id,
            new_owner=new_owner,
        ):
            link = await self._get_owned_link(key, user_id)
            owner = normalize_user_id(new_owner)

            if link.owner == owner:
                logfire.info("Link owner unchanged", key=key.relative)
                return LinkChange(link=link, changed=False)

            saved = await self.link_repository.update_owner(
                key,
                owner,
                expected_owner=link.owner,
                updated_at=datetime.now(timezone.utc),
            )
            if saved is None:
                await self._raise_write_missed(key, user_id)
            logfire.info(
                "Link owner changed",
                key=key.relative,
                old_owner=link.owner,
                new_owner=saved.owner,
            )
            return LinkChange(link=saved, changed=True)

    async def delete(self, key: LinkKey, user_id: str) -> bool:
        """Delete a link.

        Args:
            key: Canonical link key
            user_id: Verified user ID of the caller

        Returns:
            True once the link is gone

        Raises:
            NotFoundError: If link doesn't exist
            ForbiddenError: If the caller doesn't own the link
        """
        with logfire.span("link_service.delete", key=key.relative, user_id=user_id):
            link = await self._get_owned_link(key, user_id)

            if not await self.link_repository.delete(key, owner=link.owner):
                await self._raise_write_missed(key, user_id)
            logfire.info("Link deleted", key=key.relative, user_id=user_id)
            return True

    async def _get_owned_link(self, key: LinkKey, user_id: str) -> Link:
        """Load a link and check the caller owns it."""
        link = await self.get_link(key)
        if not link.is_owned_by(user_id):
            logfire.warn(
                "Link modification forbidden",
                key=key.relative,
                owner=link.owner,
                user_id=user_id,
            )
            raise ForbiddenError(key, owner=link.owner, user_id=user_id)
        return link

    async def _raise_write_missed(self, key: LinkKey, user_id: str) -> NoReturn:
        """Explain an owner-guarded write that matched no row.

        The link was deleted or transferred after it was read. Re-reading
        raises NotFound or Forbidden for the current state.
        """
        logfire.warn("Link changed during write", key=key.relative, user_id=user_id)
        await self._get_owned_link(key, user_id)
        # Owner flipped away and back between the two reads
        raise NotFoundError(key)
