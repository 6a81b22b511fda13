"""Unit tests for LinkService."""

import asyncio

import pytest

from customlinks.domain.error import (
    AlreadyExistsError,
    EmptyTargetError,
    ForbiddenError,
    InvalidLinkError,
    NotFoundError,
    ReservedLinkError,
    TargetProtocolError,
)
from customlinks.domain.repository import LinkRepository
from customlinks.domain.service import LinkService
from tests.conftest import key
from tests.di.persistence import SuspendingLinkRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

TARGET = "https://example.com/"
OWNER = "u1@example.com"


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_stores_link_with_zero_clicks(self, unit_env):
        """Creating a link stores target, owner and zero clicks."""
        link_service = await unit_env.get(LinkService)

        link = await link_service.create(key("foo"), TARGET, OWNER)

        assert link.key.relative == "/foo"
        assert str(link.target) == TARGET
        assert link.owner == OWNER
        assert link.clicks == 0

    @pytest.mark.asyncio
    async def test_create_lowercases_owner(self, unit_env):
        link_service = await unit_env.get(LinkService)

        link = await link_service.create(key("foo"), TARGET, "U1@Example.COM")

        assert link.owner == OWNER

    @pytest.mark.asyncio
    async def test_second_create_fails_and_keeps_first(self, unit_env):
        """A second create on the same key is rejected and changes nothing."""
        link_service = await unit_env.get(LinkService)
        await link_service.create(key("foo"), TARGET, OWNER)

        with pytest.raises(AlreadyExistsError):
            await link_service.create(key("/foo"), "https://other.com/", "u2@x.com")

        link = await link_service.get_link(key("foo"))
        assert str(link.target) == TARGET
        assert link.owner == OWNER

    @pytest.mark.asyncio
    async def test_concurrent_creates_have_one_winner(self, unit_env):
        link_service = await unit_env.get(LinkService)

        results = await asyncio.gather(
            *(
                link_service.create(key("race"), f"https://e{i}.com/", f"u{i}@x.com")
                for i in range(5)
            ),
            return_exceptions=True,
        )

        winners = [r for r in results if not isinstance(r, Exception)]
        losers = [r for r in results if isinstance(r, AlreadyExistsError)]
        assert len(winners) == 1
        assert len(losers) == 4

    @pytest.mark.asyncio
    async def test_create_root_key_is_rejected(self, unit_env):
        link_service = await unit_env.get(LinkService)

        with pytest.raises(InvalidLinkError, match="Custom link field must not be empty."):
            await link_service.create(key(""), TARGET, OWNER)

    @pytest.mark.parametrize("raw", ["id", "logout", "health", "api/links", "auth/test"])
    @pytest.mark.asyncio
    async def test_create_reserved_key_is_rejected(self, unit_env, raw):
        link_service = await unit_env.get(LinkService)

        with pytest.raises(ReservedLinkError, match="is reserved"):
            await link_service.create(key(raw), TARGET, OWNER)

    @pytest.mark.asyncio
    async def test_invalid_target_is_rejected_before_store(self, unit_env):
        link_service = await unit_env.get(LinkService)
        link_repository = await unit_env.get(LinkRepository)

        with pytest.raises(EmptyTargetError):
            await link_service.create(key("foo"), "  ", OWNER)
        with pytest.raises(TargetProtocolError):
            await link_service.create(key("foo"), "gopher://bad", OWNER)

        assert await link_repository.find_by_key(key("foo")) is None


class TestResolve:
    """Tests for resolve method."""

    @pytest.mark.asyncio
    async def test_resolve_counts_click(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await link_service.create(key("foo"), TARGET, OWNER)

        link = await link_service.resolve(key("foo"))

        assert link.clicks == 1
        assert (await link_service.get_link(key("foo"))).clicks == 1

    @pytest.mark.asyncio
    async def test_concurrent_resolves_net_exactly_n(self, unit_env):
        """N concurrent resolves add exactly N clicks."""
        link_service = await unit_env.get(LinkService)
        await link_service.create(key("foo"), TARGET, OWNER)

        await asyncio.gather(*(link_service.resolve(key("foo")) for _ in range(50)))

        assert (await link_service.get_link(key("foo"))).clicks == 50

    @pytest.mark.asyncio
    async def test_resolve_missing_link(self, unit_env):
        link_service = await unit_env.get(LinkService)

        with pytest.raises(NotFoundError, match="/nope does not exist"):
            await link_service.resolve(key("nope"))

    @pytest.mark.asyncio
    async def test_get_link_does_not_count(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await link_service.create(key("foo"), TARGET, OWNER)

        await link_service.get_link(key("foo"))

        assert (await link_service.get_link(key("foo"))).clicks == 0


class TestUpdateTarget:
    """Tests for update_target method."""

    @pytest.mark.asyncio
    async def test_update_target(self, unit_env):
        link_service = await unit_env.get(LinkService)
        created = await link_service.create(key("foo"), TARGET, OWNER)

        change = await link_service.update_target(
            key("foo"), "https://new.example.com/", OWNER
        )

        assert change.changed
        assert str(change.link.target) == "https://new.example.com/"
        assert change.link.updated_at >= created.updated_at
        assert change.link.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_update_keeps_clicks(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await link_service.create(key("foo"), TARGET, OWNER)
        await link_service.resolve(key("foo"))

        change = await link_service.update_target(
            key("foo"), "https://new.example.com/", OWNER
        )

        assert change.link.clicks == 1

    @pytest.mark.asyncio
    async def test_same_target_is_noop(self, unit_env):
        """Updating to the current target writes nothing."""
        link_service = await unit_env.get(LinkService)
        created = await link_service.create(key("foo"), TARGET, OWNER)

        change = await link_service.update_target(key("foo"), TARGET, OWNER)

        assert not change.changed
        stored = await link_service.get_link(key("foo"))
        assert stored.updated_at == created.updated_at

    @pytest.mark.asyncio
    async def test_invalid_target(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await link_service.create(key("foo"), TARGET, OWNER)

        with pytest.raises(TargetProtocolError):
            await link_service.update_target(key("foo"), "gopher://bad", OWNER)

    @pytest.mark.asyncio
    async def test_missing_link(self, unit_env):
        link_service = await unit_env.get(LinkService)

        with pytest.raises(NotFoundError):
            await link_service.update_target(key("foo"), TARGET, OWNER)

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await link_service.create(key("foo"), TARGET, OWNER)

        with pytest.raises(ForbiddenError) as exc_info:
            await link_service.update_target(
                key("foo"), "https://new.example.com/", "u2@example.com"
            )

        assert exc_info.value.owner == OWNER


class TestChangeOwner:
    """Tests for change_owner method."""

    @pytest.mark.asyncio
    async def test_change_owner_then_old_owner_is_forbidden(self, unit_env):
        """After a transfer, the previous owner can no longer update."""
        link_service = await unit_env.get(LinkService)
        await link_service.create(key("foo"), TARGET, OWNER)

        change = await link_service.change_owner(key("foo"), "U2@example.com", OWNER)

        assert change.changed
        assert change.link.owner == "u2@example.com"
        with pytest.raises(ForbiddenError):
            await link_service.update_target(
                key("foo"), "https://new.example.com/", OWNER
            )

    @pytest.mark.asyncio
    async def test_same_owner_is_noop(self, unit_env):
        link_service = await unit_env.get(LinkService)
        created = await link_service.create(key("foo"), TARGET, OWNER)

        change = await link_service.change_owner(key("foo"), OWNER.upper(), OWNER)

        assert not change.changed
        assert change.link.updated_at == created.updated_at


class TestDelete:
    """Tests for delete method."""

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await link_service.create(key("foo"), TARGET, OWNER)

        assert await link_service.delete(key("foo"), OWNER)

        with pytest.raises(NotFoundError):
            await link_service.get_link(key("foo"))

    @pytest.mark.asyncio
    async def test_delete_by_non_owner(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await link_service.create(key("foo"), TARGET, OWNER)

        with pytest.raises(ForbiddenError):
            await link_service.delete(key("foo"), "u2@example.com")

        assert await link_service.get_link(key("foo"))

    @pytest.mark.asyncio
    async def test_delete_missing(self, unit_env):
        link_service = await unit_env.get(LinkService)

        with pytest.raises(NotFoundError):
            await link_service.delete(key("foo"), OWNER)


class TestConcurrentWrites:
    """Writes racing on one key never lose a reported change."""

    @pytest.mark.asyncio
    async def test_target_update_and_transfer_both_take_effect(self):
        link_service = LinkService(SuspendingLinkRepository())
        await link_service.create(key("foo"), "https://a.com/", OWNER)

        target_result, owner_result = await asyncio.gather(
            link_service.update_target(key("foo"), "https://b.com/", OWNER),
            link_service.change_owner(key("foo"), "u2@example.com", OWNER),
            return_exceptions=True,
        )

        link = await link_service.get_link(key("foo"))
        assert owner_result.changed
        assert link.owner == "u2@example.com"
        if isinstance(target_result, Exception):
            assert isinstance(target_result, ForbiddenError)
            assert str(link.target) == "https://a.com/"
        else:
            assert target_result.changed
            assert str(link.target) == "https://b.com/"

    @pytest.mark.asyncio
    async def test_transfer_first_makes_target_update_forbidden(self):
        link_service = LinkService(SuspendingLinkRepository())
        await link_service.create(key("foo"), "https://a.com/", OWNER)

        owner_result, target_result = await asyncio.gather(
            link_service.change_owner(key("foo"), "u2@example.com", OWNER),
            link_service.update_target(key("foo"), "https://b.com/", OWNER),
            return_exceptions=True,
        )

        link = await link_service.get_link(key("foo"))
        assert owner_result.changed
        assert isinstance(target_result, ForbiddenError)
        assert link.owner == "u2@example.com"
        assert str(link.target) == "https://a.com/"

    @pytest.mark.asyncio
    async def test_update_racing_delete_does_not_resurrect_link(self):
        link_service = LinkService(SuspendingLinkRepository())
        await link_service.create(key("foo"), "https://a.com/", OWNER)

        deleted, update_result = await asyncio.gather(
            link_service.delete(key("foo"), OWNER),
            link_service.update_target(key("foo"), "https://b.com/", OWNER),
            return_exceptions=True,
        )

        assert deleted is True
        assert isinstance(update_result, NotFoundError)
        with pytest.raises(NotFoundError):
            await link_service.get_link(key("foo"))

    @pytest.mark.asyncio
    async def test_delete_racing_transfer_spares_new_owner(self):
        link_service = LinkService(SuspendingLinkRepository())
        await link_service.create(key("foo"), "https://a.com/", OWNER)

        owner_result, delete_result = await asyncio.gather(
            link_service.change_owner(key("foo"), "u2@example.com", OWNER),
            link_service.delete(key("foo"), OWNER),
            return_exceptions=True,
        )

        assert owner_result.changed
        assert isinstance(delete_result, ForbiddenError)
        link = await link_service.get_link(key("foo"))
        assert link.owner == "u2@example.com"


class TestListLinks:
    """Tests for list_links method."""

    @pytest.mark.asyncio
    async def test_lists_only_owned_links_in_key_order(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await link_service.create(key("zeta"), TARGET, OWNER)
        await link_service.create(key("alpha"), TARGET, OWNER)
        await link_service.create(key("other"), TARGET, "u2@example.com")

        links = await link_service.list_links(OWNER.upper())

        assert [link.key.relative for link in links] == ["/alpha", "/zeta"]


class TestScenario:
    """End-to-end walk through the directory operations."""

    @pytest.mark.asyncio
    async def test_create_info_resolve_update_transfer(self, unit_env):
        link_service = await unit_env.get(LinkService)

        await link_service.create(key("/foo"), TARGET, "u1")
        info = await link_service.get_link(key("/foo"))
        assert (str(info.target), info.owner, info.clicks) == (TARGET, "u1", 0)

        assert (await link_service.resolve(key("/foo"))).clicks == 1

        with pytest.raises(TargetProtocolError):
            await link_service.update_target(key("/foo"), "gopher://bad", "u1")

        change = await link_service.change_owner(key("/foo"), "u2", "u1")
        assert change.link.owner == "u2"

        with pytest.raises(ForbiddenError):
            await link_service.update_target(key("/foo"), "https://x.com/", "u1")
