"""Unit tests for link use cases."""

import pytest

from customlinks.application.usecase.link import (
    ChangeOwnerRequest,
    ChangeOwnerUseCase,
    CreateLinkRequest,
    CreateLinkUseCase,
    DeleteLinkRequest,
    DeleteLinkUseCase,
    GetLinkInfoRequest,
    GetLinkInfoUseCase,
    ListLinksRequest,
    ListLinksUseCase,
    ResolveLinkRequest,
    ResolveLinkUseCase,
    UpdateTargetRequest,
    UpdateTargetUseCase,
)
from customlinks.domain.error import NotFoundError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ORIGIN = "http://localhost:8000"
ANCHOR = "<a href='/foo'>http://localhost:8000/foo</a>"
OWNER = "u1@example.com"
TARGET = "https://example.com/"


async def create_foo(unit_env, owner: str = OWNER):
    create_link = await unit_env.get(CreateLinkUseCase)
    return await create_link.execute(
        CreateLinkRequest(link="/foo", target=TARGET, owner=owner, origin=ORIGIN)
    )


class TestCreateLinkUseCase:
    """Tests for CreateLinkUseCase."""

    @pytest.mark.asyncio
    async def test_create_returns_message(self, unit_env):
        response = await create_foo(unit_env)

        assert response.key == "/foo"
        assert response.message == f"{ANCHOR} now redirects to {TARGET}"


class TestGetLinkInfoUseCase:
    """Tests for GetLinkInfoUseCase."""

    @pytest.mark.asyncio
    async def test_info_projection(self, unit_env):
        await create_foo(unit_env)
        get_info = await unit_env.get(GetLinkInfoUseCase)

        info = await get_info.execute(GetLinkInfoRequest(link="foo"))

        assert (info.location, info.owner, info.count) == (TARGET, OWNER, 0)

    @pytest.mark.asyncio
    async def test_info_missing(self, unit_env):
        get_info = await unit_env.get(GetLinkInfoUseCase)

        with pytest.raises(NotFoundError):
            await get_info.execute(GetLinkInfoRequest(link="foo"))


class TestResolveLinkUseCase:
    """Tests for ResolveLinkUseCase."""

    @pytest.mark.asyncio
    async def test_resolve_counts(self, unit_env):
        await create_foo(unit_env)
        resolve = await unit_env.get(ResolveLinkUseCase)

        first = await resolve.execute(ResolveLinkRequest(link="foo"))
        second = await resolve.execute(ResolveLinkRequest(link="///foo"))

        assert first.target == TARGET
        assert (first.clicks, second.clicks) == (1, 2)


class TestUpdateTargetUseCase:
    """Tests for UpdateTargetUseCase."""

    @pytest.mark.asyncio
    async def test_update_message(self, unit_env):
        await create_foo(unit_env)
        update_target = await unit_env.get(UpdateTargetUseCase)

        response = await update_target.execute(
            UpdateTargetRequest(
                link="foo", target="https://new.com/", user_id=OWNER, origin=ORIGIN
            )
        )

        assert response.changed
        assert response.message == f"{ANCHOR} now redirects to https://new.com/"

    @pytest.mark.asyncio
    async def test_noop_message(self, unit_env):
        await create_foo(unit_env)
        update_target = await unit_env.get(UpdateTargetUseCase)

        response = await update_target.execute(
            UpdateTargetRequest(link="foo", target=TARGET, user_id=OWNER, origin=ORIGIN)
        )

        assert not response.changed
        assert response.message == (
            f"{ANCHOR} already redirects to {TARGET}; the target remains the same"
        )


class TestChangeOwnerUseCase:
    """Tests for ChangeOwnerUseCase."""

    @pytest.mark.asyncio
    async def test_change_owner_message(self, unit_env):
        await create_foo(unit_env)
        change_owner = await unit_env.get(ChangeOwnerUseCase)

        response = await change_owner.execute(
            ChangeOwnerRequest(
                link="foo", owner="u2@example.com", user_id=OWNER, origin=ORIGIN
            )
        )

        assert response.message == f"{ANCHOR} is now owned by u2@example.com"

    @pytest.mark.asyncio
    async def test_same_owner_message(self, unit_env):
        await create_foo(unit_env)
        change_owner = await unit_env.get(ChangeOwnerUseCase)

        response = await change_owner.execute(
            ChangeOwnerRequest(link="foo", owner=OWNER, user_id=OWNER, origin=ORIGIN)
        )

        assert not response.changed
        assert response.message.endswith("the owner remains the same")


class TestDeleteLinkUseCase:
    """Tests for DeleteLinkUseCase."""

    @pytest.mark.asyncio
    async def test_delete_message(self, unit_env):
        await create_foo(unit_env)
        delete_link = await unit_env.get(DeleteLinkUseCase)

        response = await delete_link.execute(
            DeleteLinkRequest(link="foo", user_id=OWNER, origin=ORIGIN)
        )

        assert response.message == "http://localhost:8000/foo has been deleted"


class TestListLinksUseCase:
    """Tests for ListLinksUseCase."""

    @pytest.mark.asyncio
    async def test_lists_owner_links(self, unit_env):
        await create_foo(unit_env)
        list_links = await unit_env.get(ListLinksUseCase)

        response = await list_links.execute(ListLinksRequest(owner=OWNER, origin=ORIGIN))

        assert [(s.key, s.url, s.location, s.count) for s in response.links] == [
            ("/foo", "http://localhost:8000/foo", TARGET, 0)
        ]
