"""Unit tests for UpdatePostUseCase."""

from uuid import uuid4

import pytest

from kitshare.application.usecase.post import UpdatePostRequest, UpdatePostUseCase
from kitshare.domain.error import NotAuthorizedError, NotFoundError
from kitshare.domain.model import AddOns
from kitshare.domain.repository import PostRepository
from kitshare.domain.service import UserService
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_owner_updates_album_and_one_add_on(self, unit_env):
        """Owner edits are reflected in the returned view."""
        # Arrange
        user_service = await unit_env.get(UserService)
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(UpdatePostUseCase)

        owner = await user_service.register("danny", "carey")
        post = make_post(
            owner.id,
            album="Lateralus",
            add_ons=AddOns(hi_hats="Paiste 2002", effects="Mandala pads"),
        )
        await post_repo.save(post)

        # Act
        response = await use_case.execute(
            UpdatePostRequest(
                post_id=str(post.id),
                user_id=str(owner.id),
                album="Fear Inoculum",
                add_ons={"effects": "Simmons SDS-V"},
            )
        )

        # Assert
        view = response.post
        assert view.album == "Fear Inoculum"
        assert view.add_ons.hi_hats == "Paiste 2002"
        assert view.add_ons.effects == "Simmons SDS-V"
        assert view.creator_username == "danny"

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(UpdatePostUseCase)
        post = make_post(uuid4())
        await post_repo.save(post)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(post.id), user_id=str(uuid4()), album="Mine now"
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_post_id_is_not_found(self, unit_env):
        use_case = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdatePostRequest(post_id="123", user_id=str(uuid4()), album="x")
            )
