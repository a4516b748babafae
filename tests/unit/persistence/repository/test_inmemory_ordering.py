"""Unit tests for in-memory repository ordering."""

from datetime import timedelta
from uuid import UUID, uuid4

import pytest

from kitshare.domain.repository import PostSortOrder
from kitshare.domain.value import PostId, UserId
from kitshare.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
)
from tests.conftest import BASE_TIME, make_comment, make_post


class TestFindAll:
    """Tests for find_all ordering."""

    @pytest.mark.asyncio
    async def test_popular_ties_fall_back_to_newest_then_id(self):
        repo = InMemoryPostRepository()
        creator = UserId(uuid4())
        fan = UserId(uuid4())

        low_id = make_post(creator, id=PostId(UUID(int=1)), minutes_ago=5)
        high_id = make_post(creator, id=PostId(UUID(int=2)), minutes_ago=5)
        newest = make_post(creator, minutes_ago=0)
        liked = make_post(creator, minutes_ago=100, likes=(fan,))
        for post in (high_id, newest, low_id, liked):
            await repo.save(post)

        posts = await repo.find_all()

        assert [p.id for p in posts] == [liked.id, newest.id, low_id.id, high_id.id]

    @pytest.mark.asyncio
    async def test_recent_ignores_likes(self):
        repo = InMemoryPostRepository()
        creator = UserId(uuid4())
        older = make_post(creator, minutes_ago=10, likes=(UserId(uuid4()),))
        newer = make_post(creator, minutes_ago=1)
        await repo.save(older)
        await repo.save(newer)

        posts = await repo.find_all(sort=PostSortOrder.RECENT)

        assert [p.id for p in posts] == [newer.id, older.id]


class TestCommentOrdering:
    """Tests for comment listing order."""

    @pytest.mark.asyncio
    async def test_comments_are_newest_first(self):
        repo = InMemoryCommentRepository()
        post_id = PostId(uuid4())
        older = make_comment(post_id, UserId(uuid4()), created_at=BASE_TIME)
        newer = make_comment(
            post_id, UserId(uuid4()), created_at=BASE_TIME + timedelta(minutes=1)
        )
        await repo.save(older)
        await repo.save(newer)
        await repo.save(make_comment(PostId(uuid4()), UserId(uuid4())))

        comments = await repo.find_by_post(post_id)

        assert [c.id for c in comments] == [newer.id, older.id]
