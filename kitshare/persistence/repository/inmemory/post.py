"""In-memory post repository for testing."""

from typing import Optional

from kitshare.domain.model.post import Post
from kitshare.domain.repository.post import PostRepository, PostSortOrder
from kitshare.domain.value import PostId, UserId


def _recent_key(post: Post):
    # Newest first, then id ascending
    return (-post.created_at.timestamp(), str(post.id))


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID. Locking is a no-op in memory."""
        return self._posts.get(post_id)

    async def find_all(self, sort: PostSortOrder = PostSortOrder.POPULAR) -> list[Post]:
        """Find all posts in the requested order."""
        posts = sorted(self._posts.values(), key=_recent_key)
        if sort == PostSortOrder.POPULAR:
            # sort is stable, so equal like counts keep the recent ordering
            posts.sort(key=lambda p: p.like_count, reverse=True)
        return posts

    async def find_by_creator(self, creator_id: UserId) -> list[Post]:
        """Find a user's posts, newest first."""
        return sorted(
            (p for p in self._posts.values() if p.creator_id == creator_id),
            key=_recent_key,
        )

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)
