"""Client-side cache of posts and comments with optimistic voting.

Posts are held once, keyed by id. The feed (``all_posts``) and the current
user's posts (``my_posts``) are computed from that map on every read, so a
change to a post shows up in both views at once.

Votes are applied locally before the server answers. The server's post
replaces the local one on success; on failure the post is put back exactly
as it was. Creating, editing and deleting wait for the server.
"""

from collections.abc import Mapping

import logfire

from kitshare.application.usecase.post import VotePostResponse
from kitshare.application.usecase.view import CommentView, PostView
from kitshare.client.api import KitShareClient
from kitshare.domain.service import apply_vote, normalize_id
from kitshare.domain.value import VoteAction


class NotAuthenticatedError(Exception):
    """Raised when an action needs a logged-in user and there is none."""

    pass


def _popular_key(post: PostView):
    return (-len(post.likes), -post.created_at.timestamp(), post.id)


def _recent_key(post: PostView):
    return (-post.created_at.timestamp(), post.id)


class PostStore:
    """Normalized post and comment cache for one logged-in user."""

    def __init__(
        self, client: KitShareClient, current_user_id: str | None = None
    ) -> None:
        """Initialize the store.

        Args:
            client: API client used for all server calls
            current_user_id: ID of the logged-in user, if any
        """
        self.client = client
        self._posts: dict[str, PostView] = {}
        self._comments: dict[str, list[CommentView]] = {}
        self.current_user_id = current_user_id

    @property
    def current_user_id(self) -> str | None:
        return self._current_user_id

    @current_user_id.setter
    def current_user_id(self, value: str | None) -> None:
        # Server ids are canonical hyphenated UUID strings
        self._current_user_id = str(normalize_id(value)) if value else None

    # Views

    @property
    def posts(self) -> Mapping[str, PostView]:
        """Copy of every cached post, by id."""
        return dict(self._posts)

    @property
    def all_posts(self) -> list[PostView]:
        """Feed order: most liked first, then newest."""
        return sorted(self._posts.values(), key=_popular_key)

    @property
    def my_posts(self) -> list[PostView]:
        """The current user's posts, newest first."""
        if self._current_user_id is None:
            return []
        return sorted(
            (
                p
                for p in self._posts.values()
                if p.creator_id == self._current_user_id
            ),
            key=_recent_key,
        )

    def get(self, post_id: str) -> PostView | None:
        return self._posts.get(post_id)

    def comments_for(self, post_id: str) -> list[CommentView]:
        """Cached comments on a post, newest first."""
        return list(self._comments.get(post_id, []))

    # Loading

    async def load_all(self) -> list[PostView]:
        """Replace the cache with the server's feed."""
        posts = await self.client.list_posts()
        self._posts = {p.id: p for p in posts}
        return self.all_posts

    async def load_mine(self) -> list[PostView]:
        """Refresh the current user's posts without dropping other posts."""
        posts = await self.client.list_my_posts()
        self._posts.update({p.id: p for p in posts})
        return self.my_posts

    async def load_post(self, post_id: str) -> PostView:
        post = await self.client.get_post(post_id)
        self._posts[post.id] = post
        return post

    # Post mutations (not optimistic)

    async def create_post(
        self, drummer_name: str, album: str, **descriptors
    ) -> PostView:
        """Create a post and cache it once the server has accepted it."""
        post = await self.client.create_post(drummer_name, album, **descriptors)
        self._posts[post.id] = post
        return post

    async def update_post(self, post_id: str, **fields) -> PostView:
        """Update a post and cache the server's version of it."""
        post = await self.client.update_post(post_id, **fields)
        self._posts[post.id] = post
        return post

    async def delete_post(self, post_id: str) -> None:
        """Delete a post; it leaves the cache only after the server agrees."""
        await self.client.delete_post(post_id)
        self._posts.pop(post_id, None)
        self._comments.pop(post_id, None)

    # Votes (optimistic)

    async def toggle_like(self, post_id: str) -> VotePostResponse:
        return await self._toggle(post_id, VoteAction.LIKE)

    async def toggle_dislike(self, post_id: str) -> VotePostResponse:
        return await self._toggle(post_id, VoteAction.DISLIKE)

    async def _toggle(self, post_id: str, action: VoteAction) -> VotePostResponse:
        """Vote locally, then confirm with the server.

        Two toggles on the same post in flight at once are not coordinated;
        each starts from whatever the cache held when it was called.

        Raises:
            NotAuthenticatedError: If there is no current user
            KeyError: If the post is not cached
            ApiError: If the server rejects the vote; the cached post is
                restored first
        """
        if self._current_user_id is None:
            raise NotAuthenticatedError("Log in to vote on posts")

        snapshot = self._posts[post_id]
        result = apply_vote(
            snapshot.likes, snapshot.dislikes, self._current_user_id, action
        )
        self._posts[post_id] = snapshot.model_copy(
            update={"likes": list(result.likes), "dislikes": list(result.dislikes)}
        )

        try:
            response = await self.client.vote(post_id, action)
        except BaseException as e:
            self._posts[post_id] = snapshot
            logfire.warn(
                "Vote rolled back",
                post_id=post_id,
                action=action.value,
                error=str(e),
            )
            raise

        self._posts[post_id] = response.post
        return response

    # Comments (not optimistic)

    async def load_comments(self, post_id: str) -> list[CommentView]:
        comments = await self.client.list_comments(post_id)
        self._comments[post_id] = comments
        return self.comments_for(post_id)

    async def add_comment(self, post_id: str, title: str, text: str) -> CommentView:
        comment = await self.client.create_comment(post_id, title, text)
        self._comments[post_id] = [comment, *self._comments.get(post_id, [])]
        return comment

    async def edit_comment(
        self, comment_id: str, title: str | None = None, text: str | None = None
    ) -> CommentView:
        comment = await self.client.update_comment(comment_id, title=title, text=text)
        cached = self._comments.get(comment.post_id)
        if cached is not None:
            self._comments[comment.post_id] = [
                comment if c.id == comment.id else c for c in cached
            ]
        return comment

    async def remove_comment(self, comment_id: str) -> None:
        await self.client.delete_comment(comment_id)
        for post_id, cached in self._comments.items():
            self._comments[post_id] = [c for c in cached if c.id != comment_id]
