"""Post domain service."""

from collections.abc import Mapping
from typing import List, Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from kitshare.domain.error import NotFoundError, ValidationError
from kitshare.domain.model.common import utcnow
from kitshare.domain.model.post import AddOns, DrumKit, Post
from kitshare.domain.repository import (
    CommentRepository,
    PostRepository,
    PostSortOrder,
)
from kitshare.domain.value import PostId, UserId, VoteAction

from .base import Service
from .ownership import ensure_owner
from .vote_engine import apply_vote, describe_vote

Slots = Mapping[str, Optional[str]]


def require_text(value: Optional[str], message: str) -> str:
    """Trim ``value`` and reject it when nothing is left.

    Raises:
        ValidationError: If the value is missing or whitespace-only
    """
    stripped = (value or "").strip()
    if not stripped:
        raise ValidationError(message)
    return stripped


def _build_descriptor(model: type, slots: Optional[Slots], current=None):
    try:
        base = current if current is not None else model()
        return base.merge(slots or {})
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {model.__name__} slots: {e.errors()[0]['msg']}")


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository, for removing a deleted
                post's comments
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def list_all(self) -> List[Post]:
        """All posts, most liked first.

        Ties are broken by newest first, then by id.
        """
        with logfire.span("post_service.list_all"):
            posts = await self.post_repository.find_all(sort=PostSortOrder.POPULAR)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def list_by_creator(self, creator_id: UserId) -> List[Post]:
        """Posts created by ``creator_id``, newest first."""
        with logfire.span("post_service.list_by_creator", creator_id=str(creator_id)):
            posts = await self.post_repository.find_by_creator(creator_id)
            logfire.info(
                "Creator posts listed", creator_id=str(creator_id), count=len(posts)
            )
            return posts

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def create_post(
        self,
        creator_id: UserId,
        drummer_name: Optional[str],
        album: Optional[str],
        drum_kit: Optional[Slots] = None,
        add_ons: Optional[Slots] = None,
    ) -> Post:
        """Create a post owned by ``creator_id``.

        Args:
            creator_id: Authenticated user creating the post
            drummer_name: Drummer name, required
            album: Album, required
            drum_kit: Drum kit slots to fill in
            add_ons: Add-on slots to fill in

        Returns:
            The saved post, with no likes or dislikes

        Raises:
            ValidationError: If drummer name or album is blank
        """
        with logfire.span("post_service.create_post", creator_id=str(creator_id)):
            message = "Drummer name and album are required"
            drummer_name = require_text(drummer_name, message)
            album = require_text(album, message)

            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                drummer_name=drummer_name,
                album=album,
                drum_kit=_build_descriptor(DrumKit, drum_kit),
                add_ons=_build_descriptor(AddOns, add_ons),
                creator_id=creator_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                creator_id=str(creator_id),
                drummer_name=saved.drummer_name,
            )
            return saved

    async def update_post(
        self,
        requester_id: UserId | str,
        post_id: PostId,
        drummer_name: Optional[str] = None,
        album: Optional[str] = None,
        drum_kit: Optional[Slots] = None,
        add_ons: Optional[Slots] = None,
    ) -> Post:
        """Apply a partial update to a post.

        ``None`` arguments leave the field unchanged. Descriptor slots are
        merged one by one: slots absent from ``drum_kit`` or ``add_ons`` keep
        their previous value.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the requester is not the creator
            ValidationError: If drummer name or album is provided but blank
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            requester_id=str(requester_id),
        ):
            post = await self.get_post(post_id)
            ensure_owner("post", post_id, post.creator_id, requester_id)

            update: dict = {"updated_at": utcnow()}
            if drummer_name is not None:
                update["drummer_name"] = require_text(
                    drummer_name, "Drummer name cannot be empty"
                )
            if album is not None:
                update["album"] = require_text(album, "Album cannot be empty")
            if drum_kit is not None:
                update["drum_kit"] = _build_descriptor(DrumKit, drum_kit, post.drum_kit)
            if add_ons is not None:
                update["add_ons"] = _build_descriptor(AddOns, add_ons, post.add_ons)

            saved = await self.post_repository.save(post.model_copy(update=update))
            logfire.info(
                "Post updated",
                post_id=str(post_id),
                fields=sorted(k for k in update if k != "updated_at"),
            )
            return saved

    async def delete_post(self, requester_id: UserId | str, post_id: PostId) -> None:
        """Delete a post and all of its comments.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the requester is not the creator
        """
        with logfire.span(
            "post_service.delete_post",
            post_id=str(post_id),
            requester_id=str(requester_id),
        ):
            post = await self.get_post(post_id)
            ensure_owner("post", post_id, post.creator_id, requester_id)

            removed = await self.comment_repository.delete_by_post(post_id)
            await self.post_repository.delete(post_id)
            logfire.info(
                "Post deleted", post_id=str(post_id), comments_removed=removed
            )

    async def vote(
        self, requester_id: UserId, post_id: PostId, action: VoteAction
    ) -> tuple[Post, str]:
        """Like or dislike a post on behalf of ``requester_id``.

        The post row stays locked from read to write, so concurrent votes on
        the same post are applied one after another.

        Returns:
            The updated post and a message describing what happened

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "post_service.vote",
            post_id=str(post_id),
            user_id=str(requester_id),
            action=action.value,
        ):
            post = await self.post_repository.find_by_id(post_id, for_update=True)
            if post is None:
                logfire.warn("Post not found for vote", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            result = apply_vote(post.likes, post.dislikes, requester_id, action)
            saved = await self.post_repository.save(
                post.model_copy(
                    update={
                        "likes": result.likes,
                        "dislikes": result.dislikes,
                        "updated_at": utcnow(),
                    }
                )
            )

            logfire.info(
                "Vote applied",
                post_id=str(post_id),
                user_id=str(requester_id),
                action=action.value,
                outcome=result.outcome.value,
                likes=saved.like_count,
                dislikes=saved.dislike_count,
            )
            return saved, describe_vote(action, result.outcome)
