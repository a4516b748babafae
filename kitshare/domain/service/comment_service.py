"""Comment domain service."""

from typing import List, Optional
from uuid import uuid4

import logfire

from kitshare.domain.error import NotFoundError
from kitshare.domain.model.comment import Comment
from kitshare.domain.model.common import utcnow
from kitshare.domain.repository import CommentRepository, PostRepository
from kitshare.domain.value import CommentId, PostId, UserId

from .base import Service
from .ownership import ensure_owner
from .post_service import require_text


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository, to check the parent post exists
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def list_for_post(self, post_id: PostId) -> List[Comment]:
        """Comments on a post, newest first."""
        with logfire.span("comment_service.list_for_post", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info("Comments listed", post_id=str(post_id), count=len(comments))
            return comments

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def create_comment(
        self,
        creator_id: UserId,
        post_id: PostId,
        title: Optional[str],
        text: Optional[str],
    ) -> Comment:
        """Create a comment on an existing post.

        Args:
            creator_id: Authenticated user writing the comment
            post_id: Post being commented on
            title: Comment title, required
            text: Comment body, required

        Returns:
            The saved comment, not marked as edited

        Raises:
            ValidationError: If title or text is blank
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            creator_id=str(creator_id),
        ):
            message = "Title and text are required"
            title = require_text(title, message)
            text = require_text(text, message)

            if await self.post_repository.find_by_id(post_id) is None:
                logfire.warn("Post not found for comment", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                creator_id=creator_id,
                title=title,
                text=text,
                edited=False,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                creator_id=str(creator_id),
            )
            return saved

    async def update_comment(
        self,
        requester_id: UserId | str,
        comment_id: CommentId,
        title: Optional[str] = None,
        text: Optional[str] = None,
    ) -> Comment:
        """Edit a comment.

        Title and text are updated independently; ``None`` keeps the current
        value. Every successful call marks the comment as edited.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the requester is not the creator
            ValidationError: If title or text is provided but blank
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.get_comment(comment_id)
            ensure_owner("comment", comment_id, comment.creator_id, requester_id)

            if title is not None:
                title = require_text(title, "Title cannot be empty")
            if text is not None:
                text = require_text(text, "Text cannot be empty")

            saved = await self.comment_repository.save(comment.edit(title, text))
            logfire.info("Comment updated", comment_id=str(comment_id))
            return saved

    async def delete_comment(
        self, requester_id: UserId | str, comment_id: CommentId
    ) -> None:
        """Delete a comment.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the requester is not the creator
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.get_comment(comment_id)
            ensure_owner("comment", comment_id, comment.creator_id, requester_id)

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))
