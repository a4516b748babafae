"""Update comment use case."""

from pydantic import BaseModel

from kitshare.application.usecase.comment.create_comment import CommentResponse
from kitshare.application.usecase.common import parse_id
from kitshare.application.usecase.view import comment_view
from kitshare.domain.service import CommentService, UserService
from kitshare.domain.value import CommentId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    user_id: str  # Current user ID (must be creator)
    title: str | None = None  # None keeps the current title
    text: str | None = None  # None keeps the current text


class UpdateCommentUseCase:
    """Use case for editing a comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        Args:
            request: Fields to change and the requesting user

        Returns:
            The edited comment, marked as edited

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user did not write the comment
            ValidationError: If a provided field is blank
        """
        comment_id = CommentId(parse_id(request.comment_id, "Comment"))
        comment = await self.comment_service.update_comment(
            request.user_id, comment_id, title=request.title, text=request.text
        )
        usernames = await self.user_service.get_usernames([comment.creator_id])
        return CommentResponse(comment=comment_view(comment, usernames))
