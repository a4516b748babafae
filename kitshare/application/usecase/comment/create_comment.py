"""Create comment use case."""

from pydantic import BaseModel

from kitshare.application.usecase.common import parse_id
from kitshare.application.usecase.view import CommentView, comment_view
from kitshare.domain.service import CommentService, UserService, normalize_id
from kitshare.domain.value import PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    user_id: str  # Authenticated creator
    title: str | None = None
    text: str | None = None


class CommentResponse(BaseModel):
    """Single comment response."""

    comment: CommentView


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Raises:
            ValidationError: If title or text is blank
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_id(request.post_id, "Post"))
        creator_id = UserId(normalize_id(request.user_id))

        comment = await self.comment_service.create_comment(
            creator_id, post_id, title=request.title, text=request.text
        )
        usernames = await self.user_service.get_usernames([comment.creator_id])
        return CommentResponse(comment=comment_view(comment, usernames))
