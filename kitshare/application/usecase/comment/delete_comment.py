"""Delete comment use case."""

from pydantic import BaseModel

from kitshare.application.usecase.common import parse_id
from kitshare.application.usecase.post.delete_post import DeleteResponse
from kitshare.domain.service import CommentService
from kitshare.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # Current user ID (must be creator)


class DeleteCommentUseCase:
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user did not write the comment
        """
        comment_id = CommentId(parse_id(request.comment_id, "Comment"))
        await self.comment_service.delete_comment(request.user_id, comment_id)
        return DeleteResponse()
