"""Get comments use case."""

import logfire
from pydantic import BaseModel

from kitshare.application.usecase.common import parse_id
from kitshare.application.usecase.view import CommentView, comment_view
from kitshare.domain.service import CommentService, UserService
from kitshare.domain.value import PostId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentView]


class GetCommentsUseCase:
    """Use case for listing the comments on a post, newest first."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service, to resolve creator usernames
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        A post without comments, or an unknown post, yields an empty list.
        """
        with logfire.span("get_comments.execute", post_id=request.post_id):
            post_id = PostId(parse_id(request.post_id, "Post"))
            comments = await self.comment_service.list_for_post(post_id)
            usernames = await self.user_service.get_usernames(
                c.creator_id for c in comments
            )
            return GetCommentsResponse(
                comments=[comment_view(c, usernames) for c in comments]
            )
