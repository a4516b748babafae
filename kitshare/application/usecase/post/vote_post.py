"""Vote on post use case."""

from pydantic import BaseModel

from kitshare.application.usecase.common import parse_id
from kitshare.application.usecase.view import PostView, post_view
from kitshare.domain.service import PostService, UserService, normalize_id
from kitshare.domain.value import PostId, UserId, VoteAction


class VotePostRequest(BaseModel):
    """Vote request."""

    post_id: str
    user_id: str  # User ID from authenticated user
    action: VoteAction


class VotePostResponse(BaseModel):
    """Vote response."""

    post: PostView
    message: str


class VotePostUseCase:
    """Use case for liking or disliking a post.

    Repeating the same vote removes it; voting the other way switches it.
    """

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize vote use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: VotePostRequest) -> VotePostResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_id(request.post_id, "Post"))
        user_id = UserId(normalize_id(request.user_id))

        post, message = await self.post_service.vote(user_id, post_id, request.action)
        usernames = await self.user_service.get_usernames([post.creator_id])
        return VotePostResponse(post=post_view(post, usernames), message=message)
