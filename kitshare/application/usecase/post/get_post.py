"""Get post use case."""

from pydantic import BaseModel

from kitshare.application.usecase.common import parse_id
from kitshare.application.usecase.view import PostView, post_view
from kitshare.domain.service import PostService, UserService
from kitshare.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class PostResponse(BaseModel):
    """Single post response."""

    post: PostView


class GetPostUseCase:
    """Use case for fetching one post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_id(request.post_id, "Post"))
        post = await self.post_service.get_post(post_id)
        usernames = await self.user_service.get_usernames([post.creator_id])
        return PostResponse(post=post_view(post, usernames))
