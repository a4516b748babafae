"""Delete post use case."""

from pydantic import BaseModel

from kitshare.application.usecase.common import parse_id
from kitshare.domain.service import PostService
from kitshare.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Current user ID (must be creator)


class DeleteResponse(BaseModel):
    """Deletion acknowledgement."""

    success: bool = True


class DeletePostUseCase:
    """Use case for deleting a post together with its comments."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeleteResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user did not create the post
        """
        post_id = PostId(parse_id(request.post_id, "Post"))
        await self.post_service.delete_post(request.user_id, post_id)
        return DeleteResponse()
