"""Update post use case."""

from pydantic import BaseModel

from kitshare.application.usecase.common import parse_id
from kitshare.application.usecase.post.get_post import PostResponse
from kitshare.application.usecase.view import post_view
from kitshare.domain.service import PostService, UserService
from kitshare.domain.value import PostId


class UpdatePostRequest(BaseModel):
    """Update post request.

    ``None`` fields are left unchanged. Descriptor dicts hold only the slots
    being changed.
    """

    post_id: str
    user_id: str  # Current user ID (must be creator)
    drummer_name: str | None = None
    album: str | None = None
    drum_kit: dict[str, str | None] | None = None
    add_ons: dict[str, str | None] | None = None


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user did not create the post
            ValidationError: If a provided required field is blank
        """
        post_id = PostId(parse_id(request.post_id, "Post"))
        post = await self.post_service.update_post(
            request.user_id,
            post_id,
            drummer_name=request.drummer_name,
            album=request.album,
            drum_kit=request.drum_kit,
            add_ons=request.add_ons,
        )
        usernames = await self.user_service.get_usernames([post.creator_id])
        return PostResponse(post=post_view(post, usernames))
