"""Create post use case."""

from pydantic import BaseModel

from kitshare.application.usecase.post.get_post import PostResponse
from kitshare.application.usecase.view import post_view
from kitshare.domain.service import PostService, UserService, normalize_id
from kitshare.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    user_id: str  # Authenticated creator
    drummer_name: str | None = None
    album: str | None = None
    drum_kit: dict[str, str | None] | None = None  # Slot name -> value
    add_ons: dict[str, str | None] | None = None


class CreatePostUseCase:
    """Use case for creating a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Args:
            request: Post fields and the creator's ID

        Returns:
            The created post

        Raises:
            ValidationError: If drummer name or album is blank
        """
        creator_id = UserId(normalize_id(request.user_id))
        post = await self.post_service.create_post(
            creator_id,
            drummer_name=request.drummer_name,
            album=request.album,
            drum_kit=request.drum_kit,
            add_ons=request.add_ons,
        )
        usernames = await self.user_service.get_usernames([post.creator_id])
        return PostResponse(post=post_view(post, usernames))
