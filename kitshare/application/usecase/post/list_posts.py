"""List posts use case."""

import logfire
from pydantic import BaseModel

from kitshare.application.usecase.view import PostView, post_view
from kitshare.domain.service import PostService, UserService, normalize_id
from kitshare.domain.value import UserId


class ListPostsRequest(BaseModel):
    """List posts request."""

    creator_id: str | None = None  # Only this user's posts, newest first


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]


class ListPostsUseCase:
    """Use case for the feed and for a user's own posts."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service, to resolve creator usernames
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Without a creator, every post is returned, most liked first. With a
        creator, only that user's posts are returned, newest first.
        """
        with logfire.span("list_posts.execute", creator_id=request.creator_id):
            if request.creator_id is None:
                posts = await self.post_service.list_all()
            else:
                creator_id = UserId(normalize_id(request.creator_id))
                posts = await self.post_service.list_by_creator(creator_id)

            usernames = await self.user_service.get_usernames(
                post.creator_id for post in posts
            )
            return ListPostsResponse(posts=[post_view(p, usernames) for p in posts])
