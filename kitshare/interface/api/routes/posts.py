"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from kitshare.application.usecase.common import ApiModel
from kitshare.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    DeleteResponse,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
    VotePostRequest,
    VotePostResponse,
    VotePostUseCase,
)
from kitshare.application.usecase.view import AddOnsSlots, DrumKitSlots
from kitshare.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from kitshare.domain.service import JWTService
from kitshare.domain.value import VoteAction
from kitshare.interface.api.security import bearer_scheme, require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class PostFieldsAPIRequest(ApiModel):
    """Post fields as sent by clients.

    Used for both create and update. On update, omitted fields and omitted
    descriptor slots keep their current value.
    """

    drummer_name: str | None = None
    album: str | None = None
    drum_kit: DrumKitSlots | None = None
    add_ons: AddOnsSlots | None = None

    def provided_slots(self, name: str) -> dict[str, str | None] | None:
        """Slots the client actually sent for ``drum_kit`` or ``add_ons``."""
        descriptor = getattr(self, name)
        if descriptor is None:
            return None
        slots = descriptor.model_dump(exclude_unset=True)
        slots.update(descriptor.model_extra or {})
        return slots


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListPostsResponse:
    """List every post, most liked first.

    Requires authentication.
    """
    require_user_id(credentials, jwt_service)
    try:
        return await list_posts_use_case.execute(ListPostsRequest())
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch posts",
        )


@router.get("/user", response_model=ListPostsResponse)
async def list_my_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListPostsResponse:
    """List the current user's posts, newest first.

    Requires authentication.
    """
    user_id = require_user_id(credentials, jwt_service)
    try:
        return await list_posts_use_case.execute(ListPostsRequest(creator_id=user_id))
    except Exception as e:
        logfire.error("Unexpected error listing user posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch posts",
        )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostResponse:
    """Get a single post.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the post does not exist
    """
    require_user_id(credentials, jwt_service)
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Post not found"
        )
    except Exception as e:
        logfire.error("Unexpected error fetching post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch post",
        )


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostFieldsAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostResponse:
    """Create a new post owned by the current user.

    Raises:
        HTTPException: 401 if not authenticated, 400 if drummer name or album
            is missing
    """
    user_id = require_user_id(credentials, jwt_service)
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                user_id=user_id,
                drummer_name=request.drummer_name,
                album=request.album,
                drum_kit=request.provided_slots("drum_kit"),
                add_ons=request.provided_slots("add_ons"),
            )
        )
    except ValidationError as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    request: PostFieldsAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostResponse:
    """Update a post. Only its creator may do this.

    Raises:
        HTTPException: 401, 403 for non-owners, 404, or 400 on blank fields
    """
    user_id = require_user_id(credentials, jwt_service)
    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                user_id=user_id,
                drummer_name=request.drummer_name,
                album=request.album,
                drum_kit=request.provided_slots("drum_kit"),
                add_ons=request.provided_slots("add_ons"),
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Post not found"
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not authorized to update this post",
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update post",
        )


@router.delete("/{post_id}", response_model=DeleteResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteResponse:
    """Delete a post and its comments. Only its creator may do this.

    Raises:
        HTTPException: 401, 403 for non-owners, or 404
    """
    user_id = require_user_id(credentials, jwt_service)
    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Post not found"
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not authorized to delete this post",
        )
    except Exception as e:
        logfire.error("Unexpected error deleting post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete post",
        )


async def _vote(
    post_id: str,
    action: VoteAction,
    vote_post_use_case: VotePostUseCase,
    jwt_service: JWTService,
    credentials: HTTPAuthorizationCredentials | None,
) -> VotePostResponse:
    user_id = require_user_id(credentials, jwt_service)
    try:
        return await vote_post_use_case.execute(
            VotePostRequest(post_id=post_id, user_id=user_id, action=action)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Post not found"
        )
    except Exception as e:
        logfire.error(
            "Unexpected error voting on post",
            post_id=post_id,
            action=action.value,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action.value} post",
        )


@router.put("/{post_id}/like", response_model=VotePostResponse)
async def like_post(
    post_id: str,
    vote_post_use_case: FromDishka[VotePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> VotePostResponse:
    """Like a post, or remove an existing like.

    Liking a post you disliked removes the dislike.
    """
    return await _vote(
        post_id, VoteAction.LIKE, vote_post_use_case, jwt_service, credentials
    )


@router.put("/{post_id}/dislike", response_model=VotePostResponse)
async def dislike_post(
    post_id: str,
    vote_post_use_case: FromDishka[VotePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> VotePostResponse:
    """Dislike a post, or remove an existing dislike.

    Disliking a post you liked removes the like.
    """
    return await _vote(
        post_id, VoteAction.DISLIKE, vote_post_use_case, jwt_service, credentials
    )
