"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from kitshare.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from kitshare.application.usecase.common import ApiModel
from kitshare.application.usecase.post import DeleteResponse
from kitshare.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from kitshare.domain.service import JWTService
from kitshare.interface.api.security import bearer_scheme, require_user_id

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CommentFieldsAPIRequest(ApiModel):
    """Comment fields as sent by clients.

    Both are required on create. On update, omitted fields keep their value.
    """

    title: str | None = None
    text: str | None = None


@router.get("/post/{post_id}", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetCommentsResponse:
    """List the comments on a post, newest first."""
    require_user_id(credentials, jwt_service)
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Post not found"
        )
    except Exception as e:
        logfire.error("Unexpected error listing comments", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch comments",
        )


@router.post(
    "/post/{post_id}",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CommentFieldsAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CommentResponse:
    """Comment on a post.

    Raises:
        HTTPException: 401, 400 if title or text is missing, 404 if the post
            does not exist
    """
    user_id = require_user_id(credentials, jwt_service)
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id,
                user_id=user_id,
                title=request.title,
                text=request.text,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Post not found"
        )
    except Exception as e:
        logfire.error("Unexpected error creating comment", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: str,
    request: CommentFieldsAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CommentResponse:
    """Edit a comment. Only its creator may do this.

    Raises:
        HTTPException: 401, 403 for non-owners, 404, or 400 on blank fields
    """
    user_id = require_user_id(credentials, jwt_service)
    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id,
                user_id=user_id,
                title=request.title,
                text=request.text,
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found"
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not authorized to edit this comment",
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error(
            "Unexpected error updating comment", comment_id=comment_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update comment",
        )


@router.delete("/{comment_id}", response_model=DeleteResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteResponse:
    """Delete a comment. Only its creator may do this.

    Raises:
        HTTPException: 401, 403 for non-owners, or 404
    """
    user_id = require_user_id(credentials, jwt_service)
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found"
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not authorized to delete this comment",
        )
    except Exception as e:
        logfire.error(
            "Unexpected error deleting comment", comment_id=comment_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )
