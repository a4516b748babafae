"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase, DeleteResponse
from .get_post import GetPostRequest, GetPostUseCase, PostResponse
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase
from .vote_post import VotePostRequest, VotePostResponse, VotePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "DeleteResponse",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostResponse",
    "UpdatePostRequest",
    "UpdatePostUseCase",
    "VotePostRequest",
    "VotePostResponse",
    "VotePostUseCase",
]
