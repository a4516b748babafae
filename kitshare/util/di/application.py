"""Application layer DI providers."""

from dishka import Scope, provide

from kitshare.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    SignupUseCase,
)
from kitshare.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from kitshare.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
    VotePostUseCase,
)
from kitshare.domain.service import (
    CommentService,
    JWTService,
    PostService,
    UserService,
)
from kitshare.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_signup_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # Post use cases
    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_get_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_update_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_vote_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> VotePostUseCase:
        """Provide vote use case."""
        return VotePostUseCase(post_service=post_service, user_service=user_service)

    # Comment use cases
    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)
