"""Domain layer DI providers."""

from dishka import Scope, provide

from kitshare.config import AuthSettings
from kitshare.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from kitshare.domain.service import (
    CommentService,
    JWTService,
    PostService,
    UserService,
)
from kitshare.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, comment_repository: CommentRepository
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, comment_repository=comment_repository
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, post_repository=post_repository
        )
