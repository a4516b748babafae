"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from kitshare.application.usecase.view import UserView, user_view
from kitshare.domain.service import JWTService, UserService
from kitshare.domain.value import UserId
from kitshare.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase:
    """Use case for resolving a bearer token to a user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserView:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load the user named by the token

        Args:
            request: Request with JWT token

        Returns:
            The authenticated user

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the user no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)

        try:
            user_id = UserId(UUID(payload.user_id))
        except ValueError:
            raise JWTError("Invalid token payload")

        user = await self.user_service.get_by_id(user_id)
        return user_view(user)
