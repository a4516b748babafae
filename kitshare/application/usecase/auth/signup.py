"""Signup use case."""

from pydantic import BaseModel

from kitshare.application.usecase.view import UserView, user_view
from kitshare.domain.service import JWTService, UserService


class SignupRequest(BaseModel):
    """Signup request."""

    username: str | None = None
    password: str | None = None


class AuthResponse(BaseModel):
    """Token issued to a freshly authenticated user."""

    token: str
    user: UserView


class SignupUseCase:
    """Use case for creating an account and signing in to it."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> AuthResponse:
        """Execute signup flow.

        Args:
            request: Requested username and password

        Returns:
            Token and the new user

        Raises:
            ValidationError: If username or password is missing
            ConflictError: If the username is taken
        """
        user = await self.user_service.register(request.username, request.password)
        token = self.jwt_service.create_token(str(user.id), user.username.root)
        return AuthResponse(token=token, user=user_view(user))
