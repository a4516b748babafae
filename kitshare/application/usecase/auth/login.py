"""Login use case."""

from pydantic import BaseModel

from kitshare.application.usecase.auth.signup import AuthResponse
from kitshare.application.usecase.view import user_view
from kitshare.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    username: str | None = None
    password: str | None = None


class LoginUseCase:
    """Use case for exchanging credentials for a token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            ValidationError: If username or password is missing
            AuthenticationError: If the credentials are wrong
        """
        user = await self.user_service.authenticate(request.username, request.password)
        token = self.jwt_service.create_token(str(user.id), user.username.root)
        return AuthResponse(token=token, user=user_view(user))
