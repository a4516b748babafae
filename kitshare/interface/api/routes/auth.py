"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from kitshare.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    SignupRequest,
    SignupUseCase,
)
from kitshare.application.usecase.view import UserView
from kitshare.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from kitshare.interface.api.security import bearer_scheme, require_token
from kitshare.util.jwt import JWTError
from kitshare.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class CredentialsAPIRequest(BaseModel):
    """Username and password.

    Both are optional here so that a missing field is reported as a 400 with
    a readable message.
    """

    username: str | None = None
    password: str | None = None


class MeResponse(BaseModel):
    """Current user response."""

    user: UserView


@router.post(
    "/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: CredentialsAPIRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> AuthResponse:
    """Create an account and return a token for it.

    Raises:
        HTTPException: 400 on missing fields, 409 if the username is taken
    """
    try:
        return await signup_use_case.execute(
            SignupRequest(username=request.username, password=request.password)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.exception("Signup failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to sign up",
        ) from e


@router.post("/login", response_model=AuthResponse)
async def login(
    request: CredentialsAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange a username and password for a token.

    Raises:
        HTTPException: 400 on missing fields, 401 on bad credentials
    """
    try:
        return await login_use_case.execute(
            LoginRequest(username=request.username, password=request.password)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except Exception as e:
        logger.exception("Login failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to log in",
        ) from e


@router.get("/me", response_model=MeResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> MeResponse:
    """Return the user the bearer token belongs to.

    Raises:
        HTTPException: 401 if the token is missing, invalid, or names a user
            that no longer exists
    """
    token = require_token(credentials)
    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
        return MeResponse(user=user)
    except (JWTError, NotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e) if isinstance(e, JWTError) else "User no longer exists",
        )
