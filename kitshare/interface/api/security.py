"""Bearer token authentication for API routes."""

import logfire
from fastapi import HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from kitshare.domain.service import JWTService, normalize_id
from kitshare.util.jwt import JWTError

# auto_error=False so a missing token becomes our own 401, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_token(credentials: HTTPAuthorizationCredentials | None) -> str:
    """Return the raw bearer token.

    Raises:
        HTTPException: 401 if no bearer token was sent
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Authentication required")
    return credentials.credentials


def require_user_id(
    credentials: HTTPAuthorizationCredentials | None, jwt_service: JWTService
) -> str:
    """Authenticate the request and return the caller's user ID.

    Args:
        credentials: Bearer credentials from the Authorization header
        jwt_service: JWT service for token verification

    Returns:
        Canonical user ID carried by the token

    Raises:
        HTTPException: 401 if the token is missing, invalid, expired or
            names a user ID that is not a UUID
    """
    token = require_token(credentials)
    try:
        user_id = jwt_service.verify_token(token).user_id
    except JWTError as e:
        logfire.info("Rejected bearer token", error=str(e))
        raise _unauthorized(str(e))

    try:
        return str(normalize_id(user_id))
    except ValueError:
        logfire.info("Rejected bearer token", error="user_id is not a UUID")
        raise _unauthorized("Invalid token payload")
