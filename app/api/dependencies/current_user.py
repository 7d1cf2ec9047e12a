"""Dependency that provides the authenticated learner's id from the request."""

from __future__ import annotations

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials

from app.core.auth import bearer_scheme, user_id_from_token
from app.core.errors import build_http_error


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """FastAPI dependency returning the learner id (token subject) of the caller."""
    credentials_exception = build_http_error(
        status_code=status.HTTP_401_UNAUTHORIZED,
        error="unauthorized",
        message="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception

    user_id = user_id_from_token(credentials.credentials)
    if user_id is None:
        raise credentials_exception
    return user_id
