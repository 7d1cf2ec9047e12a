"""Verification of access tokens issued by the external identity provider.

Accounts and sessions live with the hosted identity service; this API only
checks the signature and claims of the bearer tokens it issues.
"""

from __future__ import annotations

from typing import Any

from fastapi.security import HTTPBearer
from jose import JWTError, jwt

from app.core.config import settings

# Bearer token extractor; missing credentials are turned into our own 401 payload.
bearer_scheme = HTTPBearer(auto_error=False)


def verify_token(token: str) -> dict[str, Any] | None:
    """Verify and decode an identity provider JWT. Returns None when invalid."""
    audience = settings.identity_jwt_audience
    try:
        return jwt.decode(
            token,
            settings.identity_jwt_secret,
            algorithms=[settings.identity_jwt_algorithm],
            audience=audience,
            options={"verify_aud": audience is not None},
        )
    except JWTError:
        return None


def user_id_from_token(token: str) -> str | None:
    """Return the token subject, or None if the token is invalid or has no subject."""
    payload = verify_token(token)
    if payload is None:
        return None
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    return subject
