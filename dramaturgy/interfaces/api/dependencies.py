"""FastAPI dependency utilities."""

import logging

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from dramaturgy.domain.entities import User
from dramaturgy.infrastructure.database import get_db
from dramaturgy.infrastructure.repositories import UserRepository
from dramaturgy.infrastructure.security import (
    decode_access_token,
    password_signature,
    refresh_access_token,
)

logger = logging.getLogger(__name__)

# Missing credentials are reported by ``get_current_user`` so every rejection
# carries the same body.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        logger.warning("Rejected access token: %s", exc)
        raise _unauthorized() from exc

    user_id = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(user_id, str) or not isinstance(signature_claim, str):
        logger.warning("Rejected access token without subject or signature claims")
        raise _unauthorized()

    user = UserRepository(db).get(user_id)
    if user is None:
        logger.warning("Rejected access token for unknown user %s", user_id)
        raise _unauthorized()

    if signature_claim != password_signature(user.password, user.is_active):
        logger.warning("Rejected stale access token for user %s", user_id)
        raise _unauthorized()

    return user


def get_current_user(
    request: Request,
    response: Response,
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    if not token:
        raise _unauthorized()

    user = resolve_current_user(token, db)

    try:
        refreshed_token = refresh_access_token(token)
    except ValueError as exc:
        raise _unauthorized() from exc

    response.headers["X-Refreshed-Token"] = refreshed_token
    request.state.refreshed_token = refreshed_token

    return user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user
