"""Use case for authenticating a user."""

from enum import Enum, auto

from sqlalchemy.orm import Session

from dramaturgy.domain.entities import User
from dramaturgy.infrastructure.repositories import UserRepository
from dramaturgy.infrastructure.security import verify_password


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a user."""

    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()
    INACTIVE = auto()


def authenticate_user(
    session: Session, login: str, password: str
) -> tuple[User | None, AuthenticationStatus]:
    """Return the authentication result along with the user when possible.

    ``login`` may be either the e-mail address or the username.
    """

    user = UserRepository(session).get_by_login(login)

    if not user:
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not verify_password(password, user.password):
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not user.is_active:
        return user, AuthenticationStatus.INACTIVE

    return user, AuthenticationStatus.SUCCESS
