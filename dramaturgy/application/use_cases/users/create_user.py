"""Use case for creating users."""

from sqlalchemy.orm import Session

from dramaturgy.domain.entities import User, UserRole
from dramaturgy.infrastructure.repositories import UserRepository
from dramaturgy.infrastructure.security import get_password_hash
from dramaturgy.utils import now_in_utc_naive_datetime

from .validators import ensure_valid_email, ensure_valid_username


def create_user(
    session: Session,
    *,
    username: str,
    email: str,
    password: str,
    role: UserRole | str = UserRole.REGULAR,
    name: str | None = None,
    image: str | None = None,
) -> User:
    """Create a new user ensuring unique e-mail addresses and usernames."""

    repository = UserRepository(session)
    email = ensure_valid_email(email)
    username = ensure_valid_username(username)

    if repository.get_by_email(email):
        raise ValueError("Email is already registered")
    if repository.get_by_username(username):
        raise ValueError("Username is already taken")
    if not password:
        raise ValueError("Password is required")

    user = User(
        id=None,
        role=UserRole.parse(role),
        name=name,
        username=username,
        email=email,
        password=get_password_hash(password),
        image=image,
        is_active=True,
        created_at=now_in_utc_naive_datetime(),
    )
    return repository.create(user)
