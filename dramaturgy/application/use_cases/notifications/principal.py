"""Guard shared by every notification use case."""

from dramaturgy.domain.entities import User

from .errors import UnauthorizedError


def require_principal(user: User | None) -> User:
    """Return ``user`` or raise :class:`UnauthorizedError` when absent."""

    if user is None or user.id is None:
        raise UnauthorizedError()
    return user


__all__ = ["require_principal"]
