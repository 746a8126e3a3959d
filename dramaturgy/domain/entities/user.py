"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .role import UserRole


@dataclass
class User:
    """Core attributes describing an authenticated principal."""

    id: str | None
    role: UserRole
    name: str | None
    username: str
    email: str
    password: str
    image: str | None
    is_active: bool
    created_at: datetime | None


__all__ = ["User"]
