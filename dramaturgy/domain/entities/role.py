"""Domain roles and the pending-count strategy each one receives."""

from __future__ import annotations

from enum import Enum
from typing import Final


class UserRole(str, Enum):
    """Closed set of roles a principal can hold."""

    REGULAR = "REGULAR"
    EXPERT = "EXPERT"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"

    @classmethod
    def parse(cls, value: "str | UserRole") -> "UserRole":
        """Return the role matching ``value`` regardless of case."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            raise ValueError(f"Unknown role: {value!r}") from exc


class PendingCountStrategy(Enum):
    """How the pending badge is computed for a principal."""

    GLOBAL_UNSOLVED_QUESTIONS = "global_unsolved_questions"
    PERSONAL_RECENT_REPLIES = "personal_recent_replies"


PENDING_COUNT_STRATEGIES: Final[dict[UserRole, PendingCountStrategy]] = {
    UserRole.REGULAR: PendingCountStrategy.PERSONAL_RECENT_REPLIES,
    UserRole.EXPERT: PendingCountStrategy.GLOBAL_UNSOLVED_QUESTIONS,
    UserRole.MODERATOR: PendingCountStrategy.GLOBAL_UNSOLVED_QUESTIONS,
    UserRole.ADMIN: PendingCountStrategy.GLOBAL_UNSOLVED_QUESTIONS,
}


def counting_strategy(role: UserRole) -> PendingCountStrategy:
    """Return the pending-count strategy assigned to ``role``.

    Staff roles see the platform-wide number of open questions, which is work
    available to them rather than a personal notification. Regular members see
    the replies other people left on their own questions recently.
    """

    return PENDING_COUNT_STRATEGIES[UserRole.parse(role)]


__all__ = [
    "PENDING_COUNT_STRATEGIES",
    "PendingCountStrategy",
    "UserRole",
    "counting_strategy",
]
