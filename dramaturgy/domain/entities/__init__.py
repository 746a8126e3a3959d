"""Domain entities exposed by the application."""

from .notification import (
    Notification,
    NotificationActorSummary,
    NotificationQuestionSummary,
    NotificationReplySummary,
    NotificationType,
)
from .question import Question, QuestionStatus
from .reply import Reply
from .role import (
    PENDING_COUNT_STRATEGIES,
    PendingCountStrategy,
    UserRole,
    counting_strategy,
)
from .user import User

__all__ = [
    "Notification",
    "NotificationActorSummary",
    "NotificationQuestionSummary",
    "NotificationReplySummary",
    "NotificationType",
    "PENDING_COUNT_STRATEGIES",
    "PendingCountStrategy",
    "Question",
    "QuestionStatus",
    "Reply",
    "User",
    "UserRole",
    "counting_strategy",
]
