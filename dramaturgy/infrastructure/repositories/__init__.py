"""Repository implementations for infrastructure layer."""

from .user_repository import UserRepository
from .question_repository import QuestionRepository
from .reply_repository import ReplyRepository
from .notification_repository import NotificationRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "ReplyRepository",
    "NotificationRepository",
]
