"""ORM models used by the application infrastructure."""

from .user import UserModel
from .question import QuestionModel
from .reply import ReplyModel
from .notification import NotificationModel

__all__ = [
    "UserModel",
    "QuestionModel",
    "ReplyModel",
    "NotificationModel",
]
