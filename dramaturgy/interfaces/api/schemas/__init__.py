from .auth import Token
from .notification import (
    NotificationActorRead,
    NotificationCountResponse,
    NotificationListResponse,
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationQuestionRead,
    NotificationRead,
    NotificationReplyRead,
)

__all__ = [
    "NotificationActorRead",
    "NotificationCountResponse",
    "NotificationListResponse",
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationQuestionRead",
    "NotificationRead",
    "NotificationReplyRead",
    "Token",
]
