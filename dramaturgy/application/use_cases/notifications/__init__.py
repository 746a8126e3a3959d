"""Use cases behind the notification badge, feed and read-state endpoints."""

from .errors import (
    InvalidNotificationIdsError,
    NotificationError,
    NotificationStorageError,
    UnauthorizedError,
)
from .events import notify_new_reply
from .list_notifications import NotificationListOptions, list_notifications
from .mark_read import (
    mark_all_notifications_read,
    mark_notifications_read,
    normalize_notification_ids,
)
from .pending_count import get_pending_count
from .principal import require_principal

__all__ = [
    "InvalidNotificationIdsError",
    "NotificationError",
    "NotificationListOptions",
    "NotificationStorageError",
    "UnauthorizedError",
    "get_pending_count",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notifications_read",
    "normalize_notification_ids",
    "notify_new_reply",
    "require_principal",
]
