"""Aggregate application use cases."""

from .notifications import (
    get_pending_count,
    list_notifications,
    mark_all_notifications_read,
    mark_notifications_read,
)
from .users import authenticate_user, create_user

__all__ = [
    "authenticate_user",
    "create_user",
    "get_pending_count",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notifications_read",
]
