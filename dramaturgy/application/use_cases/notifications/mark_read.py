"""Use cases flagging notifications as read."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dramaturgy.domain.entities import User
from dramaturgy.infrastructure.repositories import NotificationRepository

from .errors import InvalidNotificationIdsError, NotificationStorageError
from .principal import require_principal

logger = logging.getLogger(__name__)


def normalize_notification_ids(notification_ids: Any) -> list[str]:
    """Validate ``notification_ids`` and return them without duplicates.

    The value must be a non-empty list of non-empty strings; order is preserved.
    """

    if not isinstance(notification_ids, list) or not notification_ids:
        raise InvalidNotificationIdsError()

    unique: list[str] = []
    seen: set[str] = set()
    for notification_id in notification_ids:
        if not isinstance(notification_id, str) or not notification_id.strip():
            raise InvalidNotificationIdsError()
        if notification_id in seen:
            continue
        seen.add(notification_id)
        unique.append(notification_id)
    return unique


def mark_notifications_read(
    session: Session, user: User | None, notification_ids: Any
) -> int:
    """Mark the caller's own notifications among ``notification_ids`` as read.

    Identifiers that belong to other users or do not exist are ignored. The
    call is idempotent. Returns the number of notifications that changed state.
    """

    principal = require_principal(user)
    ids = normalize_notification_ids(notification_ids)

    try:
        updated = NotificationRepository(session).mark_as_read(ids, user_id=principal.id)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(
            "Failed to mark %s notifications as read for user %s",
            len(ids),
            principal.id,
        )
        raise NotificationStorageError("Failed to mark notifications as read") from exc

    logger.info(
        "User %s marked %s of %s requested notifications as read",
        principal.id,
        updated,
        len(ids),
    )
    return updated


def mark_all_notifications_read(session: Session, user: User | None) -> int:
    """Mark every unread notification of the caller as read."""

    principal = require_principal(user)
    try:
        updated = NotificationRepository(session).mark_all_as_read(user_id=principal.id)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to mark all notifications as read for user %s", principal.id)
        raise NotificationStorageError("Failed to mark notifications as read") from exc

    logger.info("User %s marked all %s unread notifications as read", principal.id, updated)
    return updated


__all__ = [
    "mark_all_notifications_read",
    "mark_notifications_read",
    "normalize_notification_ids",
]
