"""Use case listing the notification feed of a principal."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dramaturgy.config import Settings, get_settings
from dramaturgy.domain.entities import Notification, User
from dramaturgy.infrastructure.repositories import NotificationRepository

from .errors import NotificationStorageError
from .principal import require_principal

logger = logging.getLogger(__name__)

_LEADING_INTEGER: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?P<sign>[+-]?)0*(?P<digits>\d+)"
)
# Longer digit runs are past any cap; they are never converted to ``int``.
_MAX_LIMIT_DIGITS: Final[int] = 9


@dataclass(frozen=True)
class NotificationListOptions:
    """Page size and read-state filter for a notification listing.

    ``limit`` defaults to ``NOTIFICATION_DEFAULT_LIMIT`` (10) and never exceeds
    ``NOTIFICATION_MAX_LIMIT`` (100).
    """

    limit: int
    unread_only: bool = False

    @classmethod
    def from_query(
        cls,
        limit: str | None,
        unread_only: str | None,
        *,
        settings: Settings | None = None,
    ) -> "NotificationListOptions":
        """Build options from raw query-string values.

        A missing, non-numeric or non-positive ``limit`` falls back to the
        default; a numeric prefix is honoured (``"12abc"`` reads as 12); larger
        values are clamped to the cap. ``unread_only`` is enabled only by the
        exact string ``"true"``.
        """

        settings = settings or get_settings()
        return cls(
            limit=_parse_limit(limit, settings),
            unread_only=unread_only == "true",
        )


def _parse_limit(raw: str | None, settings: Settings) -> int:
    default = settings.notification_default_limit
    if raw is None:
        return default
    match = _LEADING_INTEGER.match(raw)
    if match is None:
        return default
    digits = match.group("digits")
    if match.group("sign") == "-" or digits.strip("0") == "":
        return default
    if len(digits) > _MAX_LIMIT_DIGITS:
        return settings.notification_max_limit
    value = int(digits)
    if value > settings.notification_max_limit:
        logger.debug(
            "Requested notification limit %s clamped to %s",
            value,
            settings.notification_max_limit,
        )
        return settings.notification_max_limit
    return value


def list_notifications(
    session: Session,
    user: User | None,
    options: NotificationListOptions | None = None,
) -> Sequence[Notification]:
    """Return ``user``'s notifications, newest first, honouring ``options``."""

    principal = require_principal(user)
    options = options or NotificationListOptions(
        limit=get_settings().notification_default_limit
    )
    try:
        return NotificationRepository(session).list_for_user(
            principal.id,
            limit=options.limit,
            unread_only=options.unread_only,
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(
            "Failed to fetch notifications for user %s (limit=%s, unread_only=%s)",
            principal.id,
            options.limit,
            options.unread_only,
        )
        raise NotificationStorageError("Failed to fetch notifications") from exc


__all__ = ["NotificationListOptions", "list_notifications"]
