"""Helpers that record notifications when community events happen."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from dramaturgy.domain.entities import Notification, NotificationType, Question, Reply
from dramaturgy.infrastructure.repositories import NotificationRepository
from dramaturgy.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def _persist_notification(
    session: Session,
    *,
    user_id: str,
    notification_type: NotificationType,
    question_id: str | None = None,
    reply_id: str | None = None,
    actor_id: str | None = None,
) -> Notification:
    notification = Notification(
        id=None,
        user_id=user_id,
        type=notification_type,
        read=False,
        created_at=now_in_app_timezone(),
        question_id=question_id,
        reply_id=reply_id,
        actor_id=actor_id,
    )
    return NotificationRepository(session).create(notification)


def notify_new_reply(
    session: Session, *, question: Question, reply: Reply
) -> Notification | None:
    """Tell the question author that someone else replied.

    Authors replying to their own question are not notified.
    """

    if reply.author_id == question.author_id:
        return None

    saved = _persist_notification(
        session,
        user_id=question.author_id,
        notification_type=NotificationType.NEW_REPLY,
        question_id=question.id,
        reply_id=reply.id,
        actor_id=reply.author_id,
    )
    logger.info(
        "Recorded reply notification %s for user %s on question %s",
        saved.id,
        question.author_id,
        question.id,
    )
    return saved


__all__ = ["notify_new_reply"]
