"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from dramaturgy.domain.entities import (
    Notification,
    NotificationActorSummary,
    NotificationQuestionSummary,
    NotificationReplySummary,
)
from dramaturgy.infrastructure.models import NotificationModel
from dramaturgy.utils import (
    ensure_utc_naive_datetime,
    from_utc_naive_datetime,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide read, create and read-state operations for notifications."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: str,
        *,
        limit: int,
        unread_only: bool = False,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if unread_only:
            query = query.filter(NotificationModel.read.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        ).limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            user_id=notification.user_id,
            type=notification.type,
            read=notification.read,
            created_at=ensure_utc_naive_datetime(
                notification.created_at or now_in_app_timezone()
            ),
            question_id=notification.question_id,
            reply_id=notification.reply_id,
            actor_id=notification.actor_id,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_ids: Iterable[str], *, user_id: str) -> int:
        """Flag the given notifications as read when they belong to ``user_id``.

        The ownership filter is part of the UPDATE statement itself. Returns the
        number of rows that changed state.
        """

        ids = [notification_id for notification_id in notification_ids if notification_id]
        if not ids:
            return 0
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.user_id == user_id,
                NotificationModel.read.is_(False),
            )
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def mark_all_as_read(self, *, user_id: str) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.read.is_(False),
            )
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        question = model.question
        reply = model.reply
        actor = model.actor
        return Notification(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            read=model.read,
            created_at=from_utc_naive_datetime(model.created_at),
            question_id=model.question_id,
            reply_id=model.reply_id,
            actor_id=model.actor_id,
            question=(
                NotificationQuestionSummary(id=question.id, title=question.title)
                if question is not None
                else None
            ),
            reply=(
                NotificationReplySummary(id=reply.id, body=reply.body)
                if reply is not None
                else None
            ),
            actor=(
                NotificationActorSummary(
                    id=actor.id,
                    name=actor.name,
                    username=actor.username,
                    image=actor.image,
                )
                if actor is not None
                else None
            ),
        )


__all__ = ["NotificationRepository"]
