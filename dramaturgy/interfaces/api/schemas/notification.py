"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dramaturgy.domain.entities import NotificationType


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class NotificationQuestionRead(_CamelModel):
    id: str
    title: str


class NotificationReplyRead(_CamelModel):
    id: str
    body: str


class NotificationActorRead(_CamelModel):
    id: str
    name: str | None = None
    username: str | None = None
    image: str | None = None


class NotificationRead(_CamelModel):
    """Representation of a notification delivered to the client."""

    id: str
    user_id: str
    type: NotificationType
    read: bool
    created_at: datetime
    question_id: str | None = None
    reply_id: str | None = None
    actor_id: str | None = None
    question: NotificationQuestionRead | None = None
    reply: NotificationReplyRead | None = None
    actor: NotificationActorRead | None = None


class NotificationListResponse(_CamelModel):
    notifications: list[NotificationRead]


class NotificationCountResponse(_CamelModel):
    count: int = Field(..., ge=0)


class NotificationMarkReadRequest(_CamelModel):
    """Payload used to mark a batch of notifications as read.

    The identifiers are validated by the use case so a malformed value is
    answered with ``400 Invalid notification IDs``.
    """

    notification_ids: Any = Field(
        default=None, description="Identifiers of the caller's notifications"
    )


class NotificationMarkReadResponse(_CamelModel):
    success: bool = True


__all__ = [
    "NotificationActorRead",
    "NotificationCountResponse",
    "NotificationListResponse",
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationQuestionRead",
    "NotificationRead",
    "NotificationReplyRead",
]
