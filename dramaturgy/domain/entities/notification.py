"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Kinds of events a notification can describe."""

    NEW_QUESTION = "NEW_QUESTION"
    NEW_REPLY = "NEW_REPLY"


@dataclass(frozen=True)
class NotificationQuestionSummary:
    """Minimal projection of the question a notification refers to."""

    id: str
    title: str


@dataclass(frozen=True)
class NotificationReplySummary:
    """Minimal projection of the reply a notification refers to."""

    id: str
    body: str


@dataclass(frozen=True)
class NotificationActorSummary:
    """Public profile of the user who triggered a notification."""

    id: str
    name: str | None
    username: str | None
    image: str | None


@dataclass
class Notification:
    """Event delivered to a specific user, unread until its owner marks it."""

    id: str | None
    user_id: str
    type: NotificationType
    read: bool = False
    created_at: datetime | None = None
    question_id: str | None = None
    reply_id: str | None = None
    actor_id: str | None = None
    question: NotificationQuestionSummary | None = None
    reply: NotificationReplySummary | None = None
    actor: NotificationActorSummary | None = None


__all__ = [
    "Notification",
    "NotificationActorSummary",
    "NotificationQuestionSummary",
    "NotificationReplySummary",
    "NotificationType",
]
