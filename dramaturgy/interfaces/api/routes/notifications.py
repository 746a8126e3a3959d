"""Endpoints exposing the notification badge, feed and read state."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from dramaturgy.application.use_cases.notifications import (
    InvalidNotificationIdsError,
    NotificationListOptions,
    NotificationStorageError,
    get_pending_count,
    list_notifications,
    mark_all_notifications_read,
    mark_notifications_read,
)
from dramaturgy.domain.entities import Notification, User
from dramaturgy.infrastructure.database import get_db
from dramaturgy.interfaces.api.dependencies import get_current_active_user
from dramaturgy.interfaces.api.schemas import (
    NotificationActorRead,
    NotificationCountResponse,
    NotificationListResponse,
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationQuestionRead,
    NotificationRead,
    NotificationReplyRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    question = notification.question
    reply = notification.reply
    actor = notification.actor
    return NotificationRead(
        id=notification.id,
        user_id=notification.user_id,
        type=notification.type,
        read=notification.read,
        created_at=notification.created_at,
        question_id=notification.question_id,
        reply_id=notification.reply_id,
        actor_id=notification.actor_id,
        question=(
            NotificationQuestionRead(id=question.id, title=question.title)
            if question
            else None
        ),
        reply=NotificationReplyRead(id=reply.id, body=reply.body) if reply else None,
        actor=(
            NotificationActorRead(
                id=actor.id, name=actor.name, username=actor.username, image=actor.image
            )
            if actor
            else None
        ),
    )


def _internal_error(exc: NotificationStorageError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc),
    )


@router.get("/count", response_model=NotificationCountResponse)
def read_pending_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationCountResponse:
    """Return the badge count for the authenticated user."""

    try:
        count = get_pending_count(db, current_user)
    except NotificationStorageError as exc:
        raise _internal_error(exc) from exc
    return NotificationCountResponse(count=count)


@router.get("", response_model=NotificationListResponse)
def read_notifications(
    limit: str | None = Query(default=None, description="Maximum number of entries"),
    unread_only: str | None = Query(
        default=None,
        alias="unreadOnly",
        description='Only unread entries when exactly "true"',
    ),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationListResponse:
    """Return the most recent notifications for the authenticated user."""

    options = NotificationListOptions.from_query(limit, unread_only)
    try:
        notifications = list_notifications(db, current_user, options)
    except NotificationStorageError as exc:
        raise _internal_error(exc) from exc
    return NotificationListResponse(
        notifications=[_notification_to_schema(n) for n in notifications]
    )


@router.post("/mark-read", response_model=NotificationMarkReadResponse)
def mark_read(
    payload: Any = Body(default=None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationMarkReadResponse:
    """Mark the given notifications of the authenticated user as read."""

    # Any JSON value is accepted here; a body that is not an object carries no ids.
    request = (
        NotificationMarkReadRequest.model_validate(payload)
        if isinstance(payload, dict)
        else NotificationMarkReadRequest()
    )
    notification_ids = request.notification_ids
    try:
        mark_notifications_read(db, current_user, notification_ids)
    except InvalidNotificationIdsError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except NotificationStorageError as exc:
        raise _internal_error(exc) from exc
    return NotificationMarkReadResponse(success=True)


@router.post("/mark-all-read", response_model=NotificationMarkReadResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationMarkReadResponse:
    """Mark every unread notification of the authenticated user as read."""

    try:
        mark_all_notifications_read(db, current_user)
    except NotificationStorageError as exc:
        raise _internal_error(exc) from exc
    return NotificationMarkReadResponse(success=True)


__all__ = ["router"]
