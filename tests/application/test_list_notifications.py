"""Tests for the notification feed and its query options."""

from __future__ import annotations

from datetime import timedelta

import pytest
from sqlalchemy.exc import OperationalError

from dramaturgy.application.use_cases.notifications import (
    NotificationListOptions,
    NotificationStorageError,
    UnauthorizedError,
    list_notifications,
)
from dramaturgy.config import Settings
from dramaturgy.domain.entities import NotificationType
from dramaturgy.infrastructure.repositories import NotificationRepository, UserRepository


def _settings(**overrides) -> Settings:
    values = {"database_url": "sqlite://", "secret_key": "test-secret", **overrides}
    return Settings(**values)


@pytest.mark.parametrize(
    ("raw_limit", "expected"),
    [
        (None, 10),
        ("", 10),
        ("abc", 10),
        ("5", 5),
        (" 7", 7),
        ("12abc", 12),
        ("0", 10),
        ("-3", 10),
        ("100", 100),
        ("5000", 100),
        ("0007", 7),
        ("9" * 5000, 100),
        ("-" + "9" * 5000, 10),
    ],
)
def test_limit_parsing(raw_limit, expected):
    options = NotificationListOptions.from_query(raw_limit, None, settings=_settings())
    assert options.limit == expected


@pytest.mark.parametrize(
    ("raw_unread", "expected"),
    [(None, False), ("true", True), ("TRUE", False), ("1", False), ("false", False)],
)
def test_unread_only_requires_literal_true(raw_unread, expected):
    options = NotificationListOptions.from_query(None, raw_unread, settings=_settings())
    assert options.unread_only is expected


def test_limit_defaults_follow_settings():
    settings = _settings(notification_default_limit=3, notification_max_limit=20)
    assert NotificationListOptions.from_query(None, None, settings=settings).limit == 3
    assert NotificationListOptions.from_query("50", None, settings=settings).limit == 20


def test_settings_reject_default_above_cap():
    with pytest.raises(ValueError):
        _settings(notification_default_limit=200, notification_max_limit=100)


def test_lists_only_own_unread_notifications_newest_first(
    session, now, make_user, make_notification
):
    owner = make_user()
    stranger = make_user()
    created = []
    for hours_ago in range(8):
        created.append(
            make_notification(
                owner,
                created_at=now - timedelta(hours=hours_ago),
                read=hours_ago % 3 == 0,
            )
        )
    make_notification(stranger, created_at=now + timedelta(minutes=1))

    principal = UserRepository(session).get(owner.id)
    notifications = list_notifications(
        session, principal, NotificationListOptions(limit=5, unread_only=True)
    )

    assert len(notifications) == 5
    assert all(n.user_id == owner.id for n in notifications)
    assert all(n.read is False for n in notifications)
    timestamps = [n.created_at for n in notifications]
    assert timestamps == sorted(timestamps, reverse=True)
    expected_ids = [n.id for n in created if not n.read][:5]
    assert [n.id for n in notifications] == expected_ids


def test_includes_read_entries_unless_filtered(session, now, make_user, make_notification):
    owner = make_user()
    make_notification(owner, created_at=now - timedelta(hours=1), read=True)
    make_notification(owner, created_at=now, read=False)

    principal = UserRepository(session).get(owner.id)
    notifications = list_notifications(
        session, principal, NotificationListOptions(limit=10)
    )

    assert [n.read for n in notifications] == [False, True]


def test_default_options_return_ten_entries(session, now, make_user, make_notification):
    owner = make_user()
    for minutes_ago in range(12):
        make_notification(owner, created_at=now - timedelta(minutes=minutes_ago))

    principal = UserRepository(session).get(owner.id)
    assert len(list_notifications(session, principal)) == 10


def test_entries_embed_question_reply_and_actor(
    session, now, make_user, make_question, make_reply, make_notification
):
    owner = make_user()
    actor = make_user(name="Stella Adler", username="stella", image="https://cdn/stella.png")
    question = make_question(owner, title="Motivation in Act II")
    reply = make_reply(question, actor, body="Ask what the character wants.")
    make_notification(owner, question=question, reply=reply, actor=actor)
    make_notification(
        owner,
        created_at=now - timedelta(days=1),
        notification_type=NotificationType.NEW_QUESTION,
    )

    principal = UserRepository(session).get(owner.id)
    enriched, bare = list_notifications(session, principal, NotificationListOptions(limit=10))

    assert enriched.type is NotificationType.NEW_REPLY
    assert enriched.question.id == question.id
    assert enriched.question.title == "Motivation in Act II"
    assert enriched.reply.body == "Ask what the character wants."
    assert enriched.actor.username == "stella"
    assert enriched.actor.name == "Stella Adler"
    assert enriched.actor.image == "https://cdn/stella.png"
    assert bare.type is NotificationType.NEW_QUESTION
    assert bare.question is None and bare.reply is None and bare.actor is None


def test_missing_principal_is_rejected(session):
    with pytest.raises(UnauthorizedError):
        list_notifications(session, None)


def test_storage_failures_are_wrapped(session, make_user, monkeypatch):
    principal = UserRepository(session).get(make_user().id)

    def _fail(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("no such table"))

    monkeypatch.setattr(NotificationRepository, "list_for_user", _fail)

    with pytest.raises(NotificationStorageError, match="Failed to fetch notifications"):
        list_notifications(session, principal)
