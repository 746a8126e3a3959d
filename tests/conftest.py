"""Shared fixtures: a throwaway SQLite database and record factories."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "dramaturgy_api_tests.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"

from dramaturgy.config import get_settings  # noqa: E402

get_settings.cache_clear()

from dramaturgy.domain.entities import (  # noqa: E402
    NotificationType,
    QuestionStatus,
    UserRole,
)
from dramaturgy.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from dramaturgy.infrastructure.models import (  # noqa: E402
    NotificationModel,
    QuestionModel,
    ReplyModel,
    UserModel,
)
from dramaturgy.utils import ensure_utc_naive_datetime, now_in_app_timezone  # noqa: E402

# Fixture users never log in with a password.
_PLACEHOLDER_PASSWORD_HASH = "not-a-real-hash"


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def now() -> datetime:
    return now_in_app_timezone()


@pytest.fixture()
def make_user(session):
    counter = {"value": 0}

    def _make_user(
        role: UserRole = UserRole.REGULAR,
        *,
        name: str | None = None,
        username: str | None = None,
        image: str | None = None,
        is_active: bool = True,
    ) -> UserModel:
        counter["value"] += 1
        handle = username or f"member{counter['value']}"
        user = UserModel(
            role=role,
            name=name or handle.title(),
            username=handle,
            email=f"{handle}@example.com",
            password=_PLACEHOLDER_PASSWORD_HASH,
            image=image,
            is_active=is_active,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def make_question(session):
    def _make_question(
        author: UserModel,
        *,
        title: str = "How do I block a crowd scene?",
        status: QuestionStatus = QuestionStatus.PUBLISHED,
        is_solved: bool = False,
    ) -> QuestionModel:
        question = QuestionModel(
            author_id=author.id,
            title=title,
            body="Looking for staging advice.",
            status=status,
            is_solved=is_solved,
        )
        session.add(question)
        session.commit()
        session.refresh(question)
        return question

    return _make_question


@pytest.fixture()
def make_reply(session):
    def _make_reply(
        question: QuestionModel,
        author: UserModel,
        *,
        created_at: datetime | None = None,
        body: str = "Try a diagonal cross upstage.",
    ) -> ReplyModel:
        reply = ReplyModel(
            question_id=question.id,
            author_id=author.id,
            body=body,
            created_at=ensure_utc_naive_datetime(created_at or now_in_app_timezone()),
        )
        session.add(reply)
        session.commit()
        session.refresh(reply)
        return reply

    return _make_reply


@pytest.fixture()
def make_notification(session):
    def _make_notification(
        recipient: UserModel,
        *,
        created_at: datetime | None = None,
        read: bool = False,
        notification_type: NotificationType = NotificationType.NEW_REPLY,
        question: QuestionModel | None = None,
        reply: ReplyModel | None = None,
        actor: UserModel | None = None,
    ) -> NotificationModel:
        notification = NotificationModel(
            user_id=recipient.id,
            type=notification_type,
            read=read,
            created_at=ensure_utc_naive_datetime(created_at or now_in_app_timezone()),
            question_id=question.id if question else None,
            reply_id=reply.id if reply else None,
            actor_id=actor.id if actor else None,
        )
        session.add(notification)
        session.commit()
        session.refresh(notification)
        return notification

    return _make_notification


def read_flags(session, notification_ids) -> dict[str, bool]:
    """Return the stored ``read`` flag for each identifier."""

    session.expire_all()
    rows = (
        session.query(NotificationModel.id, NotificationModel.read)
        .filter(NotificationModel.id.in_(list(notification_ids)))
        .all()
    )
    return {notification_id: read for notification_id, read in rows}


@pytest.fixture()
def stored_read_flags(session):
    def _stored_read_flags(*notification_ids: str) -> dict[str, bool]:
        return read_flags(session, notification_ids)

    return _stored_read_flags
