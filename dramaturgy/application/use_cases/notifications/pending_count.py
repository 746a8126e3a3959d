"""Use case computing the pending badge count for a principal."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dramaturgy.config import get_settings
from dramaturgy.domain.entities import PendingCountStrategy, User, counting_strategy
from dramaturgy.infrastructure.repositories import QuestionRepository, ReplyRepository
from dramaturgy.utils import ensure_app_timezone, now_in_app_timezone

from .errors import NotificationStorageError
from .principal import require_principal

logger = logging.getLogger(__name__)


def get_pending_count(
    session: Session, user: User | None, *, now: datetime | None = None
) -> int:
    """Return how many items currently need ``user``'s attention.

    Staff roles receive the number of published, unsolved questions on the
    whole platform. Regular members receive the number of replies other
    people left on their questions within the rolling reply window, measured
    back from ``now`` (the current time when omitted) with an inclusive lower
    bound. The window is measured in elapsed time, so a daylight saving change
    inside it neither adds nor removes an hour.
    """

    principal = require_principal(user)
    strategy = counting_strategy(principal.role)

    try:
        if strategy is PendingCountStrategy.GLOBAL_UNSOLVED_QUESTIONS:
            return QuestionRepository(session).count_open()

        reference = (
            ensure_app_timezone(now) if now is not None else now_in_app_timezone()
        ).astimezone(timezone.utc)
        window = timedelta(days=get_settings().pending_reply_window_days)
        return ReplyRepository(session).count_received_since(
            principal.id, since=reference - window
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(
            "Failed to count pending items for user %s (strategy %s)",
            principal.id,
            strategy.value,
        )
        raise NotificationStorageError("Failed to get notification count") from exc


__all__ = ["get_pending_count"]
