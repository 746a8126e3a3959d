"""Persistence helpers for reply queries."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from dramaturgy.infrastructure.models import QuestionModel, ReplyModel
from dramaturgy.utils import ensure_utc_naive_datetime


class ReplyRepository:
    """Read-side queries over replies."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def count_received_since(self, question_author_id: str, *, since: datetime) -> int:
        """Count replies other users left on ``question_author_id``'s questions.

        Replies written by the question author are excluded. ``since`` is
        inclusive.
        """

        return (
            self.session.query(func.count(ReplyModel.id))
            .select_from(ReplyModel)
            .join(QuestionModel, ReplyModel.question_id == QuestionModel.id)
            .filter(QuestionModel.author_id == question_author_id)
            .filter(ReplyModel.author_id != question_author_id)
            .filter(ReplyModel.created_at >= ensure_utc_naive_datetime(since))
            .scalar()
            or 0
        )


__all__ = ["ReplyRepository"]
