"""Persistence helpers for question queries."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from dramaturgy.domain.entities import QuestionStatus
from dramaturgy.infrastructure.models import QuestionModel


class QuestionRepository:
    """Read-side queries over questions."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def count_open(self) -> int:
        """Count published questions that have not been solved, for any author."""

        return (
            self.session.query(func.count(QuestionModel.id))
            .filter(QuestionModel.status == QuestionStatus.PUBLISHED)
            .filter(QuestionModel.is_solved.is_(False))
            .scalar()
            or 0
        )


__all__ = ["QuestionRepository"]
