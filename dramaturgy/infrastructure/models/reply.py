"""SQLAlchemy model for replies."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from dramaturgy.infrastructure.database import Base
from dramaturgy.utils import new_identifier, now_in_utc_naive_datetime


class ReplyModel(Base):
    """Database representation of a reply left on a question."""

    __tablename__ = "reply"

    id = Column(String(36), primary_key=True, default=new_identifier)
    question_id = Column(String(36), ForeignKey("question.id"), nullable=False, index=True)
    author_id = Column(String(36), ForeignKey("user.id"), nullable=False, index=True)
    body = Column(Text, nullable=False)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_utc_naive_datetime, index=True
    )

    question = relationship("QuestionModel", back_populates="replies")


__all__ = ["ReplyModel"]
