"""SQLAlchemy model for community questions."""

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from dramaturgy.domain.entities import QuestionStatus
from dramaturgy.infrastructure.database import Base
from dramaturgy.utils import new_identifier, now_in_utc_naive_datetime


class QuestionModel(Base):
    """Database representation of a question."""

    __tablename__ = "question"

    id = Column(String(36), primary_key=True, default=new_identifier)
    author_id = Column(String(36), ForeignKey("user.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False, default="")
    status = Column(
        Enum(QuestionStatus, name="question_status", native_enum=False, length=20),
        nullable=False,
        default=QuestionStatus.DRAFT,
        index=True,
    )
    is_solved = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_utc_naive_datetime)

    author = relationship("UserModel", back_populates="questions")
    replies = relationship("ReplyModel", back_populates="question")


__all__ = ["QuestionModel"]
