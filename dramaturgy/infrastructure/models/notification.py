"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Index, String
from sqlalchemy.orm import relationship

from dramaturgy.domain.entities import NotificationType
from dramaturgy.infrastructure.database import Base
from dramaturgy.utils import new_identifier, now_in_utc_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_user_read_created", "user_id", "read", "created_at"),
    )

    id = Column(String(36), primary_key=True, default=new_identifier)
    user_id = Column(String(36), ForeignKey("user.id"), nullable=False, index=True)
    type = Column(
        Enum(NotificationType, name="notification_type", native_enum=False, length=30),
        nullable=False,
    )
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_utc_naive_datetime)
    question_id = Column(String(36), ForeignKey("question.id"), nullable=True)
    reply_id = Column(String(36), ForeignKey("reply.id"), nullable=True)
    actor_id = Column(String(36), ForeignKey("user.id"), nullable=True)

    question = relationship("QuestionModel", lazy="joined")
    reply = relationship("ReplyModel", lazy="joined")
    actor = relationship("UserModel", foreign_keys=[actor_id], lazy="joined")


__all__ = ["NotificationModel"]
