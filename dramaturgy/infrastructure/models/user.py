"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, Enum, String
from sqlalchemy.orm import relationship

from dramaturgy.domain.entities import UserRole
from dramaturgy.infrastructure.database import Base
from dramaturgy.utils import new_identifier, now_in_utc_naive_datetime


class UserModel(Base):
    """Database representation of a community member."""

    __tablename__ = "user"

    id = Column(String(36), primary_key=True, default=new_identifier)
    role = Column(
        Enum(UserRole, name="user_role", native_enum=False, length=20),
        nullable=False,
        default=UserRole.REGULAR,
    )
    name = Column(String(100), nullable=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    image = Column(String(500), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_utc_naive_datetime)

    questions = relationship("QuestionModel", back_populates="author")


__all__ = ["UserModel"]
