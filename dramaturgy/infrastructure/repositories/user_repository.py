"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from dramaturgy.domain.entities import User
from dramaturgy.infrastructure.models import UserModel


class UserRepository:
    """Provide lookup and creation operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.username) == username.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_by_login(self, login: str) -> User | None:
        """Return the user whose e-mail or username matches ``login``."""

        normalized = login.strip().lower()
        model = (
            self.session.query(UserModel)
            .filter(
                or_(
                    func.lower(UserModel.email) == normalized,
                    func.lower(UserModel.username) == normalized,
                )
            )
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(
            role=user.role,
            name=user.name,
            username=user.username,
            email=user.email,
            password=user.password,
            image=user.image,
            is_active=user.is_active,
        )
        if user.id is not None:
            model.id = user.id
        if user.created_at is not None:
            model.created_at = user.created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=model.role,
            name=model.name,
            username=model.username,
            email=model.email,
            password=model.password,
            image=model.image,
            is_active=model.is_active,
            created_at=model.created_at,
        )


__all__ = ["UserRepository"]
