"""Domain entity representing a community question."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class QuestionStatus(str, Enum):
    """Publication states a question moves through."""

    DRAFT = "DRAFT"
    PENDING = "PENDING"
    PUBLISHED = "PUBLISHED"
    HIDDEN = "HIDDEN"


@dataclass
class Question:
    """A question posted by a member of the community."""

    id: str | None
    author_id: str
    title: str
    body: str
    status: QuestionStatus
    is_solved: bool
    created_at: datetime | None


__all__ = ["Question", "QuestionStatus"]
