"""Domain entity representing a reply to a question."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Reply:
    """A reply left on a question."""

    id: str | None
    question_id: str
    author_id: str
    body: str
    created_at: datetime | None


__all__ = ["Reply"]
