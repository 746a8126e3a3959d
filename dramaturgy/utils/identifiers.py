"""Identifier generation for persisted records."""

from uuid import uuid4


def new_identifier() -> str:
    """Return a new opaque string identifier."""

    return str(uuid4())


__all__ = ["new_identifier"]
