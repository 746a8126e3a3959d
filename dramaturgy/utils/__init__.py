"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_timezone,
    ensure_utc_naive_datetime,
    from_utc_naive_datetime,
    get_app_timezone,
    now_in_app_timezone,
    now_in_utc_naive_datetime,
)
from .identifiers import new_identifier

__all__ = [
    "ensure_app_timezone",
    "ensure_utc_naive_datetime",
    "from_utc_naive_datetime",
    "get_app_timezone",
    "new_identifier",
    "now_in_app_timezone",
    "now_in_utc_naive_datetime",
]
