"""Common validation helpers for user use cases."""

import re

_USERNAME_PATTERN = re.compile(r"^[a-z0-9_]{3,30}$")


def ensure_valid_email(email: str) -> str:
    """Return a normalized e-mail address or raise ``ValueError``."""

    normalized = email.strip()
    if normalized.count("@") != 1:
        raise ValueError("A valid email address is required")

    local_part, domain = normalized.split("@", 1)
    if not local_part or "." not in domain:
        raise ValueError("A valid email address is required")

    return f"{local_part}@{domain.lower()}"


def ensure_valid_username(username: str) -> str:
    """Return a lower-cased username or raise ``ValueError``."""

    normalized = username.strip().lower()
    if not _USERNAME_PATTERN.match(normalized):
        raise ValueError(
            "Username must be 3-30 characters of letters, digits or underscores"
        )
    return normalized
