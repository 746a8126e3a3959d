"""Errors raised by the notification use cases."""


class NotificationError(Exception):
    """Base class for notification use case failures."""


class UnauthorizedError(NotificationError):
    """Raised when an operation is attempted without an authenticated principal."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class InvalidNotificationIdsError(NotificationError, ValueError):
    """Raised when the identifiers to mark as read are missing or malformed."""

    def __init__(self, message: str = "Invalid notification IDs") -> None:
        super().__init__(message)


class NotificationStorageError(NotificationError):
    """Raised when the persistence layer fails while serving a request.

    The message is safe to return to clients; the underlying database error
    is chained as ``__cause__`` and logged where it happens.
    """


__all__ = [
    "InvalidNotificationIdsError",
    "NotificationError",
    "NotificationStorageError",
    "UnauthorizedError",
]
