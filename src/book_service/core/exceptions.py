"""Domain errors raised by the book service.

Each error carries a machine-readable ``code`` and the HTTP status the API
answers with; the HTTP layer renders them through a single exception handler.
"""

from typing import Any

from sqlalchemy.exc import IntegrityError

# Driver messages for a unique constraint violation (PostgreSQL, SQLite)
_DUPLICATE_KEY_MARKERS = ("duplicate key", "UNIQUE constraint failed")


class BookServiceError(Exception):
    """Base class for classified service errors."""

    code: str = "internal"
    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class NotFoundError(BookServiceError):
    """No row matches the requested id."""

    code = "not_found"
    status_code = 404


class AlreadyExistsError(BookServiceError):
    """A unique constraint (the ISBN) was violated."""

    code = "already_exists"
    status_code = 409


class InvalidArgumentError(BookServiceError):
    """The request is well-formed but cannot be applied."""

    code = "invalid_argument"
    status_code = 400


class InternalError(BookServiceError):
    """The store accepted an operation but did not return the expected result."""

    code = "internal"
    status_code = 500


def is_duplicate_key_error(exc: IntegrityError) -> bool:
    """Return True when the integrity failure is a unique constraint violation."""
    message = str(exc.orig) if exc.orig is not None else str(exc)
    return any(marker in message for marker in _DUPLICATE_KEY_MARKERS)
