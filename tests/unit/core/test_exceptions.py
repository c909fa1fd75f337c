"""Tests for error classification."""

import sqlite3

import pytest
from sqlalchemy.exc import IntegrityError

from src.book_service.core.exceptions import (
    AlreadyExistsError,
    BookServiceError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    is_duplicate_key_error,
)


@pytest.mark.parametrize(
    ("error_cls", "code", "status_code"),
    [
        (NotFoundError, "not_found", 404),
        (AlreadyExistsError, "already_exists", 409),
        (InvalidArgumentError, "invalid_argument", 400),
        (InternalError, "internal", 500),
    ],
)
def test_error_codes_and_statuses(error_cls, code, status_code):
    error = error_cls("boom")

    assert isinstance(error, BookServiceError)
    assert error.code == code
    assert error.status_code == status_code
    assert error.to_dict() == {"code": code, "message": "boom", "details": None}


@pytest.mark.parametrize(
    "driver_message",
    [
        'duplicate key value violates unique constraint "book_isbn_key"',
        "UNIQUE constraint failed: book.isbn",
    ],
)
def test_duplicate_key_messages_are_recognised(driver_message):
    exc = IntegrityError("INSERT ...", {}, Exception(driver_message))

    assert is_duplicate_key_error(exc) is True


def test_other_integrity_errors_are_not_duplicates():
    exc = IntegrityError(
        "UPDATE ...", {}, sqlite3.IntegrityError("NOT NULL constraint failed: book.title")
    )

    assert is_duplicate_key_error(exc) is False
