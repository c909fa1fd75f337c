"""Book record service: list, get, create, update, delete and search books."""

from loguru import logger
from sqlalchemy.exc import IntegrityError

from src.book_service.core.exceptions import (
    AlreadyExistsError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    is_duplicate_key_error,
)
from src.book_service.core.services.database.db_session import DbSessionService
from src.book_service.entities.book import Book, BookCreate, BookRepository, BookUpdate

DUPLICATE_ISBN_MESSAGE = "A book with this ISBN already exists"


class BookRecordService:
    """Orchestrates book operations over the relational store.

    Every operation runs in its own transaction obtained from the injected
    ``DbSessionService``. Nothing is cached between calls.
    """

    def __init__(self, store: DbSessionService) -> None:
        self._store = store

    def list_books(self) -> list[Book]:
        with self._store.session_scope() as session:
            return BookRepository(session).list_all()

    def get_book(self, book_id: str) -> Book:
        with self._store.session_scope() as session:
            book = BookRepository(session).get(book_id)
        if book is None:
            raise NotFoundError(f"Book with ID {book_id} not found")
        return book

    def create_book(self, data: BookCreate) -> Book:
        try:
            with self._store.session_scope() as session:
                book = BookRepository(session).create(data)
                if book is None:
                    raise InternalError("Failed to create book")
        except IntegrityError as exc:
            if is_duplicate_key_error(exc):
                logger.warning("Rejected book with duplicate ISBN {}", data.isbn)
                raise AlreadyExistsError(DUPLICATE_ISBN_MESSAGE) from exc
            raise

        logger.info("Created book {}", book.id)
        return book

    def update_book(self, book_id: str, data: BookUpdate) -> Book:
        """Apply a partial update.

        The existence check comes first, so an unknown id reports NotFound
        even when the payload is empty.
        """
        fields = data.provided_fields()
        try:
            with self._store.session_scope() as session:
                repository = BookRepository(session)
                if not repository.exists(book_id):
                    raise NotFoundError(f"Book with ID {book_id} not found")
                if not fields:
                    raise InvalidArgumentError("No fields to update were provided")

                book = repository.update_fields(book_id, fields)
                if book is None:
                    raise InternalError("Failed to update book")
        except IntegrityError as exc:
            if is_duplicate_key_error(exc):
                logger.warning("Rejected update of book {} with duplicate ISBN", book_id)
                raise AlreadyExistsError(DUPLICATE_ISBN_MESSAGE) from exc
            raise

        logger.info("Updated book {} fields={}", book_id, sorted(fields))
        return book

    def delete_book(self, book_id: str) -> bool:
        with self._store.session_scope() as session:
            deleted = BookRepository(session).delete(book_id)
        if not deleted:
            raise NotFoundError(f"Book with ID {book_id} not found")

        logger.info("Deleted book {}", book_id)
        return True

    def search_books(self, query: str) -> list[Book]:
        with self._store.session_scope() as session:
            return BookRepository(session).search(query)
