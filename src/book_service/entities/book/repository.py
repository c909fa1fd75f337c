"""Data-access layer for books."""

from datetime import UTC, datetime
from typing import Any

from sqlmodel import Session, col, or_, select

from .entity import UPDATABLE_FIELDS, Book, BookCreate
from .table import BookTable


class BookRepository:
    """Data-access layer for books, bound to a single session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: BookTable) -> Book:
        return Book.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Book]:
        statement = select(BookTable).order_by(col(BookTable.title).asc())
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def get(self, book_id: str) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return self._to_entity(row)

    def exists(self, book_id: str) -> bool:
        statement = select(BookTable.id).where(BookTable.id == book_id)
        return self._session.exec(statement).first() is not None

    def create(self, data: BookCreate) -> Book | None:
        row = BookTable(
            title=data.title,
            author=data.author,
            published_date=data.published_date,
            isbn=data.isbn,
        )
        self._session.add(row)
        self._session.flush()
        if row.id is None:
            return None
        self._session.refresh(row)
        return self._to_entity(row)

    def update_fields(self, book_id: str, fields: dict[str, Any]) -> Book | None:
        """Apply ``fields`` to the row and refresh ``updated_at``.

        Keys outside UPDATABLE_FIELDS are rejected so column names can never
        come from caller input.
        """
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Fields not updatable: {sorted(unknown)}")

        row = self._session.get(BookTable, book_id)
        if row is None:
            return None

        for name in UPDATABLE_FIELDS:
            if name in fields:
                setattr(row, name, fields[name])
        row.updated_at = datetime.now(UTC)

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, book_id: str) -> bool:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def search(self, query: str) -> list[Book]:
        """Case-insensitive substring match on title or author.

        ``query`` is embedded in the LIKE pattern as-is, so ``%`` and ``_``
        keep their wildcard meaning.
        """
        pattern = f"%{query}%"
        statement = (
            select(BookTable)
            .where(
                or_(
                    col(BookTable.title).ilike(pattern),
                    col(BookTable.author).ilike(pattern),
                )
            )
            .order_by(col(BookTable.title).asc())
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]
