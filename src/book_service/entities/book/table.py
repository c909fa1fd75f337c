"""Book database table model."""

from datetime import date

from sqlmodel import Field

from src.book_service.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the ``book`` table.
    It's separate from the domain entity so the wire format can evolve
    independently of the schema.
    """

    __tablename__ = "book"

    title: str = Field(nullable=False)
    author: str = Field(nullable=False)
    published_date: date | None = Field(default=None)
    isbn: str | None = Field(default=None, unique=True)
