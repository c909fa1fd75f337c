"""Entity: Book."""

from datetime import date
from typing import Any

from pydantic import Field

from src.book_service.entities._base import ApiModel, Entity

# Columns a client may change; the update statement is built from this list only
UPDATABLE_FIELDS: tuple[str, ...] = ("title", "author", "published_date", "isbn")


class Book(Entity):
    """Book entity representing a bibliographic record.

    Serialized with camelCase keys (``publishedDate``, ``createdAt``...).
    """

    title: str = Field(description="Title of the book")
    author: str = Field(description="Author of the book")
    published_date: date | None = Field(default=None, description="Publication date")
    isbn: str | None = Field(default=None, description="ISBN, unique when present")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
            and self.published_date == other.published_date
            and self.isbn == other.isbn
        )


class BookCreate(ApiModel):
    """Payload for creating a book."""

    title: str
    author: str
    published_date: date | None = None
    isbn: str | None = None


class BookUpdate(ApiModel):
    """Payload for a partial update.

    A field left out of the payload is untouched; a field sent as ``null``
    clears the column. Presence is read from ``model_fields_set``.
    """

    title: str | None = None
    author: str | None = None
    published_date: date | None = None
    isbn: str | None = None

    def provided_fields(self) -> dict[str, Any]:
        """Return the explicitly supplied fields, restricted to UPDATABLE_FIELDS."""
        return {
            name: getattr(self, name)
            for name in UPDATABLE_FIELDS
            if name in self.model_fields_set
        }
