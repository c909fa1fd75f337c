"""Tests for the Book entity, table model and repository.

The repository tests run against an in-memory SQLite database.
"""

from datetime import date
from uuid import UUID

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from src.book_service.entities.book import (
    UPDATABLE_FIELDS,
    Book,
    BookCreate,
    BookRepository,
    BookTable,
    BookUpdate,
)


class TestBookEntity:
    """Test Book domain entity."""

    def test_book_creation_with_defaults(self):
        """Book should be created with auto-generated UUID and timestamps."""
        book = Book(title="Dune", author="Frank Herbert")

        UUID(book.id)  # Raises ValueError if invalid
        assert book.published_date is None
        assert book.isbn is None
        assert book.created_at is not None
        assert book.updated_at is not None

    def test_book_serializes_with_camel_case_keys(self):
        book = Book(
            title="Dune",
            author="Frank Herbert",
            published_date=date(1965, 8, 1),
            isbn="9780441013593",
        )

        data = book.model_dump(by_alias=True, mode="json")

        assert data["publishedDate"] == "1965-08-01"
        assert "createdAt" in data
        assert "updatedAt" in data
        assert "published_date" not in data

    def test_book_accepts_camel_case_and_snake_case_input(self):
        camel = Book.model_validate(
            {"id": "1", "title": "T", "author": "A", "publishedDate": "2023-01-01"}
        )
        snake = Book(id="1", title="T", author="A", published_date=date(2023, 1, 1))

        assert camel == snake

    def test_book_equality_ignores_timestamps(self):
        """Should compare books by their business attributes."""
        book1 = Book(id="1", title="Dune", author="Frank Herbert", isbn="1")
        book2 = Book(id="1", title="Dune", author="Frank Herbert", isbn="1")
        book3 = Book(id="2", title="Emma", author="Jane Austen")

        assert book1 == book2
        assert book1 != book3


class TestBookUpdate:
    """Test presence tracking on the partial update payload."""

    def test_omitted_fields_are_not_provided(self):
        update = BookUpdate(author="C")

        assert update.provided_fields() == {"author": "C"}

    def test_explicit_null_is_provided(self):
        update = BookUpdate.model_validate({"isbn": None})

        assert update.provided_fields() == {"isbn": None}

    def test_empty_payload_provides_nothing(self):
        assert BookUpdate().provided_fields() == {}

    def test_camel_case_field_is_tracked_by_name(self):
        update = BookUpdate.model_validate({"publishedDate": "2020-02-02"})

        assert update.provided_fields() == {"published_date": date(2020, 2, 2)}

    def test_only_allow_listed_fields_are_updatable(self):
        assert set(UPDATABLE_FIELDS) == {"title", "author", "published_date", "isbn"}


class TestBookTable:
    """Test BookTable persistence."""

    def test_table_name(self):
        assert BookTable.__tablename__ == "book"

    def test_table_persists_and_generates_id(self, session: Session):
        row = BookTable(title="Dune", author="Frank Herbert")
        session.add(row)
        session.commit()

        stored = session.exec(select(BookTable)).one()
        assert stored.id == row.id
        UUID(stored.id)
        assert stored.created_at is not None
        assert stored.updated_at is not None

    def test_isbn_is_unique(self, session: Session):
        session.add(BookTable(title="A", author="B", isbn="123"))
        session.commit()

        session.add(BookTable(title="C", author="D", isbn="123"))
        with pytest.raises(IntegrityError):
            session.commit()

    def test_null_isbn_is_not_unique(self, session: Session):
        session.add(BookTable(title="A", author="B"))
        session.add(BookTable(title="C", author="D"))
        session.commit()

        assert len(session.exec(select(BookTable)).all()) == 2


class TestBookRepository:
    """Test BookRepository against a real database session."""

    def test_create_and_get(self, session: Session):
        repository = BookRepository(session)

        created = repository.create(
            BookCreate(title="Dune", author="Frank Herbert", isbn="42")
        )
        assert created is not None

        fetched = repository.get(created.id)
        assert fetched == created

    def test_get_missing_returns_none(self, session: Session):
        assert BookRepository(session).get("missing") is None

    def test_exists(self, session: Session):
        repository = BookRepository(session)
        created = repository.create(BookCreate(title="T", author="A"))

        assert repository.exists(created.id) is True
        assert repository.exists("missing") is False

    def test_list_all_sorted_by_title(self, session: Session):
        repository = BookRepository(session)
        for title in ["b", "C", "a", "B"]:
            repository.create(BookCreate(title=title, author="x"))

        titles = [book.title for book in repository.list_all()]

        # Binary collation: uppercase sorts before lowercase
        assert titles == ["B", "C", "a", "b"]

    def test_update_fields_changes_only_given_columns(self, session: Session):
        repository = BookRepository(session)
        created = repository.create(
            BookCreate(
                title="A", author="B", published_date=date(2023, 1, 1), isbn="123"
            )
        )

        updated = repository.update_fields(created.id, {"author": "C"})

        assert updated is not None
        assert updated.title == "A"
        assert updated.author == "C"
        assert updated.published_date == date(2023, 1, 1)
        assert updated.isbn == "123"

    def test_update_fields_rejects_unknown_columns(self, session: Session):
        repository = BookRepository(session)
        created = repository.create(BookCreate(title="A", author="B"))

        with pytest.raises(ValueError, match="not updatable"):
            repository.update_fields(created.id, {"id": "other"})

    def test_update_fields_missing_returns_none(self, session: Session):
        assert BookRepository(session).update_fields("missing", {"title": "x"}) is None

    def test_delete(self, session: Session):
        repository = BookRepository(session)
        created = repository.create(BookCreate(title="A", author="B"))

        assert repository.delete(created.id) is True
        assert repository.get(created.id) is None
        assert repository.delete(created.id) is False

    def test_search_matches_title_or_author_case_insensitively(self, session: Session):
        repository = BookRepository(session)
        repository.create(BookCreate(title="Zeta by author x", author="Nobody"))
        repository.create(BookCreate(title="Alpha", author="AUTHOR X"))
        repository.create(BookCreate(title="Other", author="Someone"))

        results = repository.search("Author X")

        assert [book.title for book in results] == ["Alpha", "Zeta by author x"]

    def test_search_does_not_escape_wildcards(self, session: Session):
        repository = BookRepository(session)
        repository.create(BookCreate(title="abc", author="x"))

        assert [book.title for book in repository.search("a_c")] == ["abc"]
        assert [book.title for book in repository.search("%")] == ["abc"]
