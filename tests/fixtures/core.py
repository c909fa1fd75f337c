from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from src.book_service.core.services import BookRecordService, DbSessionService
from src.book_service.entities.book import Book, BookCreate

# All-zero UUID that is never generated for a real row
MISSING_BOOK_ID = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def engine() -> Generator[Engine]:
    """Create a fresh in-memory database per test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from src.book_service.entities.book import BookTable  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a database session for repository-level tests."""
    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def database_service(engine: Engine) -> DbSessionService:
    return DbSessionService(engine=engine)


@pytest.fixture
def book_service(database_service: DbSessionService) -> BookRecordService:
    return BookRecordService(database_service)


@pytest.fixture
def make_book(book_service: BookRecordService) -> Callable[..., Book]:
    """Create a book through the service with sensible defaults."""

    def _make_book(**overrides) -> Book:
        data = {"title": "Test Book", "author": "Test Author"}
        data.update(overrides)
        return book_service.create_book(BookCreate(**data))

    return _make_book


@pytest.fixture
def client(
    database_service: DbSessionService, book_service: BookRecordService
) -> Generator[TestClient]:
    """HTTP client wired to the in-memory database.

    The lifespan is not entered, so startup() does not replace the injected
    dependencies.
    """
    from src.book_service.api.http.app import app
    from src.book_service.api.http.app_data import ApplicationDependencies

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        book_service=book_service,
    )
    try:
        yield TestClient(app)
    finally:
        del app.state.app_dependencies
