"""Schema management for the book table."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from src.book_service.entities.book import BookTable  # noqa: F401  (registers the table)


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables that do not exist yet."""
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop every table registered on the metadata."""
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Database tables dropped.")
