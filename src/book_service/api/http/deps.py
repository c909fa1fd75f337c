"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from src.book_service.api.http.app_data import ApplicationDependencies
from src.book_service.core.services import BookRecordService, DbSessionService


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies built at application startup."""
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    return get_app_dependencies(request).database_service


def get_book_service(request: Request) -> BookRecordService:
    """Get the book record service instance."""
    return get_app_dependencies(request).book_service
