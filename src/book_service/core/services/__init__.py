"""Core services exports."""

from .book_service import BookRecordService
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    "BookRecordService",
    "DbManageService",
    "DbSessionService",
]
