from dataclasses import dataclass

from src.book_service.core.services import BookRecordService, DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    book_service: BookRecordService
