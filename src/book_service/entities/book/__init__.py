"""Book entity module.

This module contains all Book-related classes organized by responsibility:
- Book, BookCreate, BookUpdate: Domain entity and request payloads
- BookTable: Database persistence model
- BookRepository: Data access layer
"""

from .entity import UPDATABLE_FIELDS, Book, BookCreate, BookUpdate
from .repository import BookRepository
from .table import BookTable

__all__ = [
    "Book",
    "BookCreate",
    "BookUpdate",
    "BookRepository",
    "BookTable",
    "UPDATABLE_FIELDS",
]
