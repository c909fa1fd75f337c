"""Book API router with CRUD and search operations."""

from fastapi import APIRouter, Body, Depends, Query
from pydantic import BaseModel

from src.book_service.api.http.deps import get_book_service
from src.book_service.core.services import BookRecordService
from src.book_service.entities.book import Book, BookCreate, BookUpdate

router = APIRouter(prefix="/books", tags=["books"])


class BookResponse(BaseModel):
    book: Book


class BookListResponse(BaseModel):
    books: list[Book]


class DeleteBookResponse(BaseModel):
    success: bool


@router.get("", response_model=BookListResponse)
def list_books(
    service: BookRecordService = Depends(get_book_service),
) -> BookListResponse:
    """List all books ordered by title."""
    return BookListResponse(books=service.list_books())


# Registered before /{book_id} so "search" is not taken for an id
@router.get("/search", response_model=BookListResponse)
def search_books(
    query: str = Query(..., description="Substring matched against title and author"),
    service: BookRecordService = Depends(get_book_service),
) -> BookListResponse:
    """Search books by title or author, case-insensitively."""
    return BookListResponse(books=service.search_books(query))


@router.get("/{book_id}", response_model=BookResponse)
def get_book(
    book_id: str,
    service: BookRecordService = Depends(get_book_service),
) -> BookResponse:
    """Get a book by ID."""
    return BookResponse(book=service.get_book(book_id))


@router.post("", response_model=BookResponse)
def create_book(
    payload: BookCreate,
    service: BookRecordService = Depends(get_book_service),
) -> BookResponse:
    """Create a new book."""
    return BookResponse(book=service.create_book(payload))


@router.put("/{book_id}", response_model=BookResponse)
def update_book(
    book_id: str,
    payload: BookUpdate | None = Body(None),
    service: BookRecordService = Depends(get_book_service),
) -> BookResponse:
    """Update the supplied fields of a book; a missing body supplies no fields."""
    if payload is None:
        payload = BookUpdate()
    return BookResponse(book=service.update_book(book_id, payload))


@router.delete("/{book_id}", response_model=DeleteBookResponse)
def delete_book(
    book_id: str,
    service: BookRecordService = Depends(get_book_service),
) -> DeleteBookResponse:
    """Delete a book."""
    return DeleteBookResponse(success=service.delete_book(book_id))
