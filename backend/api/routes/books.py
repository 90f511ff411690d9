"""
Books API routes.
"""
import logging
import re
from typing import Any, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, field_validator

from api.database import get_books_repo
from domain.models import Book
from repositories import BooksRepository

router = APIRouter()
logger = logging.getLogger(__name__)

BOOK_NOT_FOUND = "Book not found"
_BOOK_ID_RE = re.compile(r"\s*([+-]?[0-9]+)")


class BookPayload(BaseModel):
    """Request body for create and update. Unknown keys are ignored."""
    title: Optional[str] = None
    author: Optional[str] = None

    @field_validator("title", "author", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Optional[str]:
        # numbers are kept as their text form; other non-string values count as absent
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return None
        return value if isinstance(value, str) else str(value)


class BookSchema(BaseModel):
    id: int
    title: str
    author: str


class BookEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: Optional[BookSchema] = None


class BookListEnvelope(BaseModel):
    success: bool = True
    data: List[BookSchema]
    count: int


def get_book_payload(request: Request) -> BookPayload:
    """Build the payload from the JSON body parsed by the app middleware.

    Bodies that are missing, not sent as JSON, or not a JSON object give an
    empty payload.
    """
    body = getattr(request.state, "json_body", None)
    if not isinstance(body, dict):
        return BookPayload()
    return BookPayload.model_validate(body)


def book_to_schema(book: Book) -> BookSchema:
    """Convert domain Book to API response."""
    return BookSchema(id=book.id, title=book.title, author=book.author)


def parse_book_id(raw: str) -> Optional[int]:
    """Read the leading integer of a path segment ("12abc" -> 12); None when there is none."""
    match = _BOOK_ID_RE.match(raw)
    if not match:
        return None
    return int(match.group(1))


def _not_found(raw_id: str) -> HTTPException:
    logger.debug("book %r not found", raw_id)
    return HTTPException(status_code=404, detail=BOOK_NOT_FOUND)


@router.get("", response_model=BookListEnvelope)
@router.get("/", response_model=BookListEnvelope, include_in_schema=False)
async def list_books(repo: BooksRepository = Depends(get_books_repo)):
    """List all books in insertion order."""
    books = repo.list_books()
    return BookListEnvelope(data=[book_to_schema(b) for b in books], count=len(books))


@router.get("/{book_id}", response_model=BookEnvelope, response_model_exclude_none=True)
@router.get("/{book_id}/", response_model=BookEnvelope, response_model_exclude_none=True, include_in_schema=False)
async def get_book(book_id: str, repo: BooksRepository = Depends(get_books_repo)):
    """Get a book by ID."""
    parsed = parse_book_id(book_id)
    book = repo.get_book(parsed) if parsed is not None else None
    if not book:
        raise _not_found(book_id)
    return BookEnvelope(data=book_to_schema(book))


@router.post("", status_code=201, response_model=BookEnvelope, response_model_exclude_none=True)
@router.post("/", status_code=201, response_model=BookEnvelope, response_model_exclude_none=True, include_in_schema=False)
async def create_book(
    payload: BookPayload = Depends(get_book_payload),
    repo: BooksRepository = Depends(get_books_repo),
):
    """Create a new book; the id is assigned by the store."""
    if not payload.title or not payload.author:
        raise HTTPException(status_code=400, detail="Title and author are required")

    book = repo.create_book(title=payload.title, author=payload.author)
    logger.info("created book %s", book.id)
    return BookEnvelope(message="Book created successfully", data=book_to_schema(book))


@router.put("/{book_id}", response_model=BookEnvelope, response_model_exclude_none=True)
@router.put("/{book_id}/", response_model=BookEnvelope, response_model_exclude_none=True, include_in_schema=False)
async def update_book(
    book_id: str,
    payload: BookPayload = Depends(get_book_payload),
    repo: BooksRepository = Depends(get_books_repo),
):
    """Partially update a book. Empty or missing fields keep their current value."""
    parsed = parse_book_id(book_id)
    book = None
    if parsed is not None:
        book = repo.update_book(parsed, title=payload.title, author=payload.author)
    if not book:
        raise _not_found(book_id)
    logger.info("updated book %s", book.id)
    return BookEnvelope(message="Book updated successfully", data=book_to_schema(book))


@router.delete("/{book_id}", response_model=BookEnvelope, response_model_exclude_none=True)
@router.delete("/{book_id}/", response_model=BookEnvelope, response_model_exclude_none=True, include_in_schema=False)
async def delete_book(book_id: str, repo: BooksRepository = Depends(get_books_repo)):
    """Remove a book and return the deleted record."""
    parsed = parse_book_id(book_id)
    book = repo.delete_book(parsed) if parsed is not None else None
    if not book:
        raise _not_found(book_id)
    logger.info("deleted book %s", book.id)
    return BookEnvelope(message="Book deleted successfully", data=book_to_schema(book))
