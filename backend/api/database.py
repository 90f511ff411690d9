"""
In-memory database for the service.

The store lives on ``app.state`` and is handed to route handlers through
FastAPI dependencies rather than referenced as a module global.
"""
from fastapi import Request

from repositories import BooksRepository


def get_books_repo(request: Request) -> BooksRepository:
    """FastAPI dependency returning the app's book store."""
    return request.app.state.books_repo
