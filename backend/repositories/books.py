"""
Book repository backed by an in-memory, ordered list.
"""
import threading
from typing import Iterable, List, Optional

from domain.models import SEED_BOOKS, Book


class BooksRepository:
    """CRUD operations for books.

    Each method holds the lock for its entire read-or-mutate sequence and hands
    back copies, so concurrent requests see every operation as atomic.
    """

    def __init__(self, seed: Optional[Iterable[Book]] = None) -> None:
        source = SEED_BOOKS if seed is None else seed
        self._books: List[Book] = [b.copy() for b in source]
        self._lock = threading.RLock()

    def _find_index(self, book_id: int) -> int:
        for idx, book in enumerate(self._books):
            if book.id == book_id:
                return idx
        return -1

    def list_books(self) -> List[Book]:
        with self._lock:
            return [b.copy() for b in self._books]

    def count(self) -> int:
        with self._lock:
            return len(self._books)

    def get_book(self, book_id: int) -> Optional[Book]:
        with self._lock:
            idx = self._find_index(book_id)
            if idx == -1:
                return None
            return self._books[idx].copy()

    def next_id(self) -> int:
        with self._lock:
            if not self._books:
                return 1
            return max(b.id for b in self._books) + 1

    def create_book(self, title: str, author: str) -> Book:
        with self._lock:
            book = Book(id=self.next_id(), title=title, author=author)
            self._books.append(book)
            return book.copy()

    def update_book(
        self,
        book_id: int,
        title: Optional[str] = None,
        author: Optional[str] = None,
    ) -> Optional[Book]:
        """Overwrite only the fields given a truthy value; falsy ones are left alone."""
        with self._lock:
            idx = self._find_index(book_id)
            if idx == -1:
                return None
            book = self._books[idx]
            if title:
                book.title = title
            if author:
                book.author = author
            return book.copy()

    def delete_book(self, book_id: int) -> Optional[Book]:
        with self._lock:
            idx = self._find_index(book_id)
            if idx == -1:
                return None
            return self._books.pop(idx)
