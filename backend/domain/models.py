"""
Core domain models for the books service.
These are framework-agnostic and shared by the store and the API layer.
"""
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List


@dataclass
class Book:
    """A single book record. ``id`` is always assigned by the store."""
    id: int
    title: str
    author: str

    def copy(self) -> "Book":
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Records present at process start
SEED_BOOKS: List[Book] = [
    Book(id=1, title="The Great Gatsby", author="F. Scott Fitzgerald"),
    Book(id=2, title="To Kill a Mockingbird", author="Harper Lee"),
    Book(id=3, title="1984", author="George Orwell"),
]
