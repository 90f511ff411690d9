import threading

from domain.models import SEED_BOOKS, Book
from repositories import BooksRepository


def test_seeded_with_three_books_in_order():
    repo = BooksRepository()
    books = repo.list_books()
    assert [b.id for b in books] == [1, 2, 3]
    assert books[0] == Book(id=1, title="The Great Gatsby", author="F. Scott Fitzgerald")
    assert repo.count() == 3


def test_seed_is_copied_not_shared():
    repo = BooksRepository()
    repo.update_book(1, title="Changed")
    assert SEED_BOOKS[0].title == "The Great Gatsby"
    assert BooksRepository().get_book(1).title == "The Great Gatsby"


def test_returned_books_are_copies():
    repo = BooksRepository()
    book = repo.get_book(2)
    book.title = "Mutated outside"
    assert repo.get_book(2).title == "To Kill a Mockingbird"


def test_next_id_is_max_plus_one():
    repo = BooksRepository(seed=[Book(id=7, title="a", author="b"), Book(id=3, title="c", author="d")])
    assert repo.next_id() == 8
    assert repo.create_book("Dune", "Frank Herbert").id == 8


def test_empty_store_restarts_from_one():
    repo = BooksRepository(seed=[])
    assert repo.next_id() == 1
    created = repo.create_book("Dune", "Frank Herbert")
    assert created.id == 1
    repo.delete_book(1)
    assert repo.create_book("Emma", "Jane Austen").id == 1


def test_ids_not_reused_after_deleting_non_max():
    repo = BooksRepository()
    repo.delete_book(2)
    assert repo.create_book("Dune", "Frank Herbert").id == 4


def test_update_only_applies_truthy_fields():
    repo = BooksRepository()
    updated = repo.update_book(3, title="Nineteen Eighty-Four", author="")
    assert updated == Book(id=3, title="Nineteen Eighty-Four", author="George Orwell")

    unchanged = repo.update_book(3)
    assert unchanged == updated


def test_update_missing_returns_none():
    assert BooksRepository().update_book(99, title="x") is None


def test_delete_removes_exactly_one_and_keeps_order():
    repo = BooksRepository()
    deleted = repo.delete_book(2)
    assert deleted == Book(id=2, title="To Kill a Mockingbird", author="Harper Lee")
    assert [b.id for b in repo.list_books()] == [1, 3]
    assert repo.delete_book(2) is None
    assert repo.count() == 2


def test_concurrent_creates_get_unique_ids():
    repo = BooksRepository(seed=[])

    def worker():
        for i in range(25):
            repo.create_book(f"title {i}", "author")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [b.id for b in repo.list_books()]
    assert len(ids) == 200
    assert sorted(ids) == list(range(1, 201))
