"""Exercise every Books API endpoint against a running server.

Usage:
    python -m scripts.smoke_books_api [--base-url http://localhost:3000]

This is a manual smoke test: each step prints the status code and the
response body and the run carries on regardless of the outcome. The automated
assertions live in `backend/tests/`.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Optional, Tuple

import requests

from settings import settings

LOG = logging.getLogger("smoke_books_api")


def make_request(
    session: requests.Session,
    base_url: str,
    method: str,
    path: str,
    data: Optional[dict] = None,
) -> Tuple[int, Any]:
    """Send one request and return (status, parsed JSON or raw text)."""
    resp = session.request(method, f"{base_url}{path}", json=data, timeout=10)
    try:
        body = resp.json()
    except ValueError:
        body = resp.text
    return resp.status_code, body


def _report(status: int, body: Any) -> None:
    print("Status:", status)
    print("Response:", json.dumps(body, indent=2) if not isinstance(body, str) else body)


def _step(session: requests.Session, base_url: str, method: str, path: str, data: Optional[dict] = None) -> Any:
    try:
        status, body = make_request(session, base_url, method, path, data)
    except requests.RequestException as exc:
        print("Error:", exc)
        return None
    _report(status, body)
    return body


def step_get_all_books(session, base_url):
    print("\n1. Testing GET /books - Get all books")
    _step(session, base_url, "GET", "/books")


def step_get_book_by_id(session, base_url):
    print("\n2. Testing GET /books/1 - Get book by ID")
    _step(session, base_url, "GET", "/books/1")


def step_create_book(session, base_url) -> Optional[int]:
    print("\n3. Testing POST /books - Create new book")
    body = _step(
        session,
        base_url,
        "POST",
        "/books",
        {"title": "Pride and Prejudice", "author": "Jane Austen"},
    )
    try:
        return body["data"]["id"]
    except (KeyError, TypeError):
        return None


def step_update_book(session, base_url, book_id: int):
    print(f"\n4. Testing PUT /books/{book_id} - Update book")
    _step(
        session,
        base_url,
        "PUT",
        f"/books/{book_id}",
        {"title": "Updated Pride and Prejudice", "author": "Jane Austen (Updated)"},
    )


def step_delete_book(session, base_url, book_id: int):
    print(f"\n5. Testing DELETE /books/{book_id} - Delete book")
    _step(session, base_url, "DELETE", f"/books/{book_id}")


def step_error_handling(session, base_url):
    print("\n6. Testing Error Handling")

    print("\n   Testing GET /books/999 - Non-existent book")
    _step(session, base_url, "GET", "/books/999")

    print("\n   Testing POST /books - Missing required fields")
    _step(session, base_url, "POST", "/books", {"title": "Incomplete Book"})


def run_smoke(base_url: str, session: Optional[requests.Session] = None) -> None:
    session = session or requests.Session()
    print("Starting Books API smoke run")
    print(f"Make sure the server is running on {base_url}")

    step_get_all_books(session, base_url)
    step_get_book_by_id(session, base_url)

    new_id = step_create_book(session, base_url)
    if new_id:
        step_update_book(session, base_url, new_id)
        step_delete_book(session, base_url, new_id)

    step_error_handling(session, base_url)

    print("\nAll smoke steps completed!")


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--base-url", default=settings.SMOKE_BASE_URL, help="Books API root URL")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    base_url = args.base_url.rstrip("/")
    LOG.info("Running smoke steps against %s", base_url)
    run_smoke(base_url)


if __name__ == "__main__":
    main()
