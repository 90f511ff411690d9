from unittest.mock import MagicMock

import requests
from fastapi.testclient import TestClient

from api.main import create_app
from repositories import BooksRepository
from scripts import smoke_books_api


def test_smoke_run_against_in_process_app(capsys):
    repo = BooksRepository()
    client = TestClient(create_app(repo))

    smoke_books_api.run_smoke("http://testserver", session=client)

    out = capsys.readouterr().out
    assert "1. Testing GET /books - Get all books" in out
    assert "4. Testing PUT /books/4 - Update book" in out
    assert "5. Testing DELETE /books/4 - Delete book" in out
    assert '"title": "Updated Pride and Prejudice"' in out
    assert out.count("Status: 200") == 4
    assert "Status: 201" in out
    assert "Status: 404" in out
    assert "Status: 400" in out
    assert out.rstrip().endswith("All smoke steps completed!")
    # created book was deleted again
    assert [b.id for b in repo.list_books()] == [1, 2, 3]


def test_make_request_falls_back_to_text():
    resp = MagicMock()
    resp.status_code = 404
    resp.json.side_effect = ValueError("not json")
    resp.text = "Not Found"
    session = MagicMock()
    session.request.return_value = resp

    status, body = smoke_books_api.make_request(session, "http://x", "GET", "/nope")

    assert (status, body) == (404, "Not Found")
    session.request.assert_called_once_with("GET", "http://x/nope", json=None, timeout=10)


def test_smoke_run_continues_when_server_is_down(capsys):
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("connection refused")

    smoke_books_api.run_smoke("http://localhost:1", session=session)

    out = capsys.readouterr().out
    # list, get, create, and the two error-path checks; update/delete skipped without an id
    assert out.count("Error: connection refused") == 5
    assert "4. Testing PUT" not in out
    assert "All smoke steps completed!" in out


def test_main_uses_base_url_argument(monkeypatch):
    calls = []
    monkeypatch.setattr(smoke_books_api, "run_smoke", lambda base_url: calls.append(base_url))
    smoke_books_api.main(["--base-url", "http://example.test:8080/"])
    assert calls == ["http://example.test:8080"]
