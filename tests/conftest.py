"""Shared fixtures: a fresh SQLite database per test and a test client."""

import pytest
from fastapi.testclient import TestClient

from book_manager_api.app.core.config import settings
from book_manager_api.app.core.db import init_db
from book_manager_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the app at an empty database file inside ``tmp_path``."""
    path = tmp_path / "books.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    """Test client with startup events run against ``db_path``."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_book():
    return {
        "id": 1,
        "title": "A",
        "author": "X",
        "publisher": "P",
        "year": 2020,
        "genre": "G",
    }
