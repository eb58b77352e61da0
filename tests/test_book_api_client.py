"""Tests for the requests based API client and its command line."""

import json
from unittest.mock import Mock

import pytest
import requests

import book_api_client
from book_api_client import BookApiClient


@pytest.fixture
def api(client):
    # TestClient speaks the same request() interface as requests.Session.
    return BookApiClient(base_url="http://testserver/", session=client)


class TestBookApiClient:
    def test_base_url_is_normalised(self, api):
        assert api.base_url == "http://testserver"

    def test_crud_cycle(self, api, sample_book):
        data, error = api.list_books()
        assert (data, error) == ([], None)

        data, error = api.add_book(sample_book)
        assert error is None
        assert data == sample_book

        data, error = api.update_book(1, dict(sample_book, title="Updated"))
        assert error is None
        assert data["title"] == "Updated"

        data, error = api.get_book(1)
        assert data == dict(sample_book, title="Updated")

        data, error = api.delete_book(1)
        assert (data, error) == ("Book deleted with id 1", None)

        assert api.get_book(1) == (None, None)

    def test_http_error_is_reported(self, api):
        data, error = api.get_book("abc")
        assert data is None
        assert error["status_code"] == 400
        assert error["message"]

    def test_transport_error_is_reported(self):
        session = Mock()
        session.request.side_effect = requests.ConnectionError("connection refused")
        api = BookApiClient(base_url="http://localhost:1", session=session)

        data, error = api.list_books()

        assert data is None
        assert error == {"status_code": None, "message": "connection refused"}
        session.request.assert_called_once_with(
            method="GET",
            url="http://localhost:1/bookapi/all",
            json=None,
            timeout=15,
        )


class TestCommandLine:
    @pytest.fixture
    def patched_session(self, client, monkeypatch):
        monkeypatch.setattr(book_api_client.requests, "Session", lambda: client)

    def test_add_and_list(self, patched_session, sample_book, capsys):
        assert book_api_client.main(["--url", "http://testserver", "add", json.dumps(sample_book)]) == 0
        capsys.readouterr()

        assert book_api_client.main(["--url", "http://testserver", "list"]) == 0
        assert json.loads(capsys.readouterr().out) == [sample_book]

    def test_delete_prints_confirmation(self, patched_session, capsys):
        assert book_api_client.main(["--url", "http://testserver", "delete", "3"]) == 0
        assert capsys.readouterr().out.strip() == "Book deleted with id 3"

    def test_invalid_json_argument(self, patched_session, capsys):
        assert book_api_client.main(["--url", "http://testserver", "add", "{oops"]) == 1
        assert "Invalid JSON" in capsys.readouterr().err

    def test_server_error_exit_code(self, patched_session, capsys):
        assert book_api_client.main(["--url", "http://testserver", "update", "1", '{"year": "x"}']) == 2
        assert "400" in capsys.readouterr().err
