"""Book Manager API client.

A small wrapper around the ``/bookapi`` REST endpoints, making the
same calls the browser frontend makes:

* :meth:`BookApiClient.list_books` – ``GET /bookapi/all``.
* :meth:`BookApiClient.get_book` – ``GET /bookapi/{id}``.
* :meth:`BookApiClient.add_book` – ``POST /bookapi/add``.
* :meth:`BookApiClient.update_book` – ``PUT /bookapi/update/{id}``.
* :meth:`BookApiClient.delete_book` – ``DELETE /bookapi/delete/{id}``.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with ``status_code`` and ``message`` keys.  Note that a
lookup of an unknown id is a success with ``data`` set to ``None``.

The module doubles as a command line tool::

    python book_api_client.py list
    python book_api_client.py get 1
    python book_api_client.py add '{"id": 1, "title": "Dune"}'
    python book_api_client.py update 1 '{"title": "Dune Messiah"}'
    python book_api_client.py delete 1

The base URL defaults to ``BOOK_API_URL`` or ``http://localhost:8080``.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

API_PREFIX = "/bookapi"
DEFAULT_BASE_URL = "http://localhost:8080"

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class BookApiClient:
    """Client for the Book Manager API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request below ``/bookapi``.

        JSON responses are decoded; any other body (the delete
        confirmation) is returned as text.
        """
        url = f"{self.base_url}{API_PREFIX}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                err_json = response.json()
                message = err_json.get("detail") if isinstance(err_json, dict) else None
                message = message or str(err_json)
            except ValueError:
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        content_type = response.headers.get("content-type", "")
        if content_type.startswith("application/json"):
            return response.json(), None
        return response.text, None

    # ------------------------------------------------------------------
    # Book operations
    # ------------------------------------------------------------------
    def list_books(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Dict[str, Any]]]:
        return self._request("GET", "/all")

    def get_book(self, book_id: int) -> Result:
        """Fetch one book; ``(None, None)`` means it does not exist."""
        return self._request("GET", f"/{book_id}")

    def add_book(self, book: Dict[str, Any]) -> Result:
        """Store ``book``, replacing any book that has the same ``id``."""
        return self._request("POST", "/add", json_body=book)

    def update_book(self, book_id: int, book: Dict[str, Any]) -> Result:
        """Overwrite the fields of book ``book_id``.

        Fields missing from ``book`` are cleared on the server, so pass
        the full record.
        """
        return self._request("PUT", f"/update/{book_id}", json_body=book)

    def delete_book(self, book_id: int) -> Result:
        return self._request("DELETE", f"/delete/{book_id}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Command line client for the Book Manager API.")
    ap.add_argument(
        "--url",
        default=os.getenv("BOOK_API_URL", DEFAULT_BASE_URL),
        help="Base URL of the service (default: $BOOK_API_URL or %s)" % DEFAULT_BASE_URL,
    )
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List all books")
    get_p = sub.add_parser("get", help="Show one book")
    get_p.add_argument("id", type=int)
    add_p = sub.add_parser("add", help="Add or replace a book")
    add_p.add_argument("book", help="Book as a JSON object")
    upd_p = sub.add_parser("update", help="Update a book")
    upd_p.add_argument("id", type=int)
    upd_p.add_argument("book", help="New field values as a JSON object")
    del_p = sub.add_parser("delete", help="Delete a book")
    del_p.add_argument("id", type=int)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    client = BookApiClient(base_url=args.url)

    try:
        if args.command == "list":
            data, error = client.list_books()
        elif args.command == "get":
            data, error = client.get_book(args.id)
        elif args.command == "add":
            data, error = client.add_book(json.loads(args.book))
        elif args.command == "update":
            data, error = client.update_book(args.id, json.loads(args.book))
        else:
            data, error = client.delete_book(args.id)
    except json.JSONDecodeError as exc:
        print(f"[!] Invalid JSON: {exc}", file=sys.stderr)
        return 1

    if error:
        print(f"[!] {error['status_code']}: {error['message']}", file=sys.stderr)
        return 2
    if isinstance(data, str):
        print(data)
    else:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
