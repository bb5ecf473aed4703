"""Book Swap API client.

A thin wrapper around the eight routes of the Book Swap API, built on
``requests``.  Every method returns a tuple ``(data, error)``: on
success ``data`` is the entity or list of entities taken out of the
response envelope and ``error`` is ``None``; on failure ``data`` is
``None`` and ``error`` is a dictionary with keys ``status_code`` and
``message``.

Example::

    api = BookSwapAPI(base_url="http://localhost:8000")
    user, error = api.create_user(name="Ada", email="ada@example.com")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BookSwapAPI:
    """Client for the Book Swap API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/users``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` with the parsed JSON body or an
            error description.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json(), None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("error", "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _create(self, path: str, key: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("POST", path, json_body=payload)
        if error:
            return None, error
        return data.get(key), None

    def _list(self, path: str, key: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data.get(key, []), None

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def create_user(self, *, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._create("/users", "user", {"name": name, "email": email})

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/users", "users")

    # ------------------------------------------------------------------
    # Books
    # ------------------------------------------------------------------
    def create_book(
        self, *, user_id: str, title: str, author: str, description: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {"userId": user_id, "title": title, "author": author, "description": description}
        return self._create("/books", "book", payload)

    def list_books(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/books", "books")

    # ------------------------------------------------------------------
    # Swap requests
    # ------------------------------------------------------------------
    def create_swap_request(
        self, *, book_id: str, requested_by_id: str, status: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {"bookId": book_id, "requestedById": requested_by_id, "status": status}
        return self._create("/swapRequests", "swapRequest", payload)

    def list_swap_requests(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/swapRequests", "swapRequests")

    # ------------------------------------------------------------------
    # Feedback
    # ------------------------------------------------------------------
    def create_feedback(
        self, *, user_id: str, swap_request_id: str, rating: float, comment: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {
            "userId": user_id,
            "swapRequestId": swap_request_id,
            "rating": rating,
            "comment": comment,
        }
        return self._create("/feedback", "feedback", payload)

    def list_feedback(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/feedback", "feedback")
