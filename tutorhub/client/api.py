"""HTTP wrapper around the TutorHub REST API.

Every call attaches the bearer token when one is held. Non-2xx responses
raise :class:`ApiError` carrying the server's ``error`` text unchanged so the
caller can show it to the user as-is. Connection failures raise it too, with
kind ``TransportError`` and status 0.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000/api"
TRANSPORT_ERROR = "TransportError"


class ApiError(Exception):
    """Server-reported failure.

    Attributes:
        message: The server's error text, verbatim.
        status_code: HTTP status of the response, 0 when none arrived.
        kind: Error kind reported by the server (``ValidationError`` etc.).
    """

    def __init__(self, message: str, status_code: int, kind: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.kind = kind


class TutorHubClient:
    """Thin, stateless-apart-from-token client.

    ``session`` may be any object with a ``requests.Session``-compatible
    ``request`` method (tests pass FastAPI's ``TestClient``).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: Optional[str] = None,
        session: Optional[Any] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, method: str, path: str, json_body: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(
                method,
                url,
                json=json_body,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(f"Could not reach server: {exc}", 0, TRANSPORT_ERROR) from exc
        try:
            body = resp.json()
        except ValueError:
            body = None

        if resp.status_code >= 400:
            if isinstance(body, dict) and body.get("error"):
                raise ApiError(body["error"], resp.status_code, body.get("kind"))
            raise ApiError(f"Request failed with status {resp.status_code}", resp.status_code)
        return body

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------
    def register(
        self,
        name: str,
        email: str,
        password: str,
        role: str,
        subjects: Optional[List[str]] = None,
        bio: Optional[str] = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": name,
            "email": email,
            "password": password,
            "role": role,
        }
        if subjects is not None:
            payload["subjects"] = subjects
        if bio is not None:
            payload["bio"] = bio
        data = self._request("POST", "/register", payload)
        self.token = data["token"]
        return data

    def login(self, email: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", "/login", {"email": email, "password": password})
        self.token = data["token"]
        return data

    def me(self) -> Dict[str, Any]:
        return self._request("GET", "/me")

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    def list_tutors(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/tutors")

    def list_sessions(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/sessions")

    def my_sessions(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/my-sessions")

    def create_session(self, **fields: Any) -> Dict[str, Any]:
        payload = {
            key: value.isoformat() if isinstance(value, datetime) else value
            for key, value in fields.items()
        }
        return self._request("POST", "/sessions", payload)

    def book_session(self, session_id: str) -> Dict[str, Any]:
        return self._request("POST", f"/sessions/{session_id}/book")

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def submit_review(self, session_id: str, rating: int, comment: Optional[str] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"sessionId": session_id, "rating": rating}
        if comment is not None:
            payload["comment"] = comment
        return self._request("POST", "/reviews", payload)

    def tutor_reviews(self, tutor_id: str) -> List[Dict[str, Any]]:
        return self._request("GET", f"/tutors/{tutor_id}/reviews")
