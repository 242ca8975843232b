"""Controller tying the API client, view state and token storage together.

Each user action maps to one method. Server errors never escape: their text
is stored verbatim in ``state.notice`` and the method returns ``False``.
When the server cannot be reached the action's fallback message is shown.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .api import TRANSPORT_ERROR, ApiError, TutorHubClient
from .state import AppState, View
from .token_store import TokenStore


logger = logging.getLogger(__name__)


class TutorHubApp:
    def __init__(
        self,
        client: Optional[TutorHubClient] = None,
        store: Optional[TokenStore] = None,
        state: Optional[AppState] = None,
    ):
        self.client = client or TutorHubClient()
        self.store = store or TokenStore()
        self.state = state or AppState()

    def _fail(self, exc: ApiError, fallback: str) -> bool:
        # No response at all: show the action's own message
        if exc.kind == TRANSPORT_ERROR:
            self.state.report(fallback)
        else:
            self.state.report(exc.message or fallback)
        return False

    # ------------------------------------------------------------------
    # Startup / auth
    # ------------------------------------------------------------------
    def start(self) -> bool:
        """Restore a persisted token and load the user it belongs to."""
        token = self.store.load()
        if not token:
            return False
        self.client.token = token
        self.state.token_restored(token)
        try:
            user = self.client.me()
        except ApiError as exc:
            if exc.kind == TRANSPORT_ERROR:
                # Server down; the token may still be good
                return self._fail(exc, "Could not reach server")
            logger.info("Stored token rejected (%s); clearing it", exc.status_code)
            self.store.clear()
            self.client.token = None
            self.state.logout()
            return False
        self.state.user_loaded(user)
        return True

    def _signed_in(self, data: dict) -> None:
        self.store.save(data["token"])
        self.state.login_succeeded(data["user"], data["token"])

    def register(self, **fields: Any) -> bool:
        form = {**self.state.form, **fields}
        try:
            data = self.client.register(
                name=form.get("name"),
                email=form.get("email"),
                password=form.get("password"),
                role=form.get("role"),
                subjects=form.get("subjects"),
                bio=form.get("bio"),
            )
        except ApiError as exc:
            return self._fail(exc, "Registration failed")
        self._signed_in(data)
        return True

    def login(self, email: Optional[str] = None, password: Optional[str] = None) -> bool:
        email = email if email is not None else self.state.form.get("email")
        password = password if password is not None else self.state.form.get("password")
        try:
            data = self.client.login(email, password)
        except ApiError as exc:
            return self._fail(exc, "Login failed")
        self._signed_in(data)
        return True

    def logout(self) -> None:
        self.store.clear()
        self.client.token = None
        self.state.logout()

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def show(self, view: View) -> bool:
        """Switch view and fetch whatever list that view displays."""
        self.state.navigate(view)
        view = self.state.view
        try:
            if view == View.TUTORS:
                self.state.tutors_loaded(self.client.list_tutors())
            elif view == View.SESSIONS:
                self.state.sessions_loaded(self.client.list_sessions())
            elif view == View.MY_SESSIONS:
                self.state.my_sessions_loaded(self.client.my_sessions())
        except ApiError as exc:
            return self._fail(exc, "Failed to load data")
        return True

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def create_session(self, **fields: Any) -> bool:
        form = {**self.state.form, **fields}
        try:
            self.client.create_session(**form)
        except ApiError as exc:
            return self._fail(exc, "Failed to create session")
        self.state.clear_form()
        self.state.report("Session created!")
        return self._refresh_my_sessions()

    def book_session(self, session_id: str) -> bool:
        try:
            self.client.book_session(session_id)
        except ApiError as exc:
            return self._fail(exc, "Failed to book session")
        self.state.report("Session booked!")
        try:
            self.state.sessions_loaded(self.client.list_sessions())
        except ApiError as exc:
            return self._fail(exc, "Failed to load data")
        return self._refresh_my_sessions()

    def submit_review(self, session_id: str, rating: int, comment: Optional[str] = None) -> bool:
        try:
            self.client.submit_review(session_id, rating, comment)
        except ApiError as exc:
            return self._fail(exc, "Failed to submit review")
        self.state.report("Review submitted!")
        return True

    def _refresh_my_sessions(self) -> bool:
        try:
            self.state.my_sessions_loaded(self.client.my_sessions())
        except ApiError as exc:
            return self._fail(exc, "Failed to load data")
        return True
