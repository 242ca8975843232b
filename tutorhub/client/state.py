"""Client-side view state.

All mutation goes through the transition methods on :class:`AppState`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class View(str, enum.Enum):
    LOGIN = "login"
    REGISTER = "register"
    HOME = "home"
    TUTORS = "tutors"
    SESSIONS = "sessions"
    CREATE = "create"
    MY_SESSIONS = "my-sessions"


ANONYMOUS_VIEWS = frozenset({View.LOGIN, View.REGISTER})

VIEWS_BY_ROLE = {
    "student": frozenset({View.HOME, View.TUTORS, View.SESSIONS, View.MY_SESSIONS}),
    "tutor": frozenset({View.HOME, View.CREATE, View.MY_SESSIONS}),
}


@dataclass
class AppState:
    user: Optional[Dict[str, Any]] = None
    token: Optional[str] = None
    view: View = View.LOGIN
    tutors: List[Dict[str, Any]] = field(default_factory=list)
    sessions: List[Dict[str, Any]] = field(default_factory=list)
    my_sessions: List[Dict[str, Any]] = field(default_factory=list)
    form: Dict[str, Any] = field(default_factory=dict)
    notice: Optional[str] = None

    @property
    def role(self) -> Optional[str]:
        return self.user.get("role") if self.user else None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def allowed_views(self) -> frozenset:
        if not self.is_authenticated:
            return ANONYMOUS_VIEWS
        return VIEWS_BY_ROLE.get(self.role, frozenset({View.HOME}))

    # ----------------------------------------------------------------
    # Transitions
    # ----------------------------------------------------------------
    def login_succeeded(self, user: Dict[str, Any], token: str) -> None:
        self.user = user
        self.token = token
        self.view = View.HOME
        self.form = {}
        self.notice = None

    def token_restored(self, token: str) -> None:
        self.token = token

    def user_loaded(self, user: Dict[str, Any]) -> None:
        self.user = user
        self.view = View.HOME

    def logout(self) -> None:
        self.user = None
        self.token = None
        self.view = View.LOGIN
        self.tutors = []
        self.sessions = []
        self.my_sessions = []
        self.form = {}

    def navigate(self, view: View) -> None:
        view = View(view)
        if view not in self.allowed_views():
            raise ValueError(f"View {view.value!r} is not available for this user")
        self.view = view

    def update_form(self, **values: Any) -> None:
        self.form = {**self.form, **values}

    def clear_form(self) -> None:
        self.form = {}

    def tutors_loaded(self, tutors: List[Dict[str, Any]]) -> None:
        self.tutors = list(tutors)

    def sessions_loaded(self, sessions: List[Dict[str, Any]]) -> None:
        self.sessions = list(sessions)

    def my_sessions_loaded(self, sessions: List[Dict[str, Any]]) -> None:
        self.my_sessions = list(sessions)

    def report(self, message: Optional[str]) -> None:
        self.notice = message
