# tutorhub/errors.py
"""
Error taxonomy shared by the service layer and the HTTP layer.

Services raise these; ``tutorhub.main`` turns them into
``{"error": <message>, "kind": <kind>}`` responses.
"""

from typing import Dict, Optional


class TutorHubError(Exception):
    """Base class for every client-visible failure."""

    status_code: int = 400
    kind: str = "Error"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.headers = headers

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.message, "kind": self.kind}


class ValidationError(TutorHubError):
    """Malformed or missing input, duplicate unique field, out-of-range value."""

    kind = "ValidationError"


class AuthError(TutorHubError):
    """Bad credentials, or a missing/invalid/expired token."""

    kind = "AuthError"


class AuthorizationError(TutorHubError):
    """Authenticated, but the caller's role may not perform the operation."""

    kind = "AuthorizationError"


class ConflictError(TutorHubError):
    """Target is in a state incompatible with the requested transition."""

    kind = "ConflictError"


class NotFoundError(TutorHubError):
    kind = "NotFoundError"


class StoreError(TutorHubError):
    kind = "StoreError"


def unauthenticated(message: str = "Please authenticate") -> AuthError:
    """AuthError for the token check: HTTP 401 with a bearer challenge."""
    return AuthError(
        message,
        status_code=401,
        headers={"WWW-Authenticate": "Bearer"},
    )
