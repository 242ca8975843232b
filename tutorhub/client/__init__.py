"""Python client for the TutorHub API: HTTP wrapper, view state and token storage."""

from .api import ApiError, TutorHubClient
from .app import TutorHubApp
from .state import AppState, View
from .token_store import TokenStore

__all__ = [
    "ApiError",
    "TutorHubClient",
    "TutorHubApp",
    "AppState",
    "View",
    "TokenStore",
]
