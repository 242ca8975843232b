# tutorhub/models/__init__.py
# Import models in dependency order
from .user import User, Role
from .session import Session, SessionStatus
from .review import Review

__all__ = ["User", "Role", "Session", "SessionStatus", "Review"]
