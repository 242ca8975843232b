# tutorhub/schemas/__init__.py

# User schemas
from .user import UserPublic, UserName

# Auth schemas
from .auth import RegisterRequest, LoginRequest, AuthResponse, TokenData

# Session schemas
from .session import SessionCreate, SessionOut, SessionDetail

# Review schemas
from .review import ReviewCreate, ReviewOut, ReviewListItem, SessionTitle

__all__ = [
    "UserPublic",
    "UserName",
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "TokenData",
    "SessionCreate",
    "SessionOut",
    "SessionDetail",
    "ReviewCreate",
    "ReviewOut",
    "ReviewListItem",
    "SessionTitle",
]
