# tutorhub/schemas/review.py
"""
Review request/response models.
"""

from typing import Optional

from pydantic import Field, field_validator

from tutorhub.schemas.base import CamelModel, UtcDateTime
from tutorhub.schemas.user import UserName


# ======================
# REVIEW SCHEMAS
# ======================

class ReviewCreate(CamelModel):
    session_id: str = Field(..., min_length=1, description="Session identifier")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5 stars")
    comment: Optional[str] = Field(None, max_length=1000, description="Review comment (max 1000 chars)")

    @field_validator("comment")
    @classmethod
    def blank_comment_is_none(cls, v):
        if v is None or not v.strip():
            return None
        return v.strip()


class ReviewOut(CamelModel):
    id: str
    session_id: str
    tutor_id: str
    student_id: str
    rating: int
    comment: Optional[str] = None
    created_at: UtcDateTime


class SessionTitle(CamelModel):
    id: str
    title: str


class ReviewListItem(CamelModel):
    """Public listing entry: student name and session title only."""
    id: str
    tutor_id: str
    rating: int
    comment: Optional[str] = None
    created_at: UtcDateTime
    student: UserName
    session: SessionTitle
