from typing import Optional

from pydantic import Field, field_validator

from tutorhub.models.session import SessionStatus
from tutorhub.schemas.base import CamelModel, UtcDateTime
from tutorhub.schemas.user import UserPublic


# ======================
# SESSION REQUEST MODELS
# ======================

class SessionCreate(CamelModel):
    """Tutor-supplied fields. Anything else (status, tutor, student) is ignored."""
    title: str = Field(..., min_length=1, max_length=200)
    subject: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    date: UtcDateTime
    duration: int = Field(..., gt=0, description="Length in minutes")

    @field_validator("title", "subject")
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("Field cannot be blank")
        return v.strip()


# ======================
# SESSION RESPONSE MODELS
# ======================

class SessionOut(CamelModel):
    id: str
    title: str
    subject: str
    description: Optional[str] = None
    tutor_id: str
    student_id: Optional[str] = None
    date: UtcDateTime
    duration: int
    status: SessionStatus
    created_at: UtcDateTime


class SessionDetail(SessionOut):
    """Session with its tutor/student references resolved to public profiles."""
    tutor: UserPublic
    student: Optional[UserPublic] = None
