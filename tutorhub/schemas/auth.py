from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from tutorhub.models.user import Role
from tutorhub.schemas.base import CamelModel
from tutorhub.schemas.user import UserPublic


# ======================
# USER AUTHENTICATION SCHEMAS
# ======================

class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: Role
    subjects: List[str] = []
    bio: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be blank")
        return v.strip()

    @field_validator("subjects")
    @classmethod
    def clean_subjects(cls, v):
        return [s.strip() for s in v if s and s.strip()]


class LoginRequest(CamelModel):
    # Plain str: a malformed address must fail like any unknown one
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthResponse(CamelModel):
    user: UserPublic
    token: str


class TokenData(CamelModel):
    user_id: Optional[str] = None
