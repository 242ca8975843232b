from typing import List, Optional

from tutorhub.models.user import Role
from tutorhub.schemas.base import CamelModel, UtcDateTime


# ======================
# PUBLIC PROFILE (never carries the password hash)
# ======================

class UserPublic(CamelModel):
    id: str
    name: str
    email: str
    role: Role
    subjects: List[str] = []
    bio: Optional[str] = None
    rating: float = 0.0
    total_reviews: int = 0
    created_at: UtcDateTime


class UserName(CamelModel):
    """Minimal disclosure used in review listings."""
    id: str
    name: str
