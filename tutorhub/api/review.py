# tutorhub/api/review.py
"""
Review API Router

Endpoints:
- POST /reviews - Submit a review for a booked session
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tutorhub import models
from tutorhub.database import get_db
from tutorhub.schemas import ReviewCreate, ReviewOut
from tutorhub.services import review_service
from tutorhub.utils.security import get_current_user

router = APIRouter(prefix="/reviews", tags=["reviews"])


# ======================
# SUBMIT REVIEW
# ======================
@router.post("", response_model=ReviewOut, status_code=status.HTTP_201_CREATED)
def submit_review(
    review: ReviewCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Submit a review for a session the caller booked.

    The tutor's average rating and review count are updated in the
    same transaction.
    """
    created = review_service.submit_review(
        db=db,
        student=current_user,
        session_id=review.session_id,
        rating=review.rating,
        comment=review.comment
    )
    return ReviewOut.model_validate(created)
