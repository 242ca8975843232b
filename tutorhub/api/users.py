from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tutorhub.crud import user as user_crud
from tutorhub.database import get_db
from tutorhub.schemas import ReviewListItem, UserPublic
from tutorhub.services import review_service

router = APIRouter(prefix="/tutors", tags=["Tutors"])


# ======================
# GET: Tutor directory
# ======================
@router.get("", response_model=List[UserPublic])
def list_tutors(db: Session = Depends(get_db)):
    return [UserPublic.model_validate(t) for t in user_crud.list_tutors(db)]


# ======================
# GET: Public reviews for one tutor
# ======================
@router.get("/{tutor_id}/reviews", response_model=List[ReviewListItem])
def list_tutor_reviews(tutor_id: str, db: Session = Depends(get_db)):
    """Reviews for a tutor with only the student's name and the session title."""
    reviews = review_service.list_tutor_reviews(db, tutor_id)
    return [ReviewListItem.model_validate(r) for r in reviews]
