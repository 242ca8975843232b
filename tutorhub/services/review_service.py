# tutorhub/services/review_service.py
"""
Review Service Layer
Business logic for review submission and tutor rating aggregation
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tutorhub import models
from tutorhub.crud import review as review_crud
from tutorhub.crud import session as session_crud
from tutorhub.crud import user as user_crud
from tutorhub.errors import ValidationError
from tutorhub.utils.security import ensure_role

logger = logging.getLogger(__name__)


# ======================
# REVIEW SUBMISSION
# ======================

def submit_review(
    db: Session,
    student: models.User,
    session_id: str,
    rating: int,
    comment: Optional[str] = None
) -> models.Review:
    """
    Submit a review for a session the caller booked.

    Creates the review and folds its rating into the tutor's aggregate
    in one transaction.

    Args:
        db: Database session
        student: Authenticated caller
        session_id: Session identifier
        rating: Rating value (1-5)
        comment: Optional text comment

    Returns:
        The persisted Review

    Raises:
        AuthorizationError: caller is not a student
        ValidationError: bad rating, unknown session, session booked by
            someone else, or session already reviewed
    """
    ensure_role(student, models.Role.STUDENT, "Only students can submit reviews")

    if isinstance(rating, bool) or not isinstance(rating, int) or not (1 <= rating <= 5):
        raise ValidationError("Rating must be an integer between 1 and 5")

    session = session_crud.get_session(db, session_id)
    if session is None or session.student_id != student.id:
        raise ValidationError("Invalid session")

    if review_crud.get_review_by_session(db, session_id):
        raise ValidationError("Session already reviewed")

    try:
        review = review_crud.create_review(
            db=db,
            session_id=session.id,
            tutor_id=session.tutor_id,
            student_id=student.id,
            rating=rating,
            comment=comment
        )
        user_crud.apply_rating(db, session.tutor_id, rating)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError("Session already reviewed")
    except SQLAlchemyError:
        db.rollback()
        raise

    db.refresh(review)
    logger.info(
        "Student %s reviewed session %s (tutor %s, rating %d)",
        student.id, session.id, session.tutor_id, rating,
    )
    return review


# ======================
# REVIEW LISTING
# ======================

def list_tutor_reviews(db: Session, tutor_id: str) -> List[models.Review]:
    return review_crud.get_reviews_by_tutor(db, tutor_id)
