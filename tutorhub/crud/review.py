# tutorhub/crud/review.py
"""
Review CRUD Operations
"""

from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from tutorhub.models.review import Review


def create_review(
    db: Session,
    session_id: str,
    tutor_id: str,
    student_id: str,
    rating: int,
    comment: Optional[str] = None
) -> Review:
    """
    Create a new review row (flushed, not committed).

    Rating range is enforced by the caller and the check_rating_range
    constraint.

    Args:
        db: Database session
        session_id: Session identifier
        tutor_id: Reviewed tutor's user ID
        student_id: Reviewing student's user ID
        rating: Rating value (1-5)
        comment: Optional text comment

    Returns:
        Created Review object
    """
    review = Review(
        session_id=session_id,
        tutor_id=tutor_id,
        student_id=student_id,
        rating=rating,
        comment=comment
    )

    db.add(review)
    db.flush()
    return review


def get_review_by_session(db: Session, session_id: str) -> Optional[Review]:
    return db.query(Review).filter(Review.session_id == session_id).first()


def get_reviews_by_tutor(db: Session, tutor_id: str) -> List[Review]:
    """
    Get all reviews for a tutor, newest first, with student and session loaded.
    """
    return (
        db.query(Review)
        .options(joinedload(Review.student), joinedload(Review.session))
        .filter(Review.tutor_id == tutor_id)
        .order_by(Review.created_at.desc())
        .all()
    )
