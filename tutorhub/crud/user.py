from typing import List, Optional

from sqlalchemy.orm import Session

from tutorhub import models


def create_user(
    db: Session,
    *,
    name: str,
    email: str,
    password_hash: str,
    role: models.Role,
    subjects: Optional[List[str]] = None,
    bio: Optional[str] = None,
) -> models.User:
    db_user = models.User(
        name=name,
        email=email,
        password_hash=password_hash,
        role=role,
        subjects=list(subjects or []),
        bio=bio,
    )
    db.add(db_user)
    db.flush()
    return db_user


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


def list_tutors(db: Session) -> List[models.User]:
    return (
        db.query(models.User)
        .filter(models.User.role == models.Role.TUTOR)
        .order_by(models.User.created_at.asc())
        .all()
    )


def apply_rating(db: Session, tutor_id: str, rating: int) -> int:
    """
    Fold one new rating into a tutor's running mean.

    Runs as a single UPDATE so the store evaluates the read and the write
    against the same row version; concurrent submissions cannot lose updates.

    Returns:
        Number of rows updated (0 if the tutor does not exist)
    """
    User = models.User
    return (
        db.query(User)
        .filter(User.id == tutor_id)
        .update(
            {
                User.rating: (User.rating * User.total_reviews + rating) / (User.total_reviews + 1),
                User.total_reviews: User.total_reviews + 1,
            },
            synchronize_session=False,
        )
    )
