# tutorhub/services/session_service.py
"""
Session catalog: publishing, listing and booking tutoring slots.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tutorhub import models
from tutorhub.crud import session as session_crud
from tutorhub.errors import ConflictError, ValidationError
from tutorhub.utils.security import ensure_role

logger = logging.getLogger(__name__)


def create_session(
    db: Session,
    tutor: models.User,
    *,
    title: str,
    subject: str,
    date: datetime,
    duration: int,
    description: Optional[str] = None,
) -> models.Session:
    """Publish a new slot owned by ``tutor``; it always starts ``available``."""
    ensure_role(tutor, models.Role.TUTOR, "Only tutors can create sessions")

    if not title or not subject or date is None or duration is None:
        raise ValidationError("Title, subject, date and duration are required")
    if duration <= 0:
        raise ValidationError("Duration must be a positive number of minutes")

    try:
        session = session_crud.create_session(
            db,
            tutor_id=tutor.id,
            title=title,
            subject=subject,
            description=description,
            date=date,
            duration=duration,
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    db.refresh(session)
    logger.info("Tutor %s created session %s", tutor.id, session.id)
    return session


def list_available_sessions(db: Session) -> List[models.Session]:
    return session_crud.list_available(db)


def list_my_sessions(db: Session, user: models.User) -> List[models.Session]:
    """Sessions the caller teaches (tutor) or has booked (student)."""
    if user.role == models.Role.TUTOR:
        return session_crud.list_for_tutor(db, user.id)
    return session_crud.list_for_student(db, user.id)


def book_session(db: Session, student: models.User, session_id: str) -> models.Session:
    """
    Book an available session for ``student``.

    The status check and the write are one conditional UPDATE, so of any
    number of concurrent attempts exactly one succeeds.

    Raises:
        AuthorizationError: caller is not a student
        ConflictError: session missing or no longer available
    """
    ensure_role(student, models.Role.STUDENT, "Only students can book sessions")

    try:
        claimed = session_crud.mark_booked_if_available(db, session_id, student.id)
        if not claimed:
            db.rollback()
            logger.info("Booking conflict on session %s for student %s", session_id, student.id)
            raise ConflictError("Session not available")
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info("Student %s booked session %s", student.id, session_id)
    return session_crud.get_session(db, session_id)
