# tutorhub/crud/session.py
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from tutorhub import models


def create_session(
    db: Session,
    *,
    tutor_id: str,
    title: str,
    subject: str,
    date: datetime,
    duration: int,
    description: Optional[str] = None,
) -> models.Session:
    db_session = models.Session(
        tutor_id=tutor_id,
        title=title,
        subject=subject,
        description=description,
        date=date,
        duration=duration,
        status=models.SessionStatus.AVAILABLE,
    )
    db.add(db_session)
    db.flush()
    return db_session


def get_session(db: Session, session_id: str) -> Optional[models.Session]:
    return db.query(models.Session).filter(models.Session.id == session_id).first()


def list_available(db: Session) -> List[models.Session]:
    return (
        db.query(models.Session)
        .options(joinedload(models.Session.tutor))
        .filter(models.Session.status == models.SessionStatus.AVAILABLE)
        .order_by(models.Session.date.asc())
        .all()
    )


def list_for_tutor(db: Session, tutor_id: str) -> List[models.Session]:
    return (
        db.query(models.Session)
        .options(joinedload(models.Session.tutor), joinedload(models.Session.student))
        .filter(models.Session.tutor_id == tutor_id)
        .order_by(models.Session.date.asc())
        .all()
    )


def list_for_student(db: Session, student_id: str) -> List[models.Session]:
    return (
        db.query(models.Session)
        .options(joinedload(models.Session.tutor), joinedload(models.Session.student))
        .filter(models.Session.student_id == student_id)
        .order_by(models.Session.date.asc())
        .all()
    )


def mark_booked_if_available(db: Session, session_id: str, student_id: str) -> bool:
    """
    Compare-and-set booking: only an ``available`` row is moved to ``booked``.

    Returns:
        True if this call claimed the session, False otherwise
    """
    updated = (
        db.query(models.Session)
        .filter(
            models.Session.id == session_id,
            models.Session.status == models.SessionStatus.AVAILABLE,
        )
        .update(
            {
                models.Session.student_id: student_id,
                models.Session.status: models.SessionStatus.BOOKED,
            },
            synchronize_session=False,
        )
    )
    return updated == 1
