# tutorhub/api/session.py
"""
Session catalog API

Endpoints:
- POST /sessions - Publish a session (tutors)
- GET /sessions - List available sessions
- GET /my-sessions - Sessions the caller teaches or booked
- POST /sessions/{session_id}/book - Book a session (students)
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tutorhub import models
from tutorhub.database import get_db
from tutorhub.schemas import SessionCreate, SessionDetail, SessionOut
from tutorhub.services import session_service
from tutorhub.utils.security import get_current_user

router = APIRouter(tags=["sessions"])


# ======================
# CREATE SESSION
# ======================
@router.post("/sessions", response_model=SessionOut, status_code=status.HTTP_201_CREATED)
def create_session(
    payload: SessionCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    session = session_service.create_session(
        db,
        current_user,
        title=payload.title,
        subject=payload.subject,
        description=payload.description,
        date=payload.date,
        duration=payload.duration,
    )
    return SessionOut.model_validate(session)


# ======================
# SESSION LISTING
# ======================
@router.get("/sessions", response_model=List[SessionDetail])
def list_available_sessions(db: Session = Depends(get_db)):
    sessions = session_service.list_available_sessions(db)
    return [SessionDetail.model_validate(s) for s in sessions]


@router.get("/my-sessions", response_model=List[SessionDetail])
def list_my_sessions(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    sessions = session_service.list_my_sessions(db, current_user)
    return [SessionDetail.model_validate(s) for s in sessions]


# ======================
# BOOK SESSION
# ======================
@router.post("/sessions/{session_id}/book", response_model=SessionOut)
def book_session(
    session_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    session = session_service.book_session(db, current_user, session_id)
    return SessionOut.model_validate(session)
