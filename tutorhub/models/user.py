import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, Float, Integer, DateTime, Enum, JSON
from sqlalchemy.orm import relationship
from tutorhub.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Role(str, enum.Enum):
    STUDENT = "student"
    TUTOR = "tutor"


# ---------------- USER (AUTH + PROFILE) ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(Role, name="user_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    subjects = Column(JSON, nullable=False, default=list)
    bio = Column(Text)
    # Derived from reviews; only the review flow writes these two
    rating = Column(Float, nullable=False, default=0.0)
    total_reviews = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    tutor_sessions = relationship("Session", foreign_keys="Session.tutor_id", back_populates="tutor")
    student_sessions = relationship("Session", foreign_keys="Session.student_id", back_populates="student")
    reviews_received = relationship("Review", foreign_keys="Review.tutor_id", back_populates="tutor")
    reviews_given = relationship("Review", foreign_keys="Review.student_id", back_populates="student")
