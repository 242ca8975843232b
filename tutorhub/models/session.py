# tutorhub/models/session.py
import enum

from sqlalchemy import Column, String, Text, Integer, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from tutorhub.database import Base
from tutorhub.models.user import new_id, utcnow


class SessionStatus(str, enum.Enum):
    AVAILABLE = "available"
    BOOKED = "booked"
    # No operation moves a session into these two yet
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Session(Base):
    __tablename__ = "sessions"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    subject = Column(String(100), nullable=False)
    description = Column(Text)
    tutor_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    student_id = Column(String(36), ForeignKey("users.id"), index=True)
    date = Column(DateTime(timezone=True), nullable=False)
    duration = Column(Integer, nullable=False)
    status = Column(
        Enum(SessionStatus, name="session_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=SessionStatus.AVAILABLE,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    tutor = relationship("User", foreign_keys=[tutor_id], back_populates="tutor_sessions")
    student = relationship("User", foreign_keys=[student_id], back_populates="student_sessions")
    review = relationship("Review", back_populates="session", uselist=False)
