# tutorhub/models/review.py
from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from tutorhub.database import Base
from tutorhub.models.user import new_id, utcnow


class Review(Base):
    __tablename__ = "reviews"

    id = Column(String(36), primary_key=True, default=new_id)
    session_id = Column(String(36), ForeignKey("sessions.id"), unique=True, nullable=False)
    tutor_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    student_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Constraints
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="check_rating_range"),
    )

    # Relationships
    session = relationship("Session", back_populates="review")
    tutor = relationship("User", foreign_keys=[tutor_id], back_populates="reviews_received")
    student = relationship("User", foreign_keys=[student_id], back_populates="reviews_given")
