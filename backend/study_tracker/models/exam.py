"""
Study Tracker - Exam Model
"""
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from study_tracker.core.database import Base
from study_tracker.utils.dates import utcnow

if TYPE_CHECKING:
    from study_tracker.models.curriculum import Subject


class Exam(Base):
    """An upcoming exam the user is counting down to."""
    
    __tablename__ = "exams"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True
    )
    subject_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("subjects.id", ondelete="SET NULL"),
        nullable=True
    )
    
    name: Mapped[str] = mapped_column(String(200))
    exam_date: Mapped[datetime] = mapped_column(DateTime, index=True)
    board: Mapped[str | None] = mapped_column(String(100), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    
    # Relationships
    subject: Mapped[Optional["Subject"]] = relationship("Subject")
