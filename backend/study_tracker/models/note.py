"""
Study Tracker - Note Models
Study notes attached to a subject, topic or subtopic
"""
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from study_tracker.core.database import Base
from study_tracker.utils.dates import utcnow

if TYPE_CHECKING:
    from study_tracker.models.curriculum import Subject, Subtopic, Topic


class Note(Base):
    """
    A note, or a link to a PDF or video, filed under part of a subject.
    
    At least one of subject, topic and subtopic is set. user_id mirrors the
    owner of whichever of them the note was filed under.
    """
    
    __tablename__ = "notes"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True
    )
    subject_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("subjects.id", ondelete="CASCADE"),
        nullable=True,
        index=True
    )
    topic_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("topics.id", ondelete="CASCADE"),
        nullable=True,
        index=True
    )
    subtopic_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("subtopics.id", ondelete="CASCADE"),
        nullable=True,
        index=True
    )
    
    title: Mapped[str] = mapped_column(String(300))
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    file_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    file_type: Mapped[str | None] = mapped_column(String(20), nullable=True)  # pdf, video
    last_position: Mapped[int | None] = mapped_column(Integer, nullable=True)  # page or second
    
    last_viewed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)
    
    # Relationships
    subject: Mapped[Optional["Subject"]] = relationship("Subject", back_populates="notes")
    topic: Mapped[Optional["Topic"]] = relationship("Topic", back_populates="notes")
    subtopic: Mapped[Optional["Subtopic"]] = relationship("Subtopic", back_populates="notes")
