"""
Study Tracker - Study Session Models
Dated activity records that feed streaks and the activity calendar
"""
import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from study_tracker.core.database import Base, JSONType
from study_tracker.utils.dates import utcnow


class ProjectStatus(str, Enum):
    """Learning project lifecycle."""
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class StudySession(Base):
    """One day of general study; activities lists what was done."""
    
    __tablename__ = "study_sessions"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True
    )
    
    date: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    # Structure: ["grammar", "vocabulary", "essay", ...]
    activities: Mapped[list] = mapped_column(JSONType, default=list)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes


class SATSession(Base):
    """An SAT practice session, often following a video."""
    
    __tablename__ = "sat_sessions"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True
    )
    
    date: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    topic: Mapped[str] = mapped_column(String(200))
    source: Mapped[str] = mapped_column(String(50), default="other")
    youtube_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    video_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    timestamp: Mapped[int] = mapped_column(Integer, default=0)  # seconds into the video
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, default=False)


class LearningProject(Base):
    """A self-directed course or book worked through in units."""
    
    __tablename__ = "learning_projects"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True
    )
    
    name: Mapped[str] = mapped_column(String(200))
    category: Mapped[str] = mapped_column(String(50), default="other")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    total_units: Mapped[int | None] = mapped_column(Integer, nullable=True)
    completed_units: Mapped[int] = mapped_column(Integer, default=0)
    days_spent: Mapped[int] = mapped_column(Integer, default=0)
    status: Mapped[ProjectStatus] = mapped_column(String(20), default=ProjectStatus.IN_PROGRESS)
    last_studied: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)
    
    # Relationships
    sessions: Mapped[list["LearningSession"]] = relationship(
        "LearningSession",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="LearningSession.date.desc()"
    )
    
    @property
    def progress_percentage(self) -> int:
        if not self.total_units:
            return 0
        return round(self.completed_units / self.total_units * 100)


class LearningSession(Base):
    """Units worked through in a learning project on a given day."""
    
    __tablename__ = "learning_sessions"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("learning_projects.id", ondelete="CASCADE"),
        index=True
    )
    
    date: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    units_completed: Mapped[int] = mapped_column(Integer)
    unit_covered: Mapped[str | None] = mapped_column(String(200), nullable=True)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    progress: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    # Relationships
    project: Mapped["LearningProject"] = relationship("LearningProject", back_populates="sessions")
