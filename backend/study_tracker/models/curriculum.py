"""
Study Tracker - Curriculum Models
SQLAlchemy models for subjects, topics, subtopics, scheduled revisions and practice papers
"""
import uuid
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from study_tracker.core.database import Base
from study_tracker.utils.dates import utcnow

if TYPE_CHECKING:
    from study_tracker.models.note import Note
    from study_tracker.models.user import User


class QuestionStatus(str, Enum):
    """Why a practice-paper question is being tracked."""
    REDO = "redo"
    FOCUS = "focus"
    LATER = "later"


class Subject(Base):
    """A subject the user studies (e.g. Chemistry, General Paper)."""
    
    __tablename__ = "subjects"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True
    )
    
    name: Mapped[str] = mapped_column(String(100))
    type: Mapped[str] = mapped_column(String(50))  # academic, language, ...
    level: Mapped[str | None] = mapped_column(String(50), nullable=True)
    color: Mapped[str | None] = mapped_column(String(7), nullable=True)  # Hex color
    icon: Mapped[str | None] = mapped_column(String(50), nullable=True)
    
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    
    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="subjects")
    topics: Mapped[list["Topic"]] = relationship(
        "Topic",
        back_populates="subject",
        cascade="all, delete-orphan",
        order_by="Topic.order"
    )
    practice_papers: Mapped[list["PracticePaper"]] = relationship(
        "PracticePaper",
        back_populates="subject",
        cascade="all, delete-orphan"
    )
    notes: Mapped[list["Note"]] = relationship(
        "Note",
        back_populates="subject",
        cascade="all, delete-orphan"
    )


class Topic(Base):
    """A unit of subject material that can be marked as learned."""
    
    __tablename__ = "topics"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    subject_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("subjects.id", ondelete="CASCADE"),
        index=True
    )
    
    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, default=0)
    
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    
    # Relationships
    subject: Mapped["Subject"] = relationship("Subject", back_populates="topics")
    revisions: Mapped[list["Revision"]] = relationship(
        "Revision",
        back_populates="topic",
        cascade="all, delete-orphan"
    )
    subtopics: Mapped[list["Subtopic"]] = relationship(
        "Subtopic",
        back_populates="topic",
        cascade="all, delete-orphan",
        order_by="Subtopic.order"
    )
    notes: Mapped[list["Note"]] = relationship(
        "Note",
        back_populates="topic",
        cascade="all, delete-orphan"
    )


class Subtopic(Base):
    """A finer-grained part of a topic, ticked off on its own."""
    
    __tablename__ = "subtopics"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    topic_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("topics.id", ondelete="CASCADE"),
        index=True
    )
    
    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, default=0)
    
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    
    # Relationships
    topic: Mapped["Topic"] = relationship("Topic", back_populates="subtopics")
    notes: Mapped[list["Note"]] = relationship(
        "Note",
        back_populates="subtopic",
        cascade="all, delete-orphan"
    )


class Revision(Base):
    """One scheduled review of a completed topic."""
    
    __tablename__ = "revisions"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    topic_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("topics.id", ondelete="CASCADE"),
        index=True
    )
    
    scheduled_for: Mapped[datetime] = mapped_column(DateTime, index=True)
    session_number: Mapped[int] = mapped_column(Integer)  # 1-based position in the schedule
    interval: Mapped[int] = mapped_column(Integer)  # days after topic completion
    
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    
    # Relationships
    topic: Mapped["Topic"] = relationship("Topic", back_populates="revisions")


class PracticePaper(Base):
    """A past-paper attempt, optionally with a follow-up reminder."""
    
    __tablename__ = "practice_papers"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    subject_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("subjects.id", ondelete="CASCADE"),
        index=True
    )
    topic_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("topics.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )
    
    paper_name: Mapped[str] = mapped_column(String(200))
    question_start: Mapped[int] = mapped_column(Integer)
    question_end: Mapped[int] = mapped_column(Integer)
    total_questions: Mapped[int | None] = mapped_column(Integer, nullable=True)
    
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_marks: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    # Reminder to revisit the paper `reminder_days` after it was logged
    reminder_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reminder_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    
    # Relationships
    subject: Mapped["Subject"] = relationship("Subject", back_populates="practice_papers")
    topic: Mapped[Optional["Topic"]] = relationship("Topic")
    questions: Mapped[list["PracticePaperQuestion"]] = relationship(
        "PracticePaperQuestion",
        back_populates="practice_paper",
        cascade="all, delete-orphan"
    )
    logs: Mapped[list["PracticePaperLog"]] = relationship(
        "PracticePaperLog",
        back_populates="practice_paper",
        cascade="all, delete-orphan",
        order_by="PracticePaperLog.date.desc()"
    )


class PracticePaperQuestion(Base):
    """A single question of a paper flagged to redo, focus on or come back to."""
    
    __tablename__ = "practice_paper_questions"
    __table_args__ = (
        UniqueConstraint("practice_paper_id", "question_number"),
    )
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    practice_paper_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("practice_papers.id", ondelete="CASCADE"),
        index=True
    )
    
    question_number: Mapped[str] = mapped_column(String(20))  # "7", "3b", ...
    status: Mapped[QuestionStatus] = mapped_column(String(20))
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    
    # Relationships
    practice_paper: Mapped["PracticePaper"] = relationship("PracticePaper", back_populates="questions")


class PracticePaperLog(Base):
    """One sitting of a practice paper covering a range of questions."""
    
    __tablename__ = "practice_paper_logs"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    practice_paper_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("practice_papers.id", ondelete="CASCADE"),
        index=True
    )
    
    date: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    question_start: Mapped[int] = mapped_column(Integer)
    question_end: Mapped[int] = mapped_column(Integer)
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_marks: Mapped[int | None] = mapped_column(Integer, nullable=True)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    # Relationships
    practice_paper: Mapped["PracticePaper"] = relationship("PracticePaper", back_populates="logs")
