"""
Study Tracker - Curriculum Schemas
Pydantic schemas for subjects, topics, subtopics, revisions and practice papers
"""
import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from study_tracker.models.curriculum import QuestionStatus


# ============================================================================
# Subjects
# ============================================================================

class SubjectCreate(BaseModel):
    """Request to create a subject."""
    name: Annotated[str, Field(min_length=1, max_length=100)]
    type: Annotated[str, Field(min_length=1, max_length=50)]
    level: str | None = None
    color: str | None = None
    icon: str | None = None


class SubjectUpdate(BaseModel):
    """Partial subject update."""
    name: Annotated[str, Field(min_length=1, max_length=100)] | None = None
    type: Annotated[str, Field(min_length=1, max_length=50)] | None = None
    level: str | None = None
    color: str | None = None
    icon: str | None = None


class SubjectBrief(BaseModel):
    """Subject summary embedded in other responses."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    name: str
    color: str | None = None


class SubjectResponse(BaseModel):
    """A subject with topic counts."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    name: str
    type: str
    level: str | None = None
    color: str | None = None
    icon: str | None = None
    created_at: datetime
    topic_count: int = 0
    completed_topic_count: int = 0


class SubjectDetail(SubjectResponse):
    """A subject with its topics and practice papers."""
    topics: list["TopicResponse"] = []
    practice_papers: list["PracticePaperResponse"] = []


# ============================================================================
# Topics
# ============================================================================

class TopicCreate(BaseModel):
    """Request to add a topic to a subject."""
    subject_id: uuid.UUID
    name: Annotated[str, Field(min_length=1, max_length=200)]
    description: str | None = None
    order: int = 0


class TopicUpdate(BaseModel):
    """Partial topic update; completed=true schedules revisions."""
    name: Annotated[str, Field(min_length=1, max_length=200)] | None = None
    description: str | None = None
    order: int | None = None
    completed: bool | None = None


class TopicResponse(BaseModel):
    """A topic."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    subject_id: uuid.UUID
    name: str
    description: str | None = None
    order: int
    completed: bool
    completed_at: datetime | None = None
    created_at: datetime


class TopicDetail(TopicResponse):
    """A topic with its upcoming (incomplete) revisions."""
    pending_revisions: list["RevisionResponse"] = []


# ============================================================================
# Subtopics
# ============================================================================

class SubtopicCreate(BaseModel):
    """Request to add a subtopic to a topic."""
    topic_id: uuid.UUID
    name: Annotated[str, Field(min_length=1, max_length=200)]
    description: str | None = None
    order: int = 0


class SubtopicUpdate(BaseModel):
    """Partial subtopic update."""
    name: Annotated[str, Field(min_length=1, max_length=200)] | None = None
    description: str | None = None
    order: int | None = None
    completed: bool | None = None


class SubtopicResponse(BaseModel):
    """A subtopic."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    topic_id: uuid.UUID
    name: str
    description: str | None = None
    order: int
    completed: bool
    completed_at: datetime | None = None
    created_at: datetime


# ============================================================================
# Revisions
# ============================================================================

class RevisionTopic(BaseModel):
    """Topic summary embedded in a revision."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    name: str
    subject: SubjectBrief


class RevisionResponse(BaseModel):
    """A scheduled revision."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    topic_id: uuid.UUID
    scheduled_for: datetime
    session_number: int
    interval: int
    completed: bool
    completed_at: datetime | None = None
    notes: str | None = None


class RevisionWithTopic(RevisionResponse):
    """A revision with the topic and subject it reviews."""
    topic: RevisionTopic


class RevisionUpdate(BaseModel):
    """Only completion and notes can change on a revision."""
    completed: bool | None = None
    notes: str | None = None


# ============================================================================
# Practice papers
# ============================================================================

class PracticePaperCreate(BaseModel):
    """Request to log a practice paper."""
    subject_id: uuid.UUID
    topic_id: uuid.UUID | None = None
    paper_name: Annotated[str, Field(min_length=1, max_length=200)]
    question_start: Annotated[int, Field(ge=1)]
    question_end: Annotated[int, Field(ge=1)]
    total_questions: Annotated[int, Field(ge=1)] | None = None
    completed: bool = False
    score: int | None = None
    total_marks: int | None = None
    notes: str | None = None
    reminder_days: Annotated[int, Field(ge=0)] | None = None
    
    @model_validator(mode="after")
    def check_question_range(self) -> "PracticePaperCreate":
        if self.question_end < self.question_start:
            raise ValueError("question_end must not be before question_start")
        return self


class PracticePaperUpdate(BaseModel):
    """Partial practice paper update."""
    paper_name: Annotated[str, Field(min_length=1, max_length=200)] | None = None
    question_start: Annotated[int, Field(ge=1)] | None = None
    question_end: Annotated[int, Field(ge=1)] | None = None
    total_questions: Annotated[int, Field(ge=1)] | None = None
    completed: bool | None = None
    score: int | None = None
    total_marks: int | None = None
    notes: str | None = None
    reminder_days: Annotated[int, Field(ge=0)] | None = None


class PracticePaperResponse(BaseModel):
    """A logged practice paper."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    subject_id: uuid.UUID
    topic_id: uuid.UUID | None = None
    paper_name: str
    question_start: int
    question_end: int
    total_questions: int | None = None
    completed: bool
    score: int | None = None
    total_marks: int | None = None
    notes: str | None = None
    reminder_days: int | None = None
    reminder_date: datetime | None = None
    created_at: datetime


# ============================================================================
# Practice paper questions and logs
# ============================================================================

class PracticePaperQuestionCreate(BaseModel):
    """Flag a question; flagging the same question again updates it."""
    practice_paper_id: uuid.UUID
    question_number: Annotated[str, Field(min_length=1, max_length=20)]
    status: QuestionStatus
    notes: str | None = None


class PracticePaperQuestionUpdate(BaseModel):
    status: QuestionStatus | None = None
    notes: str | None = None


class PracticePaperQuestionResponse(BaseModel):
    """A flagged question."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    practice_paper_id: uuid.UUID
    question_number: str
    status: QuestionStatus
    notes: str | None = None
    created_at: datetime


class PracticePaperLogCreate(BaseModel):
    """
    Record a sitting of a paper.
    
    completed=true marks the paper finished (or re-opens work on an already
    completed paper).
    """
    practice_paper_id: uuid.UUID
    question_start: Annotated[int, Field(ge=1)]
    question_end: Annotated[int, Field(ge=1)]
    completed: bool = False
    score: int | None = None
    total_marks: int | None = None
    duration: Annotated[int, Field(ge=0)] | None = None
    notes: str | None = None
    
    @model_validator(mode="after")
    def check_question_range(self) -> "PracticePaperLogCreate":
        if self.question_end < self.question_start:
            raise ValueError("question_end must not be before question_start")
        return self


class PracticePaperLogResponse(BaseModel):
    """A sitting of a practice paper."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    practice_paper_id: uuid.UUID
    date: datetime
    question_start: int
    question_end: int
    completed: bool
    score: int | None = None
    total_marks: int | None = None
    duration: int | None = None
    notes: str | None = None


# Resolve forward references
SubjectDetail.model_rebuild()
TopicDetail.model_rebuild()
