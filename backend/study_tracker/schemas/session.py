"""
Study Tracker - Session Schemas
Study sessions, SAT sessions and learning projects
"""
import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from study_tracker.models.session import ProjectStatus


# ============================================================================
# Study sessions
# ============================================================================

class StudySessionCreate(BaseModel):
    """Request to log a study session (dated now)."""
    activities: list[str] = []
    duration: Annotated[int, Field(ge=0)] | None = None


class StudySessionResponse(BaseModel):
    """A study session."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    date: datetime
    activities: list[str]
    duration: int | None = None


# ============================================================================
# SAT sessions
# ============================================================================

class SATSessionCreate(BaseModel):
    """Request to log an SAT practice session."""
    topic: Annotated[str, Field(min_length=1, max_length=200)]
    source: str = "other"
    youtube_url: str | None = None
    timestamp: Annotated[int, Field(ge=0)] = 0
    duration: Annotated[int, Field(ge=0)] | None = None
    notes: str | None = None
    completed: bool = False


class SATSessionUpdate(BaseModel):
    """Partial SAT session update."""
    topic: Annotated[str, Field(min_length=1, max_length=200)] | None = None
    source: str | None = None
    youtube_url: str | None = None
    timestamp: Annotated[int, Field(ge=0)] | None = None
    duration: Annotated[int, Field(ge=0)] | None = None
    notes: str | None = None
    completed: bool | None = None


class SATSessionResponse(BaseModel):
    """An SAT practice session."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    date: datetime
    topic: str
    source: str
    youtube_url: str | None = None
    video_id: str | None = None
    timestamp: int
    duration: int | None = None
    notes: str | None = None
    completed: bool


# ============================================================================
# Learning projects
# ============================================================================

class LearningProjectCreate(BaseModel):
    """Request to start a learning project."""
    name: Annotated[str, Field(min_length=1, max_length=200)]
    category: str = "other"
    description: str | None = None
    total_units: Annotated[int, Field(ge=1)] | None = None


class LearningProjectUpdate(BaseModel):
    """Partial learning project update."""
    name: Annotated[str, Field(min_length=1, max_length=200)] | None = None
    category: str | None = None
    description: str | None = None
    total_units: Annotated[int, Field(ge=1)] | None = None
    status: ProjectStatus | None = None


class LearningSessionCreate(BaseModel):
    """Request to log units worked through in a project."""
    project_id: uuid.UUID
    units_completed: Annotated[int, Field(ge=1)]
    unit_covered: str | None = None
    duration: Annotated[int, Field(ge=0)] | None = None
    progress: str | None = None
    notes: str | None = None


class LearningSessionResponse(BaseModel):
    """A learning session."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    project_id: uuid.UUID
    date: datetime
    units_completed: int
    unit_covered: str | None = None
    duration: int | None = None
    progress: str | None = None
    notes: str | None = None


class LearningProjectResponse(BaseModel):
    """A learning project with its progress."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    name: str
    category: str
    description: str | None = None
    total_units: int | None = None
    completed_units: int
    days_spent: int
    status: ProjectStatus
    last_studied: datetime | None = None
    progress_percentage: int
    created_at: datetime
    updated_at: datetime


class LearningProjectDetail(LearningProjectResponse):
    """A learning project with its sessions, newest first."""
    sessions: list[LearningSessionResponse] = []
