"""
Study Tracker - Exam Schemas
"""
import uuid
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _as_naive_utc(value: datetime | None) -> datetime | None:
    """Stored timestamps are naive UTC; convert offset-aware input."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


ExamDate = Annotated[datetime, AfterValidator(_as_naive_utc)]


class ExamCreate(BaseModel):
    """Request to add an exam."""
    name: Annotated[str, Field(min_length=1, max_length=200)]
    exam_date: ExamDate
    subject_id: uuid.UUID | None = None
    board: str | None = None
    notes: str | None = None


class ExamUpdate(BaseModel):
    """Partial exam update."""
    name: Annotated[str, Field(min_length=1, max_length=200)] | None = None
    exam_date: ExamDate | None = None
    board: str | None = None
    notes: str | None = None
    completed: bool | None = None


class ExamResponse(BaseModel):
    """An exam."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    subject_id: uuid.UUID | None = None
    name: str
    exam_date: datetime
    board: str | None = None
    notes: str | None = None
    completed: bool
    created_at: datetime


class ExamCountdown(ExamResponse):
    """An upcoming exam with the whole days left until it starts."""
    days_remaining: int
    
    @classmethod
    def from_exam(cls, exam, days_remaining: int) -> "ExamCountdown":
        return cls(
            **ExamResponse.model_validate(exam).model_dump(),
            days_remaining=days_remaining,
        )
