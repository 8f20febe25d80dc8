"""
Study Tracker - Note Schemas
"""
import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NoteCreate(BaseModel):
    """
    Request to file a note.
    
    A note is filed under at least one of a subject, topic or subtopic. It may
    carry text content, a link to a PDF or video, or both.
    """
    subject_id: uuid.UUID | None = None
    topic_id: uuid.UUID | None = None
    subtopic_id: uuid.UUID | None = None
    title: Annotated[str, Field(min_length=1, max_length=300)]
    content: str | None = None
    file_url: Annotated[str, Field(max_length=500)] | None = None
    file_type: Annotated[str, Field(max_length=20)] | None = None
    last_position: Annotated[int, Field(ge=0)] | None = None
    
    @model_validator(mode="after")
    def check_anchor(self) -> "NoteCreate":
        if self.subject_id is None and self.topic_id is None and self.subtopic_id is None:
            raise ValueError("subject_id, topic_id or subtopic_id is required")
        return self


class NoteUpdate(BaseModel):
    """Partial note update; where a note is filed cannot change."""
    title: Annotated[str, Field(min_length=1, max_length=300)] | None = None
    content: str | None = None
    file_url: Annotated[str, Field(max_length=500)] | None = None
    file_type: Annotated[str, Field(max_length=20)] | None = None
    last_position: Annotated[int, Field(ge=0)] | None = None


class NoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    subject_id: uuid.UUID | None = None
    topic_id: uuid.UUID | None = None
    subtopic_id: uuid.UUID | None = None
    title: str
    content: str | None = None
    file_url: str | None = None
    file_type: str | None = None
    last_position: int | None = None
    last_viewed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
