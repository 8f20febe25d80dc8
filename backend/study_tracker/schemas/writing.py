"""
Study Tracker - Language Practice Schemas
Essays, vocabulary, grammar rules and error log entries
"""
import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from study_tracker.models.writing import GrammarStatus


# ============================================================================
# Essays
# ============================================================================

class EssayCreate(BaseModel):
    """Request to save an essay."""
    title: Annotated[str, Field(min_length=1, max_length=300)]
    content: Annotated[str, Field(min_length=1)]
    topic: str | None = None
    prompt: str | None = None
    grade: str | None = None
    notes: str | None = None


class EssayUpdate(BaseModel):
    """Partial essay update; word count follows content."""
    title: Annotated[str, Field(min_length=1, max_length=300)] | None = None
    content: Annotated[str, Field(min_length=1)] | None = None
    topic: str | None = None
    prompt: str | None = None
    grade: str | None = None
    notes: str | None = None


class EssayResponse(BaseModel):
    """An essay."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    title: str
    topic: str | None = None
    prompt: str | None = None
    content: str
    word_count: int
    grade: str | None = None
    notes: str | None = None
    created_at: datetime


# ============================================================================
# Vocabulary
# ============================================================================

class VocabularyCreate(BaseModel):
    """Request to add a word; at least one example sentence is required."""
    word: Annotated[str, Field(min_length=1, max_length=200)]
    definition: Annotated[str, Field(min_length=1)]
    sentences: Annotated[list[str], Field(min_length=1)]
    category: str | None = None


class VocabularyUpdate(BaseModel):
    """Partial vocabulary update."""
    word: Annotated[str, Field(min_length=1, max_length=200)] | None = None
    definition: str | None = None
    sentences: Annotated[list[str], Field(min_length=1)] | None = None
    category: str | None = None
    learned: bool | None = None


class VocabularyResponse(BaseModel):
    """A vocabulary word."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    word: str
    definition: str
    sentences: list[str]
    category: str | None = None
    learned: bool
    learned_at: datetime | None = None
    created_at: datetime


# ============================================================================
# Grammar rules
# ============================================================================

class GrammarRuleCreate(BaseModel):
    """Request to add a grammar rule."""
    title: Annotated[str, Field(min_length=1, max_length=300)]
    explanation: Annotated[str, Field(min_length=1)]
    examples: list[str] = []
    category: str | None = None
    status: GrammarStatus = GrammarStatus.NEEDS_WORK


class GrammarRuleUpdate(BaseModel):
    """Partial grammar rule update."""
    title: Annotated[str, Field(min_length=1, max_length=300)] | None = None
    explanation: str | None = None
    examples: list[str] | None = None
    category: str | None = None
    status: GrammarStatus | None = None


class GrammarRuleResponse(BaseModel):
    """A grammar rule."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    title: str
    explanation: str
    examples: list[str]
    category: str | None = None
    status: GrammarStatus
    created_at: datetime


# ============================================================================
# Error log
# ============================================================================

class ErrorLogCreate(BaseModel):
    """Request to log a mistake."""
    category: Annotated[str, Field(min_length=1, max_length=100)]
    description: Annotated[str, Field(min_length=1)]
    correction: Annotated[str, Field(min_length=1)]
    context: str | None = None


class ErrorLogUpdate(BaseModel):
    """Partial error log update."""
    category: Annotated[str, Field(min_length=1, max_length=100)] | None = None
    description: str | None = None
    correction: str | None = None
    context: str | None = None
    resolved: bool | None = None


class ErrorLogResponse(BaseModel):
    """A logged mistake."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    category: str
    description: str
    correction: str
    context: str | None = None
    resolved: bool
    resolved_at: datetime | None = None
    created_at: datetime
