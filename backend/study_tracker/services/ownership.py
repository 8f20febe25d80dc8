"""
Study Tracker - Ownership Lookups
Every record belongs to one user, directly or through its parent. Lookups
filter on that chain and raise NotFoundError for both "missing" and "someone
else's", so other users' records are never revealed.
"""
import uuid
from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.core.exceptions import NotFoundError
from study_tracker.models.curriculum import (
    PracticePaper,
    PracticePaperQuestion,
    Subject,
    Subtopic,
    Topic,
)
from study_tracker.models.session import LearningProject

ModelT = TypeVar("ModelT")


async def get_owned(
    db: AsyncSession,
    model: type[ModelT],
    record_id: uuid.UUID,
    user_id: uuid.UUID,
    label: str | None = None,
) -> ModelT:
    """Load a record that carries its own user_id column."""
    result = await db.execute(
        select(model).where(model.id == record_id, model.user_id == user_id)
    )
    record = result.scalar_one_or_none()
    if record is None:
        raise NotFoundError(f"{label or model.__name__} not found")
    return record


async def get_owned_subject(db: AsyncSession, subject_id: uuid.UUID, user_id: uuid.UUID) -> Subject:
    return await get_owned(db, Subject, subject_id, user_id)


async def get_owned_project(
    db: AsyncSession, project_id: uuid.UUID, user_id: uuid.UUID
) -> LearningProject:
    return await get_owned(db, LearningProject, project_id, user_id, label="Learning project")


async def get_owned_topic(db: AsyncSession, topic_id: uuid.UUID, user_id: uuid.UUID) -> Topic:
    """Load a topic through its subject's owner."""
    result = await db.execute(
        select(Topic)
        .join(Topic.subject)
        .where(Topic.id == topic_id, Subject.user_id == user_id)
    )
    topic = result.scalar_one_or_none()
    if topic is None:
        raise NotFoundError("Topic not found")
    return topic


async def get_owned_practice_paper(
    db: AsyncSession, paper_id: uuid.UUID, user_id: uuid.UUID
) -> PracticePaper:
    """Load a practice paper through its subject's owner."""
    result = await db.execute(
        select(PracticePaper)
        .join(PracticePaper.subject)
        .where(PracticePaper.id == paper_id, Subject.user_id == user_id)
    )
    paper = result.scalar_one_or_none()
    if paper is None:
        raise NotFoundError("Practice paper not found")
    return paper


async def get_owned_subtopic(db: AsyncSession, subtopic_id: uuid.UUID, user_id: uuid.UUID) -> Subtopic:
    """Load a subtopic through its topic's subject owner."""
    result = await db.execute(
        select(Subtopic)
        .join(Subtopic.topic)
        .join(Topic.subject)
        .where(Subtopic.id == subtopic_id, Subject.user_id == user_id)
    )
    subtopic = result.scalar_one_or_none()
    if subtopic is None:
        raise NotFoundError("Subtopic not found")
    return subtopic


async def get_owned_paper_question(
    db: AsyncSession, question_id: uuid.UUID, user_id: uuid.UUID
) -> PracticePaperQuestion:
    result = await db.execute(
        select(PracticePaperQuestion)
        .join(PracticePaperQuestion.practice_paper)
        .join(PracticePaper.subject)
        .where(PracticePaperQuestion.id == question_id, Subject.user_id == user_id)
    )
    question = result.scalar_one_or_none()
    if question is None:
        raise NotFoundError("Question not found")
    return question


def apply_updates(record: Any, update: BaseModel) -> dict[str, Any]:
    """
    Copy the fields a client actually sent onto an ORM record.
    
    An explicit null is ignored for NOT NULL columns and clears nullable ones.
    Returns the applied changes.
    """
    columns = record.__table__.c
    applied = {}
    for field, value in update.model_dump(exclude_unset=True).items():
        if value is None and field in columns and not columns[field].nullable:
            continue
        setattr(record, field, value)
        applied[field] = value
    return applied
