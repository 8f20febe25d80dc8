"""
Study Tracker - Subjects API
Endpoints for a user's subjects
"""
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.core.exceptions import NotFoundError
from study_tracker.models.curriculum import Subject
from study_tracker.schemas.curriculum import (
    PracticePaperResponse,
    SubjectCreate,
    SubjectDetail,
    SubjectResponse,
    SubjectUpdate,
    TopicResponse,
)
from study_tracker.services.ownership import apply_updates, get_owned_subject

router = APIRouter(prefix="/subjects", tags=["Subjects"])


@router.get("", response_model=list[SubjectResponse])
async def list_subjects(current_user: CurrentUser, db: DbSession):
    """List the user's subjects with topic progress counts."""
    result = await db.execute(
        select(Subject)
        .where(Subject.user_id == current_user.id)
        .options(selectinload(Subject.topics))
        .order_by(Subject.created_at.desc())
    )
    return [_subject_response(subject) for subject in result.scalars().all()]


@router.post("", response_model=SubjectResponse, status_code=status.HTTP_201_CREATED)
async def create_subject(request: SubjectCreate, current_user: CurrentUser, db: DbSession):
    """Create a subject."""
    subject = Subject(user_id=current_user.id, **request.model_dump())
    db.add(subject)
    await db.flush()
    return SubjectResponse.model_validate(subject)


@router.get("/{subject_id}", response_model=SubjectDetail)
async def get_subject(subject_id: UUID, current_user: CurrentUser, db: DbSession):
    """Get a subject with its topics and practice papers."""
    subject = await _load_subject(db, subject_id, current_user.id)
    summary = _subject_response(subject)
    return SubjectDetail(
        **summary.model_dump(),
        topics=[TopicResponse.model_validate(topic) for topic in subject.topics],
        practice_papers=[
            PracticePaperResponse.model_validate(paper) for paper in subject.practice_papers
        ],
    )


@router.patch("/{subject_id}", response_model=SubjectResponse)
async def update_subject(
    subject_id: UUID,
    request: SubjectUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update a subject."""
    subject = await _load_subject(db, subject_id, current_user.id)
    apply_updates(subject, request)
    await db.flush()
    return _subject_response(subject)


@router.delete("/{subject_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subject(subject_id: UUID, current_user: CurrentUser, db: DbSession):
    """Delete a subject with everything filed under it."""
    subject = await get_owned_subject(db, subject_id, current_user.id)
    await db.delete(subject)
    await db.flush()


# ============================================================================
# Helpers
# ============================================================================

async def _load_subject(db: AsyncSession, subject_id: UUID, user_id: UUID) -> Subject:
    """Owned subject with topics and practice papers loaded."""
    result = await db.execute(
        select(Subject)
        .where(Subject.id == subject_id, Subject.user_id == user_id)
        .options(selectinload(Subject.topics), selectinload(Subject.practice_papers))
        .execution_options(populate_existing=True)
    )
    subject = result.scalar_one_or_none()
    if subject is None:
        raise NotFoundError("Subject not found")
    return subject


def _subject_response(subject: Subject) -> SubjectResponse:
    response = SubjectResponse.model_validate(subject)
    response.topic_count = len(subject.topics)
    response.completed_topic_count = sum(1 for topic in subject.topics if topic.completed)
    return response
