"""
Study Tracker - Essays API
Essay writing practice; saving an essay counts as studying today
"""
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.models.writing import Essay
from study_tracker.schemas.writing import EssayCreate, EssayResponse, EssayUpdate
from study_tracker.services.ownership import apply_updates, get_owned
from study_tracker.services.study_session import log_daily_study_session
from study_tracker.utils.dates import count_words

router = APIRouter(prefix="/essays", tags=["Essays"])


@router.get("", response_model=list[EssayResponse])
async def list_essays(current_user: CurrentUser, db: DbSession):
    """The user's essays, newest first."""
    result = await db.execute(
        select(Essay)
        .where(Essay.user_id == current_user.id)
        .order_by(Essay.created_at.desc())
    )
    return result.scalars().all()


@router.post("", response_model=EssayResponse, status_code=status.HTTP_201_CREATED)
async def create_essay(request: EssayCreate, current_user: CurrentUser, db: DbSession):
    """Save an essay and log today's study session."""
    essay = Essay(
        user_id=current_user.id,
        word_count=count_words(request.content),
        **request.model_dump(),
    )
    db.add(essay)
    await log_daily_study_session(db, current_user.id, "essay")
    return EssayResponse.model_validate(essay)


@router.get("/{essay_id}", response_model=EssayResponse)
async def get_essay(essay_id: UUID, current_user: CurrentUser, db: DbSession):
    """Get one essay."""
    return await get_owned(db, Essay, essay_id, current_user.id)


@router.patch("/{essay_id}", response_model=EssayResponse)
async def update_essay(
    essay_id: UUID,
    request: EssayUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update an essay; the word count follows the content."""
    essay = await get_owned(db, Essay, essay_id, current_user.id)
    changes = apply_updates(essay, request)
    if "content" in changes:
        essay.word_count = count_words(essay.content)
    await db.flush()
    return EssayResponse.model_validate(essay)


@router.delete("/{essay_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_essay(essay_id: UUID, current_user: CurrentUser, db: DbSession):
    """Delete an essay."""
    essay = await get_owned(db, Essay, essay_id, current_user.id)
    await db.delete(essay)
    await db.flush()
