"""
Study Tracker - Vocabulary API
Vocabulary words with example sentences
"""
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.models.writing import Vocabulary
from study_tracker.schemas.writing import VocabularyCreate, VocabularyResponse, VocabularyUpdate
from study_tracker.services.ownership import apply_updates, get_owned
from study_tracker.services.study_session import log_daily_study_session
from study_tracker.utils.dates import utcnow

router = APIRouter(prefix="/vocabulary", tags=["Vocabulary"])


@router.get("", response_model=list[VocabularyResponse])
async def list_vocabulary(current_user: CurrentUser, db: DbSession):
    """The user's words, newest first."""
    result = await db.execute(
        select(Vocabulary)
        .where(Vocabulary.user_id == current_user.id)
        .order_by(Vocabulary.created_at.desc())
    )
    return result.scalars().all()


@router.post("", response_model=VocabularyResponse, status_code=status.HTTP_201_CREATED)
async def create_vocabulary(request: VocabularyCreate, current_user: CurrentUser, db: DbSession):
    """Add a word and log today's study session."""
    word = Vocabulary(user_id=current_user.id, **request.model_dump())
    db.add(word)
    await log_daily_study_session(db, current_user.id, "vocabulary")
    return VocabularyResponse.model_validate(word)


@router.patch("/{word_id}", response_model=VocabularyResponse)
async def update_vocabulary(
    word_id: UUID,
    request: VocabularyUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update a word; marking it learned stamps learned_at."""
    word = await get_owned(db, Vocabulary, word_id, current_user.id, label="Word")
    changes = apply_updates(word, request)
    if changes.get("learned") is True and word.learned_at is None:
        word.learned_at = utcnow()
    elif changes.get("learned") is False:
        word.learned_at = None
    await db.flush()
    return VocabularyResponse.model_validate(word)


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vocabulary(word_id: UUID, current_user: CurrentUser, db: DbSession):
    """Delete a word."""
    word = await get_owned(db, Vocabulary, word_id, current_user.id, label="Word")
    await db.delete(word)
    await db.flush()
