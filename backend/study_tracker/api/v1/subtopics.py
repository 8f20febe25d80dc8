"""
Study Tracker - Subtopics API
Finer-grained checklist items within a topic
"""
from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.models.curriculum import Subtopic
from study_tracker.schemas.curriculum import SubtopicCreate, SubtopicResponse, SubtopicUpdate
from study_tracker.services.ownership import apply_updates, get_owned_subtopic, get_owned_topic
from study_tracker.utils.dates import utcnow

router = APIRouter(prefix="/subtopics", tags=["Subtopics"])


@router.get("", response_model=list[SubtopicResponse])
async def list_subtopics(
    current_user: CurrentUser,
    db: DbSession,
    topic_id: UUID = Query(...),
):
    """A topic's subtopics in display order."""
    await get_owned_topic(db, topic_id, current_user.id)
    result = await db.execute(
        select(Subtopic)
        .where(Subtopic.topic_id == topic_id)
        .order_by(Subtopic.order, Subtopic.created_at)
    )
    return result.scalars().all()


@router.post("", response_model=SubtopicResponse, status_code=status.HTTP_201_CREATED)
async def create_subtopic(request: SubtopicCreate, current_user: CurrentUser, db: DbSession):
    await get_owned_topic(db, request.topic_id, current_user.id)
    
    subtopic = Subtopic(**request.model_dump())
    db.add(subtopic)
    await db.flush()
    return SubtopicResponse.model_validate(subtopic)


@router.patch("/{subtopic_id}", response_model=SubtopicResponse)
async def update_subtopic(
    subtopic_id: UUID,
    request: SubtopicUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update a subtopic; the first completion stamps completed_at."""
    subtopic = await get_owned_subtopic(db, subtopic_id, current_user.id)
    newly_completed = request.completed is True and not subtopic.completed
    
    apply_updates(subtopic, request)
    if newly_completed:
        subtopic.completed_at = utcnow()
    elif request.completed is False:
        subtopic.completed_at = None
    
    await db.flush()
    return SubtopicResponse.model_validate(subtopic)


@router.delete("/{subtopic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subtopic(subtopic_id: UUID, current_user: CurrentUser, db: DbSession):
    subtopic = await get_owned_subtopic(db, subtopic_id, current_user.id)
    await db.delete(subtopic)
    await db.flush()
