"""
Study Tracker - Topics API
Topic management, including the completion workflow that schedules revisions
"""
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.models.curriculum import Revision, Topic
from study_tracker.schemas.curriculum import (
    RevisionResponse,
    TopicCreate,
    TopicDetail,
    TopicResponse,
    TopicUpdate,
)
from study_tracker.services.ownership import apply_updates, get_owned_subject, get_owned_topic
from study_tracker.services.revision_scheduler import RevisionScheduler
from study_tracker.utils.dates import utcnow

router = APIRouter(prefix="/topics", tags=["Topics"])


@router.post("", response_model=TopicResponse, status_code=status.HTTP_201_CREATED)
async def create_topic(request: TopicCreate, current_user: CurrentUser, db: DbSession):
    """Add a topic to one of the user's subjects."""
    await get_owned_subject(db, request.subject_id, current_user.id)
    
    topic = Topic(**request.model_dump())
    db.add(topic)
    await db.flush()
    return TopicResponse.model_validate(topic)


@router.patch("/{topic_id}", response_model=TopicDetail)
async def update_topic(
    topic_id: UUID,
    request: TopicUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """
    Update a topic.
    
    Completing a topic for the first time stamps completed_at and schedules
    its spaced revisions in the same transaction. Un-completing keeps the
    existing schedule.
    """
    topic = await get_owned_topic(db, topic_id, current_user.id)
    newly_completed = request.completed is True and not topic.completed
    
    apply_updates(topic, request)
    
    if newly_completed:
        now = utcnow()
        topic.completed_at = now
        await RevisionScheduler(db).schedule_revisions(topic.id, now)
    elif request.completed is False:
        topic.completed_at = None
    
    await db.flush()
    
    pending = await db.execute(
        select(Revision)
        .where(Revision.topic_id == topic.id, Revision.completed.is_(False))
        .order_by(Revision.session_number)
    )
    return TopicDetail(
        **TopicResponse.model_validate(topic).model_dump(),
        pending_revisions=[
            RevisionResponse.model_validate(revision) for revision in pending.scalars().all()
        ],
    )


@router.delete("/{topic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_topic(topic_id: UUID, current_user: CurrentUser, db: DbSession):
    """Delete a topic and its revisions."""
    topic = await get_owned_topic(db, topic_id, current_user.id)
    await db.delete(topic)
    await db.flush()
