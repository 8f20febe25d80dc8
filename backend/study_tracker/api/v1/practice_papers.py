"""
Study Tracker - Practice Papers API
Past-paper question ranges with optional follow-up reminders
"""
from datetime import datetime, timedelta
from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.core.exceptions import InvalidInputError, NotFoundError
from study_tracker.models.curriculum import PracticePaper, Subject, Topic
from study_tracker.schemas.curriculum import (
    PracticePaperCreate,
    PracticePaperResponse,
    PracticePaperUpdate,
)
from study_tracker.services.ownership import (
    apply_updates,
    get_owned_practice_paper,
    get_owned_subject,
)
from study_tracker.utils.dates import utcnow

router = APIRouter(prefix="/practice-papers", tags=["Practice Papers"])


def reminder_date_for(reminder_days: int | None, now: datetime) -> datetime | None:
    """Reminder falls `reminder_days` after now; zero or unset means none."""
    if not reminder_days:
        return None
    return now + timedelta(days=reminder_days)


@router.get("", response_model=list[PracticePaperResponse])
async def list_practice_papers(
    current_user: CurrentUser,
    db: DbSession,
    subject_id: UUID | None = Query(default=None),
    topic_id: UUID | None = Query(default=None),
):
    """The user's practice papers, newest first, optionally filtered."""
    query = (
        select(PracticePaper)
        .join(PracticePaper.subject)
        .where(Subject.user_id == current_user.id)
        .order_by(PracticePaper.created_at.desc())
    )
    if subject_id is not None:
        query = query.where(PracticePaper.subject_id == subject_id)
    if topic_id is not None:
        query = query.where(PracticePaper.topic_id == topic_id)
    
    result = await db.execute(query)
    return result.scalars().all()


@router.post("", response_model=PracticePaperResponse, status_code=status.HTTP_201_CREATED)
async def create_practice_paper(
    request: PracticePaperCreate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Record a practice paper against a subject and, optionally, one of its topics."""
    await get_owned_subject(db, request.subject_id, current_user.id)
    if request.topic_id is not None:
        topic = await db.get(Topic, request.topic_id)
        if topic is None or topic.subject_id != request.subject_id:
            raise NotFoundError("Topic not found")
    
    paper = PracticePaper(
        **request.model_dump(),
        reminder_date=reminder_date_for(request.reminder_days, utcnow()),
    )
    db.add(paper)
    await db.flush()
    return PracticePaperResponse.model_validate(paper)


@router.patch("/{paper_id}", response_model=PracticePaperResponse)
async def update_practice_paper(
    paper_id: UUID,
    request: PracticePaperUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update a practice paper; changing reminder_days moves the reminder."""
    paper = await get_owned_practice_paper(db, paper_id, current_user.id)
    previous_reminder_days = paper.reminder_days
    
    apply_updates(paper, request)
    if paper.question_end < paper.question_start:
        raise InvalidInputError("question_end must not be before question_start")
    if "reminder_days" in request.model_fields_set and paper.reminder_days != previous_reminder_days:
        paper.reminder_date = reminder_date_for(paper.reminder_days, utcnow())
    
    await db.flush()
    return PracticePaperResponse.model_validate(paper)


@router.delete("/{paper_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_practice_paper(paper_id: UUID, current_user: CurrentUser, db: DbSession):
    paper = await get_owned_practice_paper(db, paper_id, current_user.id)
    await db.delete(paper)
    await db.flush()
