"""
Study Tracker - Revisions API
Due revisions and revision completion
"""
from uuid import UUID

from fastapi import APIRouter

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.schemas.curriculum import RevisionUpdate, RevisionWithTopic
from study_tracker.services.revision_scheduler import RevisionScheduler

router = APIRouter(prefix="/revisions", tags=["Revisions"])


@router.get("/pending", response_model=list[RevisionWithTopic])
async def list_pending_revisions(current_user: CurrentUser, db: DbSession):
    """Revisions due today or overdue, oldest first."""
    revisions = await RevisionScheduler(db).get_pending_revisions(current_user.id)
    return [RevisionWithTopic.model_validate(revision) for revision in revisions]


@router.patch("/{revision_id}", response_model=RevisionWithTopic)
async def update_revision(
    revision_id: UUID,
    request: RevisionUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Complete or reopen a revision, or edit its notes."""
    revision = await RevisionScheduler(db).update_revision(
        revision_id,
        current_user.id,
        completed=request.completed,
        notes=request.notes,
    )
    return RevisionWithTopic.model_validate(revision)
