"""
Study Tracker - Study Sessions API
Logged study days; these drive the study streak
"""
from fastapi import APIRouter, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.models.session import StudySession
from study_tracker.schemas.session import StudySessionCreate, StudySessionResponse

router = APIRouter(prefix="/study-sessions", tags=["Study Sessions"])


@router.get("", response_model=list[StudySessionResponse])
async def list_study_sessions(current_user: CurrentUser, db: DbSession):
    """Study sessions, most recent first."""
    result = await db.execute(
        select(StudySession)
        .where(StudySession.user_id == current_user.id)
        .order_by(StudySession.date.desc())
    )
    return result.scalars().all()


@router.post("", response_model=StudySessionResponse, status_code=status.HTTP_201_CREATED)
async def create_study_session(
    request: StudySessionCreate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Log a study session now."""
    session = StudySession(user_id=current_user.id, **request.model_dump())
    db.add(session)
    await db.flush()
    return StudySessionResponse.model_validate(session)
