"""
Study Tracker - SAT Sessions API
SAT practice sessions, typically against a YouTube lesson
"""
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.models.session import SATSession
from study_tracker.schemas.session import SATSessionCreate, SATSessionResponse, SATSessionUpdate
from study_tracker.services.ownership import apply_updates, get_owned
from study_tracker.utils.youtube import extract_youtube_id

YOUTUBE_SOURCE = "youtube"

router = APIRouter(prefix="/sat-sessions", tags=["SAT Sessions"])


@router.get("", response_model=list[SATSessionResponse])
async def list_sat_sessions(current_user: CurrentUser, db: DbSession):
    result = await db.execute(
        select(SATSession)
        .where(SATSession.user_id == current_user.id)
        .order_by(SATSession.date.desc())
    )
    return result.scalars().all()


@router.post("", response_model=SATSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_sat_session(request: SATSessionCreate, current_user: CurrentUser, db: DbSession):
    """Log an SAT session; YouTube sessions get their video ID from the URL."""
    session = SATSession(user_id=current_user.id, **request.model_dump())
    session.video_id = _video_id_for(session)
    db.add(session)
    await db.flush()
    return SATSessionResponse.model_validate(session)


@router.get("/{session_id}", response_model=SATSessionResponse)
async def get_sat_session(session_id: UUID, current_user: CurrentUser, db: DbSession):
    return await get_owned(db, SATSession, session_id, current_user.id, label="SAT session")


@router.patch("/{session_id}", response_model=SATSessionResponse)
async def update_sat_session(
    session_id: UUID,
    request: SATSessionUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update an SAT session; a new URL or source re-derives the video ID."""
    session = await get_owned(db, SATSession, session_id, current_user.id, label="SAT session")
    changes = apply_updates(session, request)
    if "youtube_url" in changes or "source" in changes:
        session.video_id = _video_id_for(session)
    await db.flush()
    return SATSessionResponse.model_validate(session)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sat_session(session_id: UUID, current_user: CurrentUser, db: DbSession):
    session = await get_owned(db, SATSession, session_id, current_user.id, label="SAT session")
    await db.delete(session)
    await db.flush()


def _video_id_for(session: SATSession) -> str | None:
    if session.source != YOUTUBE_SOURCE:
        return None
    return extract_youtube_id(session.youtube_url)
