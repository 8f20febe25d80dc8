"""
Study Tracker - Error Log API
Mistakes the user has made and their corrections
"""
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.models.writing import ErrorLog
from study_tracker.schemas.writing import ErrorLogCreate, ErrorLogResponse, ErrorLogUpdate
from study_tracker.services.ownership import apply_updates, get_owned
from study_tracker.utils.dates import utcnow

router = APIRouter(prefix="/errors", tags=["Error Log"])


@router.get("", response_model=list[ErrorLogResponse])
async def list_errors(current_user: CurrentUser, db: DbSession):
    result = await db.execute(
        select(ErrorLog)
        .where(ErrorLog.user_id == current_user.id)
        .order_by(ErrorLog.created_at.desc())
    )
    return result.scalars().all()


@router.post("", response_model=ErrorLogResponse, status_code=status.HTTP_201_CREATED)
async def create_error(request: ErrorLogCreate, current_user: CurrentUser, db: DbSession):
    entry = ErrorLog(user_id=current_user.id, **request.model_dump())
    db.add(entry)
    await db.flush()
    return ErrorLogResponse.model_validate(entry)


@router.patch("/{error_id}", response_model=ErrorLogResponse)
async def update_error(
    error_id: UUID,
    request: ErrorLogUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update a logged mistake; resolving it stamps resolved_at."""
    entry = await get_owned(db, ErrorLog, error_id, current_user.id, label="Error")
    changes = apply_updates(entry, request)
    if changes.get("resolved") is True and entry.resolved_at is None:
        entry.resolved_at = utcnow()
    elif changes.get("resolved") is False:
        entry.resolved_at = None
    await db.flush()
    return ErrorLogResponse.model_validate(entry)


@router.delete("/{error_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_error(error_id: UUID, current_user: CurrentUser, db: DbSession):
    entry = await get_owned(db, ErrorLog, error_id, current_user.id, label="Error")
    await db.delete(entry)
    await db.flush()
