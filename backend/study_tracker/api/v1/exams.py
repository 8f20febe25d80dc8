"""
Study Tracker - Exams API
Upcoming exams with a day countdown
"""
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.models.exam import Exam
from study_tracker.schemas.exam import ExamCountdown, ExamCreate, ExamResponse, ExamUpdate
from study_tracker.services.ownership import apply_updates, get_owned, get_owned_subject
from study_tracker.utils.dates import days_until, utcnow

router = APIRouter(prefix="/exams", tags=["Exams"])


@router.get("", response_model=list[ExamCountdown])
async def list_exams(current_user: CurrentUser, db: DbSession):
    """Incomplete exams, soonest first, with days remaining."""
    result = await db.execute(
        select(Exam)
        .where(Exam.user_id == current_user.id, Exam.completed.is_(False))
        .order_by(Exam.exam_date)
    )
    now = utcnow()
    return [
        ExamCountdown.from_exam(exam, days_until(exam.exam_date, now))
        for exam in result.scalars().all()
    ]


@router.post("", response_model=ExamResponse, status_code=status.HTTP_201_CREATED)
async def create_exam(request: ExamCreate, current_user: CurrentUser, db: DbSession):
    """Add an exam, optionally linked to one of the user's subjects."""
    if request.subject_id is not None:
        await get_owned_subject(db, request.subject_id, current_user.id)
    
    exam = Exam(user_id=current_user.id, **request.model_dump())
    db.add(exam)
    await db.flush()
    return ExamResponse.model_validate(exam)


@router.patch("/{exam_id}", response_model=ExamResponse)
async def update_exam(
    exam_id: UUID,
    request: ExamUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update an exam."""
    exam = await get_owned(db, Exam, exam_id, current_user.id)
    apply_updates(exam, request)
    await db.flush()
    return ExamResponse.model_validate(exam)


@router.delete("/{exam_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exam(exam_id: UUID, current_user: CurrentUser, db: DbSession):
    """Delete an exam."""
    exam = await get_owned(db, Exam, exam_id, current_user.id)
    await db.delete(exam)
    await db.flush()
