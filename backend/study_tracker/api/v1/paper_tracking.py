"""
Study Tracker - Practice Paper Tracking API
Flagged questions and timed sittings of a practice paper
"""
import logging
from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.core.exceptions import InvalidInputError
from study_tracker.models.curriculum import PracticePaperLog, PracticePaperQuestion
from study_tracker.schemas.curriculum import (
    PracticePaperLogCreate,
    PracticePaperLogResponse,
    PracticePaperQuestionCreate,
    PracticePaperQuestionResponse,
    PracticePaperQuestionUpdate,
)
from study_tracker.services.ownership import (
    apply_updates,
    get_owned_paper_question,
    get_owned_practice_paper,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Practice Papers"])


# ============================================================================
# Flagged questions
# ============================================================================

@router.get("/practice-paper-questions", response_model=list[PracticePaperQuestionResponse])
async def list_paper_questions(
    current_user: CurrentUser,
    db: DbSession,
    practice_paper_id: UUID = Query(...),
):
    """Questions flagged on a paper, most recent first."""
    await get_owned_practice_paper(db, practice_paper_id, current_user.id)
    result = await db.execute(
        select(PracticePaperQuestion)
        .where(PracticePaperQuestion.practice_paper_id == practice_paper_id)
        .order_by(PracticePaperQuestion.created_at.desc())
    )
    return result.scalars().all()


@router.post(
    "/practice-paper-questions",
    response_model=PracticePaperQuestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def flag_paper_question(
    request: PracticePaperQuestionCreate,
    current_user: CurrentUser,
    db: DbSession,
):
    """
    Flag a question on a paper.
    
    Each question number is tracked once per paper: flagging it again
    replaces its status and notes.
    """
    await get_owned_practice_paper(db, request.practice_paper_id, current_user.id)
    
    result = await db.execute(
        select(PracticePaperQuestion).where(
            PracticePaperQuestion.practice_paper_id == request.practice_paper_id,
            PracticePaperQuestion.question_number == request.question_number,
        )
    )
    question = result.scalar_one_or_none()
    if question is None:
        question = PracticePaperQuestion(**request.model_dump())
        db.add(question)
    else:
        question.status = request.status
        question.notes = request.notes
    
    await db.flush()
    return PracticePaperQuestionResponse.model_validate(question)


@router.patch("/practice-paper-questions/{question_id}", response_model=PracticePaperQuestionResponse)
async def update_paper_question(
    question_id: UUID,
    request: PracticePaperQuestionUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    question = await get_owned_paper_question(db, question_id, current_user.id)
    apply_updates(question, request)
    await db.flush()
    return PracticePaperQuestionResponse.model_validate(question)


@router.delete("/practice-paper-questions/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_paper_question(question_id: UUID, current_user: CurrentUser, db: DbSession):
    question = await get_owned_paper_question(db, question_id, current_user.id)
    await db.delete(question)
    await db.flush()


# ============================================================================
# Sittings
# ============================================================================

@router.get("/practice-paper-logs", response_model=list[PracticePaperLogResponse])
async def list_paper_logs(
    current_user: CurrentUser,
    db: DbSession,
    practice_paper_id: UUID = Query(...),
):
    """Sittings of a paper, most recent first."""
    await get_owned_practice_paper(db, practice_paper_id, current_user.id)
    result = await db.execute(
        select(PracticePaperLog)
        .where(PracticePaperLog.practice_paper_id == practice_paper_id)
        .order_by(PracticePaperLog.date.desc())
    )
    return result.scalars().all()


@router.post(
    "/practice-paper-logs",
    response_model=PracticePaperLogResponse,
    status_code=status.HTTP_201_CREATED,
)
async def log_paper_sitting(
    request: PracticePaperLogCreate,
    current_user: CurrentUser,
    db: DbSession,
):
    """
    Record a sitting of a paper.
    
    A sitting completes the paper when it is marked completed or reaches the
    paper's last question; the paper then takes the sitting's score. Once a
    paper is complete, further sittings must be marked completed (rework).
    """
    paper = await get_owned_practice_paper(db, request.practice_paper_id, current_user.id)
    if paper.completed and not request.completed:
        raise InvalidInputError("Paper already completed. Use rework option to add more logs.")
    
    is_complete = request.completed or (
        paper.total_questions is not None and request.question_end >= paper.total_questions
    )
    
    log = PracticePaperLog(**request.model_dump(exclude={"completed"}), completed=is_complete)
    db.add(log)
    
    if is_complete:
        paper.completed = True
        if request.score is not None:
            paper.score = request.score
        if request.total_marks is not None:
            paper.total_marks = request.total_marks
        logger.info("Practice paper %s completed", paper.id)
    
    await db.flush()
    return PracticePaperLogResponse.model_validate(log)
