"""
Study Tracker - Learning Projects API
Self-directed learning projects (courses, books) and the sessions logged
against them
"""
import logging
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.core.exceptions import NotFoundError
from study_tracker.models.session import LearningProject, LearningSession, ProjectStatus
from study_tracker.schemas.session import (
    LearningProjectCreate,
    LearningProjectDetail,
    LearningProjectResponse,
    LearningProjectUpdate,
    LearningSessionCreate,
    LearningSessionResponse,
)
from study_tracker.services.ownership import apply_updates, get_owned_project
from study_tracker.utils.dates import utcnow

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Learning"])


@router.get("/learning-projects", response_model=list[LearningProjectResponse])
async def list_learning_projects(current_user: CurrentUser, db: DbSession):
    """Projects with progress, most recently updated first."""
    result = await db.execute(
        select(LearningProject)
        .where(LearningProject.user_id == current_user.id)
        .order_by(LearningProject.updated_at.desc())
    )
    return [LearningProjectResponse.model_validate(p) for p in result.scalars().all()]


@router.post(
    "/learning-projects",
    response_model=LearningProjectResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_learning_project(
    request: LearningProjectCreate,
    current_user: CurrentUser,
    db: DbSession,
):
    project = LearningProject(user_id=current_user.id, **request.model_dump())
    db.add(project)
    await db.flush()
    return LearningProjectResponse.model_validate(project)


@router.get("/learning-projects/{project_id}", response_model=LearningProjectDetail)
async def get_learning_project(project_id: UUID, current_user: CurrentUser, db: DbSession):
    """A project with its sessions, newest first."""
    result = await db.execute(
        select(LearningProject)
        .where(LearningProject.id == project_id, LearningProject.user_id == current_user.id)
        .options(selectinload(LearningProject.sessions))
        .execution_options(populate_existing=True)
    )
    project = result.scalar_one_or_none()
    if project is None:
        raise NotFoundError("Learning project not found")
    return LearningProjectDetail.model_validate(project)


@router.patch("/learning-projects/{project_id}", response_model=LearningProjectResponse)
async def update_learning_project(
    project_id: UUID,
    request: LearningProjectUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    project = await get_owned_project(db, project_id, current_user.id)
    apply_updates(project, request)
    project.updated_at = utcnow()
    await db.flush()
    return LearningProjectResponse.model_validate(project)


@router.delete("/learning-projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_learning_project(project_id: UUID, current_user: CurrentUser, db: DbSession):
    """Delete a project and its sessions."""
    project = await get_owned_project(db, project_id, current_user.id)
    await db.delete(project)
    await db.flush()


@router.post(
    "/learning-sessions",
    response_model=LearningSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_learning_session(
    request: LearningSessionCreate,
    current_user: CurrentUser,
    db: DbSession,
):
    """
    Log a session against a project and roll it into the project's progress.
    
    completed_units grows by the units covered. days_spent counts distinct
    study days, so a second session on the same calendar day does not add
    one. The project is completed once completed_units reaches total_units.
    """
    project = await get_owned_project(db, request.project_id, current_user.id)
    now = utcnow()
    
    session = LearningSession(date=now, **request.model_dump())
    db.add(session)
    
    if project.last_studied is None or project.last_studied.date() != now.date():
        project.days_spent += 1
    project.completed_units += request.units_completed
    project.last_studied = now
    project.updated_at = now
    if project.total_units and project.completed_units >= project.total_units:
        if project.status != ProjectStatus.COMPLETED:
            logger.info("Learning project %s completed", project.id)
        project.status = ProjectStatus.COMPLETED
    else:
        project.status = ProjectStatus.IN_PROGRESS
    
    await db.flush()
    return LearningSessionResponse.model_validate(session)
