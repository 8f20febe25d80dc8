"""
Study Tracker - Dashboard API
Home dashboard, progress stats, activity calendar and the essay prompt of the day
"""
from typing import Literal

from fastapi import APIRouter, HTTPException, Query, status

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.schemas.dashboard import (
    ActivityDay,
    DailyTopicResponse,
    DashboardResponse,
    StatsResponse,
)
from study_tracker.services import essay_prompts
from study_tracker.services.dashboard import DashboardService

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(current_user: CurrentUser, db: DbSession):
    """Streaks, upcoming exams, due revisions, active projects and reminders."""
    return await DashboardService(db).get_dashboard(current_user.id)


@router.get("/stats", response_model=StatsResponse)
async def get_stats(current_user: CurrentUser, db: DbSession):
    """Writing practice counts and the study streak."""
    return await DashboardService(db).get_stats(current_user.id)


@router.get("/activity-calendar", response_model=list[ActivityDay])
async def get_activity_calendar(
    current_user: CurrentUser,
    db: DbSession,
    year: int | None = Query(default=None, ge=1970, le=9999),
    month: int | None = Query(default=None, ge=1, le=12),
):
    """
    Activity kinds per day.
    
    Pass year and month together for a calendar month; omit both for the
    recent trailing window.
    """
    return await DashboardService(db).get_activity_calendar(
        current_user.id, year=year, month=month
    )


@router.get("/daily-topic", response_model=DailyTopicResponse)
async def get_daily_topic(
    current_user: CurrentUser,
    topic_type: Literal["daily", "random"] = Query(default="daily", alias="type"),
):
    """Essay prompt of the day, or a random one."""
    if topic_type == "random":
        return DailyTopicResponse(**essay_prompts.get_random_topic())
    return DailyTopicResponse(**essay_prompts.get_daily_topic())


@router.get("/daily-topic/categories/{category}", response_model=list[str])
async def get_topics_by_category(category: str, current_user: CurrentUser):
    """Every prompt in one category."""
    prompts = essay_prompts.get_topics_by_category(category)
    if not prompts:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown category: {category}",
        )
    return prompts
