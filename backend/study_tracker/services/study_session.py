"""
Study Tracker - Daily Study Session Logging

Adding grammar, vocabulary or an essay counts as studying that day. One study
session per day is kept; later activities are appended to it.
"""
import uuid
from datetime import datetime, timedelta

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.core.config import settings
from study_tracker.models.session import StudySession
from study_tracker.utils.dates import start_of_day, utcnow

AUTO_LOGGED_ACTIVITIES = ("grammar", "vocabulary", "essay")


async def log_daily_study_session(
    db: AsyncSession,
    user_id: uuid.UUID,
    activity: str,
    now: datetime | None = None,
) -> StudySession:
    """
    Record `activity` against today's study session, creating it if needed.
    
    Returns:
        The session for today
    """
    if activity not in AUTO_LOGGED_ACTIVITIES:
        raise ValueError(f"Unsupported activity: {activity}")
    
    day_start = start_of_day(now or utcnow())
    result = await db.execute(
        select(StudySession)
        .where(
            StudySession.user_id == user_id,
            StudySession.date >= day_start,
            StudySession.date < day_start + timedelta(days=1),
        )
        .order_by(StudySession.date)
        .limit(1)
    )
    session = result.scalar_one_or_none()
    
    if session is None:
        session = StudySession(
            user_id=user_id,
            date=day_start,
            activities=[activity],
            duration=settings.DEFAULT_STUDY_SESSION_MINUTES,
        )
        db.add(session)
    elif activity not in (session.activities or []):
        # Reassign so the JSON column is flagged as changed
        session.activities = [*(session.activities or []), activity]
    
    await db.flush()
    return session
