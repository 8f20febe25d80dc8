"""
Study Tracker - Dashboard Service
Read-only aggregates over a user's records: the home dashboard, progress
stats and the activity calendar.
"""
import calendar
import uuid
from collections import defaultdict
from datetime import date, datetime, timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.core.config import settings
from study_tracker.core.exceptions import InvalidInputError
from study_tracker.models.curriculum import PracticePaper, Subject
from study_tracker.models.exam import Exam
from study_tracker.models.session import (
    LearningProject,
    LearningSession,
    ProjectStatus,
    SATSession,
    StudySession,
)
from study_tracker.models.writing import ErrorLog, Essay, GrammarRule, GrammarStatus, Vocabulary
from study_tracker.schemas.curriculum import PracticePaperResponse, RevisionWithTopic
from study_tracker.schemas.dashboard import (
    ActivityDay,
    DashboardCounts,
    DashboardResponse,
    EssayStats,
    ErrorStats,
    GrammarStats,
    StatsResponse,
    StreakSummary,
    StudyStreakStats,
    VocabularyStats,
    WordCountPoint,
)
from study_tracker.schemas.exam import ExamCountdown
from study_tracker.schemas.session import LearningProjectResponse
from study_tracker.services.revision_scheduler import RevisionScheduler
from study_tracker.services.streaks import compute_streak, distinct_days, unified_streak
from study_tracker.utils.dates import days_until, end_of_day, start_of_day, start_of_week, utcnow


class DashboardService:
    """Builds the dashboard, stats and calendar payloads for one user."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _count(self, model, *conditions) -> int:
        result = await self.db.execute(select(func.count()).select_from(model).where(*conditions))
        return result.scalar_one()

    async def _dates(self, statement) -> list[datetime]:
        result = await self.db.execute(statement)
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    async def get_dashboard(
        self,
        user_id: uuid.UUID,
        now: datetime | None = None,
    ) -> DashboardResponse:
        """
        Assemble the home dashboard.

        Streaks are computed per activity type (study sessions, SAT sessions,
        learning sessions); the unified streak is the best current one.
        """
        now = now or utcnow()
        limit = settings.DASHBOARD_LIST_LIMIT

        exams_result = await self.db.execute(
            select(Exam)
            .where(Exam.user_id == user_id, Exam.completed.is_(False))
            .order_by(Exam.exam_date)
            .limit(limit)
        )
        upcoming_exams = [
            ExamCountdown.from_exam(exam, days_until(exam.exam_date, now))
            for exam in exams_result.scalars().all()
        ]
        total_exams = await self._count(Exam, Exam.user_id == user_id, Exam.completed.is_(False))

        pending = await RevisionScheduler(self.db).get_pending_revisions(user_id, as_of=now)

        projects_result = await self.db.execute(
            select(LearningProject)
            .where(
                LearningProject.user_id == user_id,
                LearningProject.status == ProjectStatus.IN_PROGRESS,
            )
            .order_by(LearningProject.last_studied.desc().nulls_last())
            .limit(limit)
        )
        active_projects = list(projects_result.scalars().all())
        active_project_count = await self._count(
            LearningProject,
            LearningProject.user_id == user_id,
            LearningProject.status == ProjectStatus.IN_PROGRESS,
        )

        reminders_result = await self.db.execute(
            select(PracticePaper)
            .join(PracticePaper.subject)
            .where(
                Subject.user_id == user_id,
                PracticePaper.reminder_date.is_not(None),
                PracticePaper.reminder_date <= now + timedelta(days=settings.REMINDER_WINDOW_DAYS),
            )
            .order_by(PracticePaper.reminder_date)
        )

        study = compute_streak(
            await self._dates(select(StudySession.date).where(StudySession.user_id == user_id)),
            now,
        )
        sat = compute_streak(
            await self._dates(select(SATSession.date).where(SATSession.user_id == user_id)),
            now,
        )
        learning = compute_streak(
            await self._dates(
                select(LearningSession.date)
                .join(LearningSession.project)
                .where(LearningProject.user_id == user_id)
            ),
            now,
        )

        return DashboardResponse(
            streaks=StreakSummary(
                unified=unified_streak({
                    "study": study.current,
                    "sat": sat.current,
                    "learning": learning.current,
                }),
                study=study.current,
                sat=sat.current,
                learning=learning.current,
                longest=max(study.longest, sat.longest, learning.longest),
            ),
            upcoming_exams=upcoming_exams,
            pending_revisions=[
                RevisionWithTopic.model_validate(revision) for revision in pending[:limit]
            ],
            active_learning_projects=[
                LearningProjectResponse.model_validate(project) for project in active_projects
            ],
            upcoming_reminders=[
                PracticePaperResponse.model_validate(paper)
                for paper in reminders_result.scalars().all()
            ],
            stats=DashboardCounts(
                total_exams=total_exams,
                total_revisions_due=len(pending),
                active_projects=active_project_count,
            ),
        )

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------

    async def get_stats(
        self,
        user_id: uuid.UUID,
        now: datetime | None = None,
    ) -> StatsResponse:
        """Counts, essay word-count trend and the study streak."""
        now = now or utcnow()

        grammar_total = await self._count(GrammarRule, GrammarRule.user_id == user_id)
        grammar_understood = await self._count(
            GrammarRule,
            GrammarRule.user_id == user_id,
            GrammarRule.status == GrammarStatus.UNDERSTOOD,
        )

        vocab_total = await self._count(Vocabulary, Vocabulary.user_id == user_id)
        vocab_learned = await self._count(
            Vocabulary, Vocabulary.user_id == user_id, Vocabulary.learned.is_(True)
        )
        vocab_this_week = await self._count(
            Vocabulary,
            Vocabulary.user_id == user_id,
            Vocabulary.created_at >= start_of_week(now),
        )

        essays_result = await self.db.execute(
            select(Essay.created_at, Essay.word_count)
            .where(Essay.user_id == user_id)
            .order_by(Essay.created_at)
        )
        trend = [
            WordCountPoint(date=created_at, word_count=word_count)
            for created_at, word_count in essays_result.all()
        ]

        error_total = await self._count(ErrorLog, ErrorLog.user_id == user_id)
        error_unresolved = await self._count(
            ErrorLog, ErrorLog.user_id == user_id, ErrorLog.resolved.is_(False)
        )

        session_dates = await self._dates(
            select(StudySession.date)
            .where(StudySession.user_id == user_id)
            .order_by(StudySession.date.desc())
            .limit(settings.STATS_SESSION_LIMIT)
        )
        streak = compute_streak(session_dates, now)
        study_days = distinct_days(session_dates)
        days_missed = 0
        if study_days:
            days_since_start = (now.date() - study_days[-1]).days
            days_missed = max(0, days_since_start - len(study_days) + 1)

        return StatsResponse(
            grammar=GrammarStats(
                total=grammar_total,
                understood=grammar_understood,
                needs_work=grammar_total - grammar_understood,
            ),
            vocabulary=VocabularyStats(
                total=vocab_total,
                learned=vocab_learned,
                this_week=vocab_this_week,
            ),
            essays=EssayStats(total=len(trend), word_count_trend=trend),
            errors=ErrorStats(total=error_total, unresolved=error_unresolved),
            streak=StudyStreakStats(
                current=streak.current,
                longest=streak.longest,
                total_days=len(study_days),
                days_missed=days_missed,
            ),
        )

    # ------------------------------------------------------------------
    # Activity calendar
    # ------------------------------------------------------------------

    async def get_activity_calendar(
        self,
        user_id: uuid.UUID,
        year: int | None = None,
        month: int | None = None,
        now: datetime | None = None,
    ) -> list[ActivityDay]:
        """
        Activity kinds per calendar day, oldest first.

        Covers the given month, or the trailing ACTIVITY_CALENDAR_DAYS days
        when no month is given.

        Raises:
            InvalidInputError: If only one of year and month is supplied
        """
        if (year is None) != (month is None):
            raise InvalidInputError("Year and month must be given together")

        if year is not None and month is not None:
            start = start_of_day(date(year, month, 1))
            last_day = calendar.monthrange(year, month)[1]
            end = end_of_day(date(year, month, last_day))
        else:
            end = now or utcnow()
            start = end - timedelta(days=settings.ACTIVITY_CALENDAR_DAYS)

        days: dict[date, set[str]] = defaultdict(set)

        study_result = await self.db.execute(
            select(StudySession.date, StudySession.activities).where(
                StudySession.user_id == user_id,
                StudySession.date.between(start, end),
            )
        )
        for session_date, activities in study_result.all():
            days[session_date.date()].add("study")
            days[session_date.date()].update(activities or [])

        dated_sources = (
            ("sat", select(SATSession.date).where(
                SATSession.user_id == user_id, SATSession.date.between(start, end)
            )),
            ("learning", select(LearningSession.date).join(LearningSession.project).where(
                LearningProject.user_id == user_id, LearningSession.date.between(start, end)
            )),
            ("grammar", select(GrammarRule.created_at).where(
                GrammarRule.user_id == user_id, GrammarRule.created_at.between(start, end)
            )),
            ("vocabulary", select(Vocabulary.created_at).where(
                Vocabulary.user_id == user_id, Vocabulary.created_at.between(start, end)
            )),
            ("essay", select(Essay.created_at).where(
                Essay.user_id == user_id, Essay.created_at.between(start, end)
            )),
            ("error", select(ErrorLog.created_at).where(
                ErrorLog.user_id == user_id, ErrorLog.created_at.between(start, end)
            )),
        )
        for activity, statement in dated_sources:
            for moment in await self._dates(statement):
                days[moment.date()].add(activity)

        return [
            ActivityDay(date=day, activities=sorted(activities))
            for day, activities in sorted(days.items())
        ]
