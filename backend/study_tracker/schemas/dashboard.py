"""
Study Tracker - Dashboard & Stats Schemas
Read-only aggregate payloads
"""
from datetime import date, datetime

from pydantic import BaseModel

from study_tracker.schemas.curriculum import PracticePaperResponse, RevisionWithTopic
from study_tracker.schemas.exam import ExamCountdown
from study_tracker.schemas.session import LearningProjectResponse


class StreakSummary(BaseModel):
    """Current streak per activity type plus the best of them."""
    unified: int
    study: int
    sat: int
    learning: int
    longest: int


class DashboardCounts(BaseModel):
    total_exams: int
    total_revisions_due: int
    active_projects: int


class DashboardResponse(BaseModel):
    """Everything the home screen shows, in one payload."""
    streaks: StreakSummary
    upcoming_exams: list[ExamCountdown]
    pending_revisions: list[RevisionWithTopic]
    active_learning_projects: list[LearningProjectResponse]
    upcoming_reminders: list[PracticePaperResponse]
    stats: DashboardCounts


class GrammarStats(BaseModel):
    total: int
    understood: int
    needs_work: int


class VocabularyStats(BaseModel):
    total: int
    learned: int
    this_week: int


class WordCountPoint(BaseModel):
    date: datetime
    word_count: int


class EssayStats(BaseModel):
    total: int
    word_count_trend: list[WordCountPoint]


class ErrorStats(BaseModel):
    total: int
    unresolved: int


class StudyStreakStats(BaseModel):
    current: int
    longest: int
    total_days: int
    days_missed: int


class StatsResponse(BaseModel):
    """Progress statistics across language practice and study sessions."""
    grammar: GrammarStats
    vocabulary: VocabularyStats
    essays: EssayStats
    errors: ErrorStats
    streak: StudyStreakStats


class ActivityDay(BaseModel):
    """Kinds of activity recorded on one calendar day."""
    date: date
    activities: list[str]


class DailyTopicResponse(BaseModel):
    """An essay prompt and the category it was drawn from."""
    category: str
    prompt: str
