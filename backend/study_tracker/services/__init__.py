"""Study Tracker - Services initialization."""
from study_tracker.services.auth import (
    AuthService,
    AuthenticationError,
    InvalidCredentialsError,
    EmailAlreadyRegisteredError,
)
from study_tracker.services.revision_scheduler import RevisionScheduler, REVISION_INTERVALS
from study_tracker.services.streaks import StreakResult, compute_streak, unified_streak
from study_tracker.services.dashboard import DashboardService

__all__ = [
    "AuthService",
    "AuthenticationError",
    "InvalidCredentialsError",
    "EmailAlreadyRegisteredError",
    "RevisionScheduler",
    "REVISION_INTERVALS",
    "StreakResult",
    "compute_streak",
    "unified_streak",
    "DashboardService",
]
