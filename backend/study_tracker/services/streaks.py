"""
Study Tracker - Streak Calculation
Pure functions, no DB access.

A streak is the number of consecutive calendar days with at least one
qualifying activity. The current streak only counts while its most recent
day is today or yesterday; the longest streak is the best run anywhere
in the history.
"""
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from study_tracker.utils.dates import to_date


@dataclass(frozen=True)
class StreakResult:
    """Current and longest consecutive-day streaks."""
    current: int = 0
    longest: int = 0


def distinct_days(values: Iterable[date | datetime]) -> list[date]:
    """Normalize to calendar dates, drop same-day duplicates, most recent first."""
    return sorted({to_date(value) for value in values}, reverse=True)


def compute_streak(
    session_dates: Iterable[date | datetime],
    today: date | datetime,
) -> StreakResult:
    """
    Compute the current and longest streaks from activity dates.

    Days are scanned most-recent-first. Two neighbouring days are contiguous
    only when exactly one day apart; any larger gap closes the run being
    scanned and starts a new one.

    Args:
        session_dates: Dates or datetimes of qualifying activity, any order.
        today: Reference day for the current streak.

    Returns:
        StreakResult(current, longest)
    """
    days = distinct_days(session_dates)
    if not days:
        return StreakResult()

    today = to_date(today)
    yesterday = today - timedelta(days=1)

    # The most recent run is "live" only if it touches today or yesterday
    in_current_run = days[0] in (today, yesterday)
    current = 1 if in_current_run else 0
    temp = 1
    longest = 0

    for newer, older in zip(days, days[1:]):
        if (newer - older).days == 1:
            temp += 1
            if in_current_run:
                current += 1
        else:
            longest = max(longest, temp)
            temp = 1
            in_current_run = False

    longest = max(longest, temp, current)
    return StreakResult(current=current, longest=longest)


def unified_streak(streaks: Mapping[str, int]) -> int:
    """Best streak across activity types (0 when there are none)."""
    return max(streaks.values(), default=0)
