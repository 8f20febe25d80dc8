"""
Date arithmetic helpers.

All timestamps are stored as naive UTC datetimes; these helpers assume that
convention and never attach tzinfo.
"""
import math
from datetime import date, datetime, time, timedelta, timezone

SECONDS_PER_DAY = 24 * 60 * 60


def utcnow() -> datetime:
    """Current moment as a naive UTC datetime (the storage convention)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_date(value: date | datetime) -> date:
    """Strip the time-of-day from a datetime; dates pass through unchanged."""
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_day(value: date | datetime) -> datetime:
    """Midnight at the start of the value's calendar day."""
    return datetime.combine(to_date(value), time.min)


def end_of_day(value: date | datetime) -> datetime:
    """Last representable instant (23:59:59.999999) of the value's calendar day."""
    return datetime.combine(to_date(value), time.max)


def add_days(moment: datetime, days: int) -> datetime:
    """Shift a moment by whole days, keeping its time-of-day."""
    return moment + timedelta(days=days)


def days_until(moment: datetime, now: datetime | None = None) -> int:
    """
    Whole days remaining until `moment`, rounded up.
    
    An exam 36 hours away is 2 days out; one that started 12 hours ago is 0.
    """
    now = now or utcnow()
    return math.ceil((moment - now).total_seconds() / SECONDS_PER_DAY)


def start_of_week(value: date | datetime) -> datetime:
    """Sunday 00:00 of the week containing `value`."""
    day = to_date(value)
    # weekday(): Monday=0 ... Sunday=6
    offset = (day.weekday() + 1) % 7
    return start_of_day(day - timedelta(days=offset))


def count_words(text: str | None) -> int:
    """Number of whitespace-separated tokens in `text`."""
    if not text:
        return 0
    return len(text.split())
