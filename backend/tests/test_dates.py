"""
Study Tracker - Date and Text Helper Tests
"""
from datetime import date, datetime, time

import pytest

from study_tracker.utils.dates import (
    add_days,
    count_words,
    days_until,
    end_of_day,
    start_of_day,
    start_of_week,
    to_date,
)
from study_tracker.utils.youtube import extract_youtube_id


def test_day_bounds():
    moment = datetime(2026, 5, 4, 13, 45, 12)
    assert start_of_day(moment) == datetime(2026, 5, 4, 0, 0)
    assert end_of_day(moment) == datetime.combine(date(2026, 5, 4), time.max)
    assert to_date(moment) == date(2026, 5, 4)


def test_add_days_keeps_time_of_day():
    assert add_days(datetime(2026, 1, 30, 18, 0), 3) == datetime(2026, 2, 2, 18, 0)


@pytest.mark.parametrize(
    "exam, expected",
    [
        (datetime(2026, 6, 2, 9, 0), 1),     # exactly one day away
        (datetime(2026, 6, 2, 21, 0), 2),    # a day and a half rounds up
        (datetime(2026, 6, 1, 10, 0), 1),    # later today
        (datetime(2026, 5, 31, 21, 0), 0),   # started twelve hours ago
    ],
)
def test_days_until(exam, expected):
    now = datetime(2026, 6, 1, 9, 0)
    assert days_until(exam, now) == expected


def test_start_of_week_is_sunday():
    # 2026-03-18 is a Wednesday
    assert start_of_week(datetime(2026, 3, 18, 15, 0)) == datetime(2026, 3, 15)
    assert start_of_week(date(2026, 3, 15)) == datetime(2026, 3, 15)
    assert start_of_week(date(2026, 3, 21)) == datetime(2026, 3, 15)


def test_count_words():
    assert count_words("The  quick\nbrown fox ") == 4
    assert count_words("") == 0
    assert count_words(None) == 0


@pytest.mark.parametrize(
    "url, video_id",
    [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ?t=30", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ?start=10", "dQw4w9WgXcQ"),
        ("https://vimeo.com/12345", None),
        (None, None),
    ],
)
def test_extract_youtube_id(url, video_id):
    assert extract_youtube_id(url) == video_id
