"""
Week/date arithmetic shared by every view.

Week indices are zero-based offsets from the course epoch. Weeks at or after
the recess are pushed back by the recess length, so ``week_to_date`` stays
strictly increasing while skipping the break on the calendar.
"""

from __future__ import annotations

import logging
import math
import numbers
from datetime import datetime, timedelta, timezone
from typing import Optional

import pandas as pd

from team_analytics.config import (
    BREAK_DURATION_WEEKS,
    BREAK_START_WEEK,
    COURSE_START_DATE,
)
from team_analytics.errors import InvalidRangeError

log = logging.getLogger(__name__)

END_OF_DAY = timedelta(days=6, hours=23, minutes=59, seconds=59, microseconds=999999)


def parse_timestamp(value) -> Optional[datetime]:
    """
    Coerce an ISO string, epoch seconds, or datetime to an aware UTC datetime.
    Naive values are read as UTC. Returns None for empty or unparseable input.
    """
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        if isinstance(value, numbers.Real):
            if math.isnan(value):
                return None
            ts = pd.to_datetime(value, unit="s", utc=True)
        else:
            ts = pd.to_datetime(value, utc=True)
    except (ValueError, TypeError, OverflowError) as exc:
        log.debug(f"Unparseable timestamp {value!r}: {exc}")
        return None
    if pd.isna(ts):
        return None
    return ts.to_pydatetime()


def week_to_date(
    week_index: int,
    epoch: datetime = COURSE_START_DATE,
    break_start_week: int = BREAK_START_WEEK,
    break_duration_weeks: int = BREAK_DURATION_WEEKS,
) -> datetime:
    """Start of the teaching week ``week_index`` weeks after ``epoch``."""
    if week_index < 0:
        raise InvalidRangeError(f"Week index must be >= 0, got {week_index}")

    start = parse_timestamp(epoch)
    date = start + timedelta(weeks=week_index)
    if week_index >= break_start_week:
        date += timedelta(weeks=break_duration_weeks)
    return date


def end_of_week(date: datetime) -> datetime:
    """Last instant of the seven-day window starting on ``date``'s day."""
    day = date.replace(hour=0, minute=0, second=0, microsecond=0)
    return day + END_OF_DAY


def validate_week_range(week_range) -> tuple[int, int]:
    try:
        start, end = week_range
    except (TypeError, ValueError):
        raise InvalidRangeError(
            f"Week range must be a (start, end) pair, got {week_range!r}"
        ) from None

    for index in (start, end):
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise InvalidRangeError(
                f"Week indices must be integers, got ({start!r}, {end!r})", (start, end)
            )
    if start < 0 or end < 0:
        raise InvalidRangeError(
            f"Week indices must be >= 0, got ({start}, {end})", (start, end)
        )
    if start > end:
        raise InvalidRangeError(
            f"Week range start {start} is after end {end}", (start, end)
        )
    return int(start), int(end)


def week_range_bounds(
    week_range,
    epoch: datetime = COURSE_START_DATE,
    break_start_week: int = BREAK_START_WEEK,
    break_duration_weeks: int = BREAK_DURATION_WEEKS,
) -> tuple[datetime, datetime]:
    """Inclusive ``[start, end]`` datetimes covered by a week range."""
    start, end = validate_week_range(week_range)
    start_date = week_to_date(start, epoch, break_start_week, break_duration_weeks)
    end_date = end_of_week(
        week_to_date(end, epoch, break_start_week, break_duration_weeks)
    )
    return start_date, end_date


def current_week(
    today: Optional[datetime] = None,
    epoch: datetime = COURSE_START_DATE,
    break_start_week: int = BREAK_START_WEEK,
    break_duration_weeks: int = BREAK_DURATION_WEEKS,
) -> int:
    """
    Teaching week containing ``today``. Days inside the recess belong to the
    last week before it; days before the epoch belong to week 0.
    """
    now = parse_timestamp(today) if today is not None else datetime.now(timezone.utc)
    elapsed = (now - parse_timestamp(epoch)).days // 7
    if elapsed < 0:
        return 0
    if elapsed >= break_start_week + break_duration_weeks:
        return elapsed - break_duration_weeks
    if elapsed >= break_start_week:
        return max(break_start_week - 1, 0)
    return elapsed


def cumulative_week_ranges(total_weeks: int) -> list[tuple[int, int]]:
    """Ranges (0, 1), (0, 2) … (0, total_weeks - 1) for a semester sweep."""
    return [(0, i) for i in range(1, total_weeks)]
