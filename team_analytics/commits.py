"""
Weekly additions/deletions series for the contribution area chart.

The source series is first capped to COMMIT_WINDOW after its first record,
then sliced to the selected week indices. Deletions come out negative so the
two series diverge around zero.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import pandas as pd

from team_analytics.config import COMMIT_WINDOW
from team_analytics.dates import parse_timestamp, validate_week_range

log = logging.getLogger(__name__)


def format_week_starting(ts: pd.Timestamp) -> str:
    """``Jan 15, 2024`` style label."""
    return f"{ts.strftime('%b')} {ts.day}, {ts.year}"


def _count(value) -> int:
    if value is None or pd.isna(value):
        return 0
    return int(value)


def _parse_record(item) -> Optional[dict]:
    """Row for one ``[weekStart, additions, deletions]`` tuple, None if malformed."""
    if item is None or len(item) < 3:
        return None
    week_start = parse_timestamp(item[0])
    if week_start is None:
        return None
    try:
        additions, deletions = _count(item[1]), _count(item[2])
    except (ValueError, TypeError, OverflowError):
        return None
    return {
        "week_start": pd.Timestamp(week_start),
        "additions":  additions,
        "deletions":  deletions,
    }


def window_weekly_commits(
    weekly_commits: Sequence[Sequence],
    week_range,
) -> list[dict]:
    start_idx, end_idx = validate_week_range(week_range)
    if not weekly_commits:
        return []

    rows = []
    for item in weekly_commits:
        row = _parse_record(item)
        if row is None:
            log.debug(f"Dropping malformed weekly commit record: {item!r}")
            continue
        rows.append(row)
    if not rows:
        return []

    df = pd.DataFrame(rows)
    start_date = df["week_start"].iloc[0]
    end_date = start_date + COMMIT_WINDOW

    bounded = df[df["week_start"].between(start_date, end_date)].reset_index(drop=True)
    selected = bounded.iloc[start_idx:end_idx + 1]

    return [
        {
            "weekStarting": format_week_starting(row.week_start),
            "additions":    int(row.additions),
            "deletions":    -abs(int(row.deletions)),
        }
        for row in selected.itertuples(index=False)
    ]
