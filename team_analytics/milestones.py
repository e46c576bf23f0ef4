"""Milestone issue bars for the selected week range."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Mapping, Optional

import pandas as pd

from team_analytics.config import COURSE_START_DATE
from team_analytics.dates import parse_timestamp, week_range_bounds

log = logging.getLogger(__name__)


def _parse_milestone(m: Mapping) -> Optional[dict]:
    title = m.get("title")
    created_at = parse_timestamp(m.get("created_at"))
    if not title or created_at is None:
        return None
    try:
        open_issues = int(m.get("open_issues") or 0)
        closed_issues = int(m.get("closed_issues") or 0)
    except (ValueError, TypeError, OverflowError):
        return None
    return {
        "milestoneTitle": title,
        "Open Issues":    open_issues,
        "Closed Issues":  closed_issues,
        "createdAt":      created_at,
    }


def _milestone_frame(milestones: Iterable[Mapping]) -> pd.DataFrame:
    rows = []
    for m in milestones:
        row = _parse_milestone(m)
        if row is None:
            log.debug(f"Dropping malformed milestone: {m!r}")
            continue
        rows.append(row)
    return pd.DataFrame(
        rows, columns=["milestoneTitle", "Open Issues", "Closed Issues", "createdAt"]
    )


def build_milestone_series(
    milestones: Iterable[Mapping],
    start_date: datetime,
    end_date: datetime,
) -> list[dict]:
    """
    Milestones created inside ``[start_date, end_date]``, oldest first.
    Equal timestamps keep their input order.
    """
    df = _milestone_frame(milestones)
    if df.empty:
        return []

    df = df.sort_values("createdAt", kind="stable")
    in_range = df[
        (df["createdAt"] >= parse_timestamp(start_date))
        & (df["createdAt"] <= parse_timestamp(end_date))
    ]

    return [
        {
            "milestoneTitle": row["milestoneTitle"],
            "Open Issues":    int(row["Open Issues"]),
            "Closed Issues":  int(row["Closed Issues"]),
            "createdAt":      row["createdAt"].to_pydatetime(),
        }
        for _, row in in_range.iterrows()
    ]


def milestone_series_for_weeks(
    milestones: Iterable[Mapping],
    week_range,
    epoch: datetime = COURSE_START_DATE,
    **calendar,
) -> list[dict]:
    start_date, end_date = week_range_bounds(week_range, epoch, **calendar)
    return build_milestone_series(milestones, start_date, end_date)
