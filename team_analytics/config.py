"""Shared constants: course calendar, commit horizon, status colours."""

from __future__ import annotations

import os
from datetime import datetime, timezone

import pandas as pd

# ── Course calendar ──────────────────────────────────────────────────────────
def parse_start_date(value: str) -> datetime:
    """ISO date for the course epoch; naive values are UTC, offsets are kept."""
    start = datetime.fromisoformat(value)
    if start.tzinfo is None:
        return start.replace(tzinfo=timezone.utc)
    return start.astimezone(timezone.utc)


COURSE_START_DATE = parse_start_date(
    os.environ.get("TEAM_ANALYTICS_START_DATE", "2024-01-15")
)
BREAK_START_WEEK     = int(os.environ.get("TEAM_ANALYTICS_BREAK_START_WEEK", "6"))
BREAK_DURATION_WEEKS = int(os.environ.get("TEAM_ANALYTICS_BREAK_WEEKS", "1"))
TOTAL_WEEKS          = 15

# ── Weekly commit series ─────────────────────────────────────────────────────
# 3.5 months from the first record; keep unless product asks otherwise.
COMMIT_WINDOW = pd.DateOffset(months=3, days=15)

# ── Review status colours ────────────────────────────────────────────────────
COLOR_APPROVED  = "green"
COLOR_DISMISSED = "gray"
COLOR_COMMENTED = "blue"
COLOR_DEFAULT   = "red"

MILESTONE_SERIES = ["Open Issues", "Closed Issues"]
ACTIVITY_SERIES  = ["Pull Requests", "Code Reviews", "Comments"]
