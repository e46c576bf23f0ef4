"""Per-contributor PR, review and comment counts inside a date window."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Mapping, Optional

from team_analytics.dates import parse_timestamp

UNKNOWN_USER = "Unknown"


def _in_range(value, start: datetime, end: datetime) -> bool:
    when = parse_timestamp(value)
    return when is not None and start <= when <= end


def contributor_activity(
    prs: Iterable[Mapping],
    start: datetime,
    end: datetime,
    members: Optional[Iterable[Mapping]] = None,
) -> list[dict]:
    """
    Rows ``{name, gitHandle, Pull Requests, Code Reviews, Comments}``.

    A PR counts for its author when created inside the window; a review (and
    each of its comments) counts for the reviewer when submitted inside it.
    If every team member has a git handle, non-members are filtered out.
    """
    members = list(members or [])
    names = {
        m["gitHandle"]: m.get("name") or m["gitHandle"]
        for m in members
        if m.get("gitHandle")
    }
    start, end = parse_timestamp(start), parse_timestamp(end)

    contributors: dict[str, dict] = {}

    def row_for(handle: str) -> dict:
        if handle not in contributors:
            contributors[handle] = {
                "name":          names.get(handle, handle),
                "gitHandle":     handle,
                "Pull Requests": 0,
                "Code Reviews":  0,
                "Comments":      0,
            }
        return contributors[handle]

    for pr in prs:
        if _in_range(pr.get("createdAt"), start, end):
            row_for(pr.get("user") or UNKNOWN_USER)["Pull Requests"] += 1

        for review in pr.get("reviews", []) or []:
            if not review or not _in_range(review.get("submittedAt"), start, end):
                continue
            row = row_for(review.get("user") or UNKNOWN_USER)
            row["Code Reviews"] += 1
            row["Comments"] += len(review.get("comments", []) or [])

    rows = list(contributors.values())
    if members and all(m.get("gitHandle") for m in members):
        rows = [r for r in rows if r["gitHandle"] in names]
    return rows
