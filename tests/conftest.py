"""Shared fixtures for the analytics engine tests."""

from datetime import datetime, timedelta, timezone

import pytest

EPOCH = datetime(2024, 1, 15, tzinfo=timezone.utc)


def at(days: float, hours: int = 0) -> datetime:
    return EPOCH + timedelta(days=days, hours=hours)


def iso(days: float, hours: int = 0) -> str:
    return at(days, hours).isoformat().replace("+00:00", "Z")


@pytest.fixture
def epoch():
    return EPOCH


@pytest.fixture
def plain_calendar():
    """Calendar without a recess week so week N starts EPOCH + 7N days."""
    return {"break_start_week": 6, "break_duration_weeks": 0}


@pytest.fixture
def team_prs():
    return [
        {
            "user": "bob",
            "createdAt": iso(1),
            "reviews": [
                {"user": "alice", "state": "APPROVED", "submittedAt": iso(2), "comments": [{}, {}]},
                {"user": "alice", "state": "APPROVED", "submittedAt": iso(3), "comments": []},
                {"user": "carol", "state": "DISMISSED", "submittedAt": iso(4), "comments": [{}]},
                {"user": "bob", "state": "COMMENTED", "submittedAt": iso(4), "comments": []},
            ],
        },
        {
            "user": "alice",
            "createdAt": iso(22),
            "reviews": [
                {"user": "bob", "state": "CHANGES_REQUESTED", "submittedAt": iso(23), "comments": [{}]},
            ],
        },
    ]


@pytest.fixture
def team_milestones():
    return [
        {"title": "Sprint 2", "created_at": iso(9), "open_issues": 4, "closed_issues": 1},
        {"title": "Sprint 1", "created_at": iso(2), "open_issues": 0, "closed_issues": 5},
        {"title": "Sprint 4", "created_at": iso(24), "open_issues": 2, "closed_issues": 2},
    ]


@pytest.fixture
def team_data(team_prs, team_milestones):
    week0 = int(EPOCH.timestamp())
    return {
        "repoName": "team-alpha",
        "teamPRs": team_prs,
        "milestones": team_milestones,
        "weeklyCommits": [
            [week0 + i * 7 * 86400, 10 * (i + 1), i] for i in range(6)
        ],
        "members": [
            {"name": "Alice", "gitHandle": "alice"},
            {"name": "Bob", "gitHandle": "bob"},
            {"name": "Carol", "gitHandle": "carol"},
        ],
    }
