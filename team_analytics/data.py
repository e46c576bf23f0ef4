"""Snapshot loading and DataFrame helpers for view summaries."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pandas as pd

from team_analytics.config import ACTIVITY_SERIES, MILESTONE_SERIES
from team_analytics.status import StatusRow

log = logging.getLogger(__name__)


def load_team_data(path: str = "team_data.json") -> list[dict]:
    """
    Read raw team records written by the upstream fetcher.
    The file may hold one team object or a list of them.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(
            f"'{path}' not found. Export the team data snapshot first."
        )
    with p.open() as f:
        data = json.load(f)
    teams = data if isinstance(data, list) else [data]
    log.info(f"Loaded {len(teams)} team record(s) from {p}")
    return teams


def build_status_df(rows: list[StatusRow]) -> pd.DataFrame:
    df = pd.DataFrame(
        [r.to_dict() for r in rows],
        columns=["status", "label", "weight", "color"],
    )
    return df.sort_values("weight", ascending=False).reset_index(drop=True)


def build_milestone_df(rows: list[dict]) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=["milestoneTitle", *MILESTONE_SERIES, "createdAt"])
    if not df.empty:
        df["createdAt"] = pd.to_datetime(df["createdAt"], utc=True)
    return df


def build_commit_df(rows: list[dict]) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=["weekStarting", "additions", "deletions"])
    df["net"] = df["additions"] + df["deletions"]
    return df


def build_contributor_df(rows: list[dict]) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=["name", "gitHandle", *ACTIVITY_SERIES])
    return df.sort_values(ACTIVITY_SERIES, ascending=False).reset_index(drop=True)
