"""All chart views for one team, computed under a single week range."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping

from team_analytics.commits import window_weekly_commits
from team_analytics.config import COURSE_START_DATE
from team_analytics.contributors import contributor_activity
from team_analytics.dates import validate_week_range, week_range_bounds
from team_analytics.graph import (
    InteractionGraph,
    build_interaction_graph,
    graph_edge_rows,
    interaction_events_from_prs,
)
from team_analytics.milestones import build_milestone_series
from team_analytics.status import StatusRow, aggregate_status

log = logging.getLogger(__name__)


@dataclass
class TeamViews:
    week_range: tuple[int, int]
    start_date: datetime
    end_date: datetime
    graph: InteractionGraph
    status_rows: list[StatusRow] = field(default_factory=list)
    milestone_rows: list[dict] = field(default_factory=list)
    commit_rows: list[dict] = field(default_factory=list)
    contributor_rows: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "week_range":  list(self.week_range),
            "start_date":  self.start_date.isoformat(),
            "end_date":    self.end_date.isoformat(),
            "graph": {
                "nodes": sorted(self.graph.nodes),
                "edges": graph_edge_rows(self.graph),
            },
            "status":      [r.to_dict() for r in self.status_rows],
            "milestones":  [
                {**row, "createdAt": row["createdAt"].isoformat()}
                for row in self.milestone_rows
            ],
            "commits":      self.commit_rows,
            "contributors": self.contributor_rows,
        }


def build_team_views(
    team_data: Mapping,
    week_range,
    epoch: datetime = COURSE_START_DATE,
    **calendar,
) -> TeamViews:
    """
    ``team_data`` holds the raw records: ``teamPRs``, ``milestones``,
    ``weeklyCommits`` and optionally ``members``.
    """
    week_range = validate_week_range(week_range)
    start_date, end_date = week_range_bounds(week_range, epoch, **calendar)
    prs = team_data.get("teamPRs", []) or []

    events = interaction_events_from_prs(prs, start_date, end_date)
    graph = build_interaction_graph(events)

    views = TeamViews(
        week_range=week_range,
        start_date=start_date,
        end_date=end_date,
        graph=graph,
        status_rows=aggregate_status(graph),
        milestone_rows=build_milestone_series(
            team_data.get("milestones", []) or [], start_date, end_date
        ),
        commit_rows=window_weekly_commits(
            team_data.get("weeklyCommits", []) or [], week_range
        ),
        contributor_rows=contributor_activity(
            prs, start_date, end_date, team_data.get("members")
        ),
    )
    log.debug(
        f"Views for weeks {week_range[0]}-{week_range[1]}: "
        f"{len(events)} review events, {len(views.milestone_rows)} milestones, "
        f"{len(views.commit_rows)} commit weeks"
    )
    return views
