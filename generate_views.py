#!/usr/bin/env python3
"""
generate_views.py

Reads an already-fetched team data snapshot (teamPRs, milestones,
weeklyCommits per team), computes the collaboration views for a week range,
and writes them as JSON.

Output: team_views.json

Usage:
    python generate_views.py --input team_data.json --start 0 --end 14
    python generate_views.py --input team_data.json --sweep
"""

import argparse
import json
import logging
from pathlib import Path

import pandas as pd

from team_analytics.config import TOTAL_WEEKS
from team_analytics.data import (
    build_commit_df,
    build_contributor_df,
    build_milestone_df,
    build_status_df,
    load_team_data,
)
from team_analytics.dates import cumulative_week_ranges, current_week
from team_analytics.views import build_team_views

# ── Config ───────────────────────────────────────────────────────────────────
INPUT_FILE  = "team_data.json"
OUTPUT_FILE = "team_views.json"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute team collaboration views for a week range.")
    parser.add_argument("--input", default=INPUT_FILE)
    parser.add_argument("--output", default=OUTPUT_FILE)
    parser.add_argument("--start", type=int, default=0)
    parser.add_argument(
        "--end", type=int, default=None,
        help="last week index (default: current teaching week)",
    )
    parser.add_argument(
        "--sweep", action="store_true",
        help=f"compute every range (0, 1) .. (0, {TOTAL_WEEKS - 1})",
    )
    return parser.parse_args(argv)


def team_name(team: dict, index: int) -> str:
    return str(team.get("repoName") or team.get("teamId") or f"team-{index}")


def main(argv=None) -> None:
    args = parse_args(argv)
    teams = load_team_data(args.input)

    if args.sweep:
        ranges = cumulative_week_ranges(TOTAL_WEEKS)
    else:
        end = args.end if args.end is not None else min(current_week(), TOTAL_WEEKS - 1)
        ranges = [(args.start, end)]
    log.info(f"Computing views for {len(teams)} team(s) over {len(ranges)} week range(s)…")

    output: dict[str, list[dict]] = {}
    summary_rows = []
    for i, team in enumerate(teams):
        name = team_name(team, i)
        output[name] = []
        for week_range in ranges:
            views = build_team_views(team, week_range)
            output[name].append(views.to_dict())

            status_df = build_status_df(views.status_rows)
            commit_df = build_commit_df(views.commit_rows)
            milestone_df = build_milestone_df(views.milestone_rows)
            contributor_df = build_contributor_df(views.contributor_rows)
            summary_rows.append({
                "team":        name,
                "weeks":       f"{week_range[0] + 1}-{week_range[1] + 1}",
                "people":      len(views.graph.nodes),
                "reviews":     int(status_df["weight"].sum()),
                "milestones":  len(milestone_df),
                "open issues": int(milestone_df["Open Issues"].sum()),
                "additions":   int(commit_df["additions"].sum()),
                "deletions":   int(commit_df["deletions"].sum()),
                "most active": contributor_df["gitHandle"].iloc[0] if not contributor_df.empty else "-",
            })

    # ── Save output ──────────────────────────────────────────────────────────
    output_path = Path(args.output)
    with output_path.open("w") as f:
        json.dump(output, f, indent=2, default=str)
    log.info(f"✓ Saved {output_path} ({output_path.stat().st_size / 1024:.1f} KB)")

    # ── Quick summary table ──────────────────────────────────────────────────
    df = pd.DataFrame(summary_rows)
    print("\n── Team Views ───────────────────────────────────────────────────────────")
    print(df.to_string(index=False))


if __name__ == "__main__":
    main()
