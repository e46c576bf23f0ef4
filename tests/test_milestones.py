"""
Tests for the milestone issue series
"""

from datetime import timedelta

from hypothesis import given, settings
from hypothesis import strategies as st

from team_analytics.milestones import build_milestone_series, milestone_series_for_weeks

from conftest import EPOCH, at, iso


def titles(rows):
    return [r["milestoneTitle"] for r in rows]


class TestBuildMilestoneSeries:

    def test_sorted_chronologically(self):
        milestones = [
            {"title": "M1", "created_at": iso(5), "open_issues": 2, "closed_issues": 1},
            {"title": "M0", "created_at": iso(1), "open_issues": 0, "closed_issues": 3},
        ]
        rows = build_milestone_series(milestones, at(0), at(10))
        assert rows == [
            {"milestoneTitle": "M0", "Open Issues": 0, "Closed Issues": 3, "createdAt": at(1)},
            {"milestoneTitle": "M1", "Open Issues": 2, "Closed Issues": 1, "createdAt": at(5)},
        ]

    def test_bounds_are_inclusive(self):
        milestones = [
            {"title": "before", "created_at": at(-1)},
            {"title": "start", "created_at": at(0)},
            {"title": "end", "created_at": at(10)},
            {"title": "after", "created_at": at(10) + timedelta(microseconds=1)},
        ]
        assert titles(build_milestone_series(milestones, at(0), at(10))) == ["start", "end"]

    def test_ties_keep_input_order(self):
        milestones = [
            {"title": "second", "created_at": iso(3)},
            {"title": "first", "created_at": iso(1)},
            {"title": "tie-a", "created_at": iso(3)},
            {"title": "tie-b", "created_at": iso(3)},
        ]
        rows = build_milestone_series(milestones, at(0), at(10))
        assert titles(rows) == ["first", "second", "tie-a", "tie-b"]

    def test_malformed_records_dropped(self):
        milestones = [
            {"title": "", "created_at": iso(1)},
            {"title": "no date"},
            {"title": "bad date", "created_at": "soon"},
            {"title": "ok", "created_at": iso(2)},
        ]
        rows = build_milestone_series(milestones, at(0), at(10))
        assert titles(rows) == ["ok"]
        assert rows[0]["Open Issues"] == 0
        assert rows[0]["Closed Issues"] == 0

    def test_non_numeric_issue_counts_dropped(self):
        milestones = [
            {"title": "a", "created_at": iso(1), "open_issues": "many"},
            {"title": "b", "created_at": iso(2)},
        ]
        assert titles(build_milestone_series(milestones, at(0), at(10))) == ["b"]

    def test_empty_results(self):
        assert build_milestone_series([], at(0), at(10)) == []
        assert build_milestone_series([{"title": "x", "created_at": iso(30)}], at(0), at(10)) == []

    def test_input_not_mutated(self):
        milestones = [
            {"title": "b", "created_at": iso(5)},
            {"title": "a", "created_at": iso(1)},
        ]
        snapshot = [dict(m) for m in milestones]
        build_milestone_series(milestones, at(0), at(10))
        assert milestones == snapshot

    @given(
        offsets=st.lists(st.integers(min_value=-20, max_value=40), max_size=25),
        window=st.tuples(
            st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20)
        ).map(sorted),
    )
    @settings(max_examples=100)
    def test_matches_sorted_in_range_subsequence(self, offsets, window):
        milestones = [
            {"title": f"m{i}", "created_at": at(days), "open_issues": i, "closed_issues": 0}
            for i, days in enumerate(offsets)
        ]
        start, end = at(window[0]), at(window[1])
        expected = [
            m["title"]
            for m in sorted(milestones, key=lambda m: m["created_at"])
            if start <= m["created_at"] <= end
        ]
        first = build_milestone_series(milestones, start, end)
        assert titles(first) == expected
        assert build_milestone_series(milestones, start, end) == first


class TestMilestoneSeriesForWeeks:

    def test_week_range(self, team_milestones, plain_calendar):
        rows = milestone_series_for_weeks(team_milestones, (0, 1), EPOCH, **plain_calendar)
        assert titles(rows) == ["Sprint 1", "Sprint 2"]

    def test_later_weeks(self, team_milestones, plain_calendar):
        rows = milestone_series_for_weeks(team_milestones, (3, 3), EPOCH, **plain_calendar)
        assert titles(rows) == ["Sprint 4"]
