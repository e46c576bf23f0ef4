"""Review-status histogram built from the interaction graph's edges."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import asdict, dataclass
from enum import Enum

from team_analytics.config import (
    COLOR_APPROVED,
    COLOR_COMMENTED,
    COLOR_DEFAULT,
    COLOR_DISMISSED,
)
from team_analytics.graph import InteractionGraph


class StatusColor(str, Enum):
    APPROVED  = COLOR_APPROVED
    DISMISSED = COLOR_DISMISSED
    COMMENTED = COLOR_COMMENTED
    DEFAULT   = COLOR_DEFAULT

    @classmethod
    def for_status(cls, status: str) -> "StatusColor":
        """Colour for a review status; anything unrecognised gets DEFAULT."""
        return {
            "approved":  cls.APPROVED,
            "dismissed": cls.DISMISSED,
            "commented": cls.COMMENTED,
        }.get(status.lower(), cls.DEFAULT)


@dataclass(frozen=True)
class StatusRow:
    status: str
    label: str
    weight: int
    color: str

    def to_dict(self) -> dict:
        return asdict(self)


def status_label(status: str) -> str:
    # Only the first letter changes: "changes_requested" -> "Changes_requested"
    return status[:1].upper() + status[1:]


def aggregate_status(graph: InteractionGraph) -> list[StatusRow]:
    totals: dict[str, int] = defaultdict(int)
    for (_, _, status), w in graph.edges.items():
        totals[status.lower()] += w

    rows = [
        StatusRow(
            status=status,
            label=status_label(status),
            weight=w,
            color=StatusColor.for_status(status).value,
        )
        for status, w in totals.items()
    ]
    return sorted(rows, key=lambda r: (-r.weight, r.label))


def status_chart_row(rows: list[StatusRow]) -> dict[str, int]:
    """Single wide row ``{label: weight}`` for a grouped bar chart."""
    return {row.label: row.weight for row in rows}
