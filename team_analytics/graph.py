"""
Reviewer → author interaction graph.

Edges are keyed by (reviewer, author, status); repeated review actions with the
same outcome fold into one edge whose weight is the number of actions.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Mapping, Optional, Union

import networkx as nx

from team_analytics.dates import parse_timestamp

log = logging.getLogger(__name__)

EdgeKey = tuple[str, str, str]


@dataclass(frozen=True)
class InteractionEvent:
    """One review action by ``source`` on a PR authored by ``target``."""
    source: str
    target: str
    status: str
    weight: int = 1


@dataclass
class InteractionGraph:
    nodes: set[str] = field(default_factory=set)
    edges: dict[EdgeKey, int] = field(default_factory=dict)

    @property
    def total_weight(self) -> int:
        return sum(self.edges.values())


def _coerce_event(
    event: Union[InteractionEvent, Mapping],
) -> Optional[InteractionEvent]:
    if isinstance(event, InteractionEvent):
        return event
    source = event.get("source")
    target = event.get("target")
    status = event.get("status")
    if not source or not target or not status:
        return None
    weight = event.get("weight")
    return InteractionEvent(
        source=source,
        target=target,
        status=status,
        weight=1 if weight is None else int(weight),
    )


def build_interaction_graph(
    events: Iterable[Union[InteractionEvent, Mapping]],
) -> InteractionGraph:
    """
    Fold review events into a deduplicated graph.
    Status is lower-cased; weight defaults to 1 per event.
    """
    edge_weights: dict[EdgeKey, int] = defaultdict(int)
    nodes: set[str] = set()

    for raw in events:
        event = _coerce_event(raw)
        if event is None:
            log.debug(f"Dropping incomplete interaction event: {raw!r}")
            continue
        edge_weights[(event.source, event.target, event.status.lower())] += event.weight
        nodes.add(event.source)
        nodes.add(event.target)

    return InteractionGraph(nodes=nodes, edges=dict(edge_weights))


def _in_window(
    when: Optional[datetime],
    start: Optional[datetime],
    end: Optional[datetime],
) -> bool:
    if start is None and end is None:
        return True
    if when is None:
        return False
    if start is not None and when < start:
        return False
    if end is not None and when > end:
        return False
    return True


def interaction_events_from_prs(
    prs: Iterable[Mapping],
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> list[InteractionEvent]:
    """
    One event per review: reviewer → PR author, status = review state.
    With bounds, only reviews submitted inside ``[start, end]`` are kept.
    Self-reviews and reviews with no known reviewer/author are skipped.
    """
    events: list[InteractionEvent] = []
    for pr in prs:
        author = pr.get("user")
        if not author:
            continue
        for review in pr.get("reviews", []) or []:
            if not review:
                continue
            reviewer = review.get("user")
            state = review.get("state")
            if not reviewer or not state or reviewer == author:
                continue
            if not _in_window(parse_timestamp(review.get("submittedAt")), start, end):
                continue
            events.append(InteractionEvent(source=reviewer, target=author, status=state))
    return events


def graph_edge_rows(graph: InteractionGraph) -> list[dict]:
    """Edge list rows ``{source, target, status, weight}``, heaviest first."""
    return [
        {"source": src, "target": tgt, "status": status, "weight": w}
        for (src, tgt, status), w in sorted(
            graph.edges.items(), key=lambda item: (-item[1], item[0])
        )
    ]


def to_networkx(graph: InteractionGraph) -> nx.MultiDiGraph:
    """MultiDiGraph with one edge per status, keyed by the status string."""
    G = nx.MultiDiGraph()
    G.add_nodes_from(sorted(graph.nodes))
    for (src, tgt, status), w in graph.edges.items():
        G.add_edge(src, tgt, key=status, status=status, weight=w)
    return G
