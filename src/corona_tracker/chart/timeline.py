from __future__ import annotations

from typing import List, Mapping, Tuple
from datetime import datetime

from corona_tracker.api.schemas import TimelinePoint


def sort_timeline(timeline: Mapping[datetime, int]) -> List[TimelinePoint]:
    """
    Materialize a timeline into points sorted by timestamp ascending.

    The mapping is only read. An empty timeline yields an empty list.
    """
    pairs = sorted(timeline.items(), key=lambda kv: kv[0])
    return [TimelinePoint(timestamp=ts, count=count) for ts, count in pairs]


def to_xy(points: List[TimelinePoint]) -> Tuple[List[float], List[int]]:
    """Split points into unix timestamps (x) and counts (y)."""
    xs = [p.unix for p in points]
    ys = [p.count for p in points]
    return xs, ys
