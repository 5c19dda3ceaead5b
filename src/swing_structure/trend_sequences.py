"""
Trend Sequences

Groups consecutive swing points into uptrend and downtrend runs for trend
line drawing, and counts label transitions between neighbouring points.

HH and HL points are up points; LH and LL points are down points. A run
lasts while the direction stays the same.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Literal, Sequence, Tuple

from .types import SwingLabel, SwingPoint

Transition = Tuple[SwingLabel, SwingLabel]


@dataclass
class TrendSequence:
    """A run of same-direction swing points."""
    direction: Literal["uptrend", "downtrend"]
    points: List[SwingPoint] = field(default_factory=list)

    @property
    def start_index(self) -> int:
        return self.points[0].index

    @property
    def end_index(self) -> int:
        return self.points[-1].index

    @property
    def start_price(self) -> float:
        return self.points[0].price

    @property
    def end_price(self) -> float:
        return self.points[-1].price

    def slope(self) -> float:
        """Price change per candle from the first to the last point."""
        span = self.end_index - self.start_index
        if span == 0:
            return 0.0
        return (self.end_price - self.start_price) / span


def detect_trend_sequences(points: Sequence[SwingPoint], min_points: int = 2) -> List[TrendSequence]:
    """
    Split swing points into uptrend/downtrend runs.

    Args:
        points: Swing points in ascending index order.
        min_points: Runs with fewer points are dropped.

    Returns:
        TrendSequences in chronological order.
    """
    sequences = []
    current = None

    for point in points:
        direction = "uptrend" if point.label.is_bullish else "downtrend"
        if current is None or current.direction != direction:
            if current is not None and len(current.points) >= min_points:
                sequences.append(current)
            current = TrendSequence(direction=direction, points=[point])
        else:
            current.points.append(point)

    if current is not None and len(current.points) >= min_points:
        sequences.append(current)

    return sequences


def label_transitions(points: Sequence[SwingPoint]) -> Counter:
    """
    Count (older, newer) label pairs of neighbouring swing points.

    Returns:
        Counter keyed by (older_label, newer_label).
    """
    return Counter((a.label, b.label) for a, b in zip(points, points[1:]))


def format_transition(transition: Transition) -> str:
    """Render a transition the way the dashboard filter writes it, e.g. 'HH<-HL'."""
    older, newer = transition
    return f"{older.value}<-{newer.value}"
