"""
Alternation Classifier

Assigns provisional HH/LH/HL/LL labels to raw extrema. Highs are compared
only with the last high and lows only with the last low; alternation between
highs and lows is left to the repair pass.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .types import Candle, RawExtremum, SwingKind, SwingLabel, SwingPoint


@dataclass
class SwingState:
    """
    Running state of the last labeled high and low.

    Threaded through a single forward pass by the classifier, the repair
    pass and the re-labeling pass.
    """
    last_high: Optional[SwingPoint] = None
    last_low: Optional[SwingPoint] = None

    def last_of(self, kind: SwingKind) -> Optional[SwingPoint]:
        return self.last_high if kind == SwingKind.HIGH else self.last_low

    def label_for(self, kind: SwingKind, price: float) -> SwingLabel:
        """
        Label a new point against the last point of the same kind.

        The first high of a series is HH and the first low is HL.
        """
        previous = self.last_of(kind)
        higher = previous is None or price > previous.price
        return SwingLabel.for_kind(kind, higher)

    def push(self, point: SwingPoint) -> None:
        if point.kind == SwingKind.HIGH:
            self.last_high = point
        else:
            self.last_low = point


def classify(raw: Sequence[RawExtremum], candles: Sequence[Candle]) -> List[SwingPoint]:
    """
    Label raw extrema in ascending index order.

    Args:
        raw: Extrema from detect_extrema().
        candles: The series the extrema were found in (for timestamps).

    Returns:
        SwingPoints with provisional labels.
    """
    state = SwingState()
    points = []

    for extremum in sorted(raw, key=lambda e: (e.index, e.kind != SwingKind.HIGH)):
        point = SwingPoint(
            index=extremum.index,
            timestamp=candles[extremum.index].timestamp,
            price=extremum.price,
            kind=extremum.kind,
            label=state.label_for(extremum.kind, extremum.price),
        )
        state.push(point)
        points.append(point)

    return points
