"""
Re-labeling Pass

Re-derives every label from scratch in chronological order so points
inserted by the repair pass are classified against their true
predecessors. This is the authoritative labeling.
"""

from dataclasses import replace
from typing import List, Sequence

from .classifier import SwingState
from .types import SwingKind, SwingPoint


def relabel(points: Sequence[SwingPoint]) -> List[SwingPoint]:
    """
    Relabel swing points against the nearest preceding point of the same kind.

    Only labels change; the input points are not modified. The pass is
    idempotent: relabel(relabel(x)) == relabel(x).

    Args:
        points: Swing points, normally already in index order.

    Returns:
        New SwingPoints, stable-sorted by index.
    """
    state = SwingState()
    relabeled = []

    for point in sorted(points, key=lambda p: (p.index, p.kind != SwingKind.HIGH)):
        updated = replace(point, label=state.label_for(point.kind, point.price))
        state.push(updated)
        relabeled.append(updated)

    return relabeled
