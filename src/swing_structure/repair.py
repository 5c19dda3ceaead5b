"""
Sequence Repair Pass

Restores high/low alternation after classification. When two highs follow
each other with no low between them, the lowest low of the candles strictly
between the two highs becomes a synthetic swing low (and symmetrically for
two lows). Comparisons are made against the last *emitted* point, so
insertions cascade through the walk.
"""

import logging
from typing import List, Optional, Sequence

from .classifier import SwingState
from .types import Candle, SwingKind, SwingPoint, SwingSequence

logger = logging.getLogger(__name__)


def _opposite_extreme(candles: Sequence[Candle], start: int, end: int,
                      kind: SwingKind) -> Optional[int]:
    """
    Find the candle holding the opposite extreme in the open interval.

    Args:
        candles: The candle series.
        start: Index of the earlier same-kind point (excluded).
        end: Index of the later same-kind point (excluded).
        kind: Kind of the two same-kind points.

    Returns:
        Index of the lowest low (for two highs) or highest high (for two
        lows) strictly between start and end; the first one on ties.
        None when no candle lies between them.
    """
    best_index = None
    for j in range(start + 1, end):
        if kind == SwingKind.HIGH:
            if best_index is None or candles[j].low < candles[best_index].low:
                best_index = j
        else:
            if best_index is None or candles[j].high > candles[best_index].high:
                best_index = j
    return best_index


def repair_with_report(points: Sequence[SwingPoint], candles: Sequence[Candle]) -> SwingSequence:
    """
    Insert the missing opposite-kind points between same-kind neighbours.

    Args:
        points: Classified swing points.
        candles: The candle series the points were detected in.

    Returns:
        SwingSequence with the original points plus synthetic insertions,
        ascending by index. Same-kind neighbours with no candle between
        them are reported in `unresolved_pairs` and left as they are.
    """
    state = SwingState()
    emitted: List[SwingPoint] = []
    unresolved = []

    for current in sorted(points, key=lambda p: (p.index, p.kind != SwingKind.HIGH)):
        if emitted and emitted[-1].kind == current.kind:
            previous = emitted[-1]
            fill_index = _opposite_extreme(candles, previous.index, current.index, current.kind)

            if fill_index is None:
                logger.warning(
                    f"Cannot insert swing point between consecutive {current.kind.value}s "
                    f"at candles {previous.index} and {current.index}: no candles between them"
                )
                unresolved.append((previous.index, current.index))
            else:
                fill_candle = candles[fill_index]
                if current.kind == SwingKind.HIGH:
                    fill_kind, fill_price = SwingKind.LOW, fill_candle.low
                else:
                    fill_kind, fill_price = SwingKind.HIGH, fill_candle.high

                synthetic = SwingPoint(
                    index=fill_index,
                    timestamp=fill_candle.timestamp,
                    price=fill_price,
                    kind=fill_kind,
                    label=state.label_for(fill_kind, fill_price),
                    synthetic=True,
                )
                state.push(synthetic)
                emitted.append(synthetic)
                logger.debug(
                    f"Inserted synthetic {synthetic.label.value} at candle {fill_index} "
                    f"between {previous.index} and {current.index}"
                )

        state.push(current)
        emitted.append(current)

    return SwingSequence(points=emitted, unresolved_pairs=unresolved)


def repair(points: Sequence[SwingPoint], candles: Sequence[Candle]) -> List[SwingPoint]:
    """Repair alternation and return only the points. See repair_with_report()."""
    return repair_with_report(points, candles).points
