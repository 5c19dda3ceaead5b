"""
Trend Oracle

Reads a bullish/bearish/neutral verdict from the most recent one to four
swing labels using fixed lookup tables. Longer patterns are tried first;
an unmatched 4-label pattern falls back to its trailing 3 labels, an
unmatched 3-label pattern to its trailing 2.

All label tuples are ordered oldest to newest.

This module is the single home of the trend tables. Callers that need a
verdict (analyzer, CLI, HTTP layer) go through analyze_trend() or
trend_from_labels().
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union

from .detection_config import MAX_TREND_WINDOW
from .types import SwingLabel, SwingPoint, TrendVerdict

HH, HL, LH, LL = SwingLabel.HH, SwingLabel.HL, SwingLabel.LH, SwingLabel.LL
BULLISH, BEARISH, NEUTRAL = TrendVerdict.BULLISH, TrendVerdict.BEARISH, TrendVerdict.NEUTRAL

LabelTuple = Tuple[SwingLabel, ...]

FOUR_POINT_PATTERNS: Dict[LabelTuple, TrendVerdict] = {
    # Uptrend establishment and continuation
    (LL, HL, HH, HL): BULLISH,  # pullback in a fresh uptrend
    (LL, LH, HL, HH): BULLISH,  # recovery from a downtrend
    (LH, LL, HL, HH): BULLISH,  # V-shaped recovery
    (HL, HH, HL, HH): BULLISH,  # healthy pullbacks
    (HH, HL, HH, HL): BULLISH,
    # Downtrend establishment and continuation
    (HH, LH, LL, LH): BEARISH,  # rally in a fresh downtrend
    (HH, HL, LH, LL): BEARISH,  # breakdown from an uptrend
    (HL, HH, LH, LL): BEARISH,  # inverted V
    (LH, LL, LH, LL): BEARISH,  # weak rallies
    (LL, LH, LL, LH): BEARISH,
}

THREE_POINT_PATTERNS: Dict[LabelTuple, TrendVerdict] = {
    (LL, HL, HH): BULLISH,
    (LH, HL, HH): BULLISH,
    (HL, HH, HL): BULLISH,
    (LL, LH, HL): BULLISH,  # early reversal
    (HH, LH, LL): BEARISH,
    (HL, LH, LL): BEARISH,
    (LH, LL, LH): BEARISH,
    (HH, HL, LH): BEARISH,  # early breakdown
    # Consolidation, leaning toward the prevailing side
    (HH, HL, HH): BULLISH,
    (LL, LH, LL): BEARISH,
    (HL, LH, HL): NEUTRAL,
    (LH, HL, LH): NEUTRAL,
}

TWO_POINT_PATTERNS: Dict[LabelTuple, TrendVerdict] = {
    (HL, HH): BULLISH,
    (HH, HH): NEUTRAL,
    (LH, HH): BULLISH,
    (LL, HH): BULLISH,
    (HH, HL): BULLISH,
    (HL, HL): NEUTRAL,
    (LH, HL): NEUTRAL,
    (LL, HL): BULLISH,
    (LL, LH): BEARISH,
    (LH, LH): NEUTRAL,
    (HL, LH): BEARISH,
    (HH, LH): BEARISH,
    (LH, LL): BEARISH,
    (LL, LL): NEUTRAL,
    (HL, LL): NEUTRAL,
    (HH, LL): BEARISH,
}

SINGLE_POINT_PATTERNS: Dict[SwingLabel, TrendVerdict] = {
    HH: BULLISH,
    HL: BULLISH,
    LH: BEARISH,
    LL: BEARISH,
}

# Verdict when there is no swing point at all. Kept for compatibility with
# the dashboard, which shows bullish on an empty chart; it carries no
# market information.
EMPTY_VERDICT = BULLISH


def _four_points(labels: LabelTuple) -> TrendVerdict:
    verdict = FOUR_POINT_PATTERNS.get(labels)
    if verdict is not None:
        return verdict
    return _three_points(labels[1:])


def _three_points(labels: LabelTuple) -> TrendVerdict:
    verdict = THREE_POINT_PATTERNS.get(labels)
    if verdict is not None:
        return verdict
    return _two_points(labels[1:])


def _two_points(labels: LabelTuple) -> TrendVerdict:
    return TWO_POINT_PATTERNS.get(labels, NEUTRAL)


def _single_point(label: SwingLabel) -> TrendVerdict:
    return SINGLE_POINT_PATTERNS.get(label, NEUTRAL)


def trend_from_labels(labels: Sequence[Union[SwingLabel, str]]) -> TrendVerdict:
    """
    Look up the trend verdict for a run of swing labels.

    Args:
        labels: Labels ordered oldest to newest. Only the trailing four
            are used. Plain strings ("HH", ...) are accepted.

    Returns:
        The verdict. Never raises for any combination of valid labels.

    Raises:
        ValueError: If a string is not one of HH, HL, LH, LL.
    """
    window = tuple(SwingLabel(label) for label in labels)[-MAX_TREND_WINDOW:]

    if len(window) == 4:
        return _four_points(window)
    if len(window) == 3:
        return _three_points(window)
    if len(window) == 2:
        return _two_points(window)
    if len(window) == 1:
        return _single_point(window[0])
    return EMPTY_VERDICT


def recent_swing_points(points: Sequence[SwingPoint],
                        reference_index: Optional[int] = None,
                        count: int = MAX_TREND_WINDOW) -> List[SwingPoint]:
    """
    Take the last `count` swing points at or before a reference candle.

    Args:
        points: Swing points in ascending index order.
        reference_index: Candle index to look back from. None means the
            whole sequence.
        count: Maximum number of points to return.

    Returns:
        Up to `count` points, oldest first.
    """
    if reference_index is not None:
        points = [p for p in points if p.index <= reference_index]
    if count <= 0:
        return []
    return list(points[-count:])


def analyze_trend(points: Sequence[SwingPoint],
                  reference_index: Optional[int] = None,
                  window: int = MAX_TREND_WINDOW) -> TrendVerdict:
    """
    Trend verdict from the latest swing points.

    Args:
        points: Final swing points in ascending index order.
        reference_index: Only points with index <= reference_index count.
        window: Number of trailing points to read (1 to 4).

    Returns:
        TrendVerdict for the selected points; BULLISH when none qualify.
    """
    recent = recent_swing_points(points, reference_index, window)
    return trend_from_labels([p.label for p in recent])
