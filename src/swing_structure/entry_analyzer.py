"""
Entry/Reversal Analyzer

Given an entry candle, finds the next swing point of the opposite category
(the reversal) and measures how price behaved between the two: best and
worst close reached and the final profit/loss at the reversal.
"""

import logging
from typing import Optional, Sequence, Tuple

from .detection_config import MAX_TREND_WINDOW
from .trend_oracle import analyze_trend
from .types import END_OF_DATA, AnalysisResult, Candle, SwingKind, SwingPoint

logger = logging.getLogger(__name__)


def find_reversal(swing_points: Sequence[SwingPoint], entry_index: int,
                  last_index: int) -> Tuple[int, str]:
    """
    Locate the reversal swing point for an entry candle.

    The anchor is the most recent swing point at or before the entry. After
    a low-type anchor (HL/LL) the reversal is the next high-type point
    (HH/LH) and vice versa. Without an anchor the first swing point after
    the entry is used, whatever its label.

    Args:
        swing_points: Final swing points in ascending index order.
        entry_index: Index of the entry candle.
        last_index: Index of the last candle in the series.

    Returns:
        (reversal_index, reversal_label). Falls back to
        (last_index, "end of data") when no reversal exists.
    """
    anchor_position = None
    for position, point in enumerate(swing_points):
        if point.index <= entry_index:
            anchor_position = position
        else:
            break

    if anchor_position is None:
        following = swing_points
        wanted_kind = None
    else:
        following = swing_points[anchor_position + 1:]
        anchor = swing_points[anchor_position]
        wanted_kind = SwingKind.HIGH if anchor.kind == SwingKind.LOW else SwingKind.LOW

    for point in following:
        if point.index <= entry_index:
            continue
        if wanted_kind is None or point.kind == wanted_kind:
            return point.index, point.label.value

    return last_index, END_OF_DATA


def _pct(delta: float, base: float) -> float:
    return (delta / base) * 100


def analyze_entry(candles: Sequence[Candle], entry_index: int,
                  swing_points: Sequence[SwingPoint],
                  trend_window: int = MAX_TREND_WINDOW) -> Optional[AnalysisResult]:
    """
    Analyze the trade window from an entry candle to the next reversal.

    Args:
        candles: The candle series.
        entry_index: Index of the selected entry candle.
        swing_points: Final swing points of the same series.
        trend_window: Number of swing points (at or before the entry) used
            for the trend verdict.

    Returns:
        AnalysisResult, or None when the entry is out of range or is the
        last candle (there is nothing after it to analyze).
    """
    if entry_index < 0 or entry_index >= len(candles) - 1:
        logger.info(
            f"No analysis possible for entry index {entry_index} "
            f"in a series of {len(candles)} candles"
        )
        return None

    entry_price = candles[entry_index].close
    reversal_index, reversal_label = find_reversal(swing_points, entry_index, len(candles) - 1)

    max_close = entry_price
    min_close = entry_price
    for candle in candles[entry_index + 1:reversal_index + 1]:
        if candle.close > max_close:
            max_close = candle.close
        if candle.close < min_close:
            min_close = candle.close

    reversal_price = candles[reversal_index].close
    final_pnl = reversal_price - entry_price

    return AnalysisResult(
        entry_index=entry_index,
        reversal_index=reversal_index,
        entry_price=entry_price,
        reversal_price=reversal_price,
        max_favorable_price=max_close,
        max_adverse_price=min_close,
        max_favorable_pct=_pct(max_close - entry_price, entry_price),
        max_adverse_pct=_pct(min_close - entry_price, entry_price),
        final_pnl_abs=final_pnl,
        final_pnl_pct=_pct(final_pnl, entry_price),
        candle_count=reversal_index - entry_index + 1,
        trend_verdict=analyze_trend(swing_points, reference_index=entry_index, window=trend_window),
        reversal_label=reversal_label,
    )
