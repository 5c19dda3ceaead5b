"""
Extremum Detector

Finds local highs and lows with a symmetric lookback window.

A candle at index i is a swing high when its high is strictly greater than
every other high in [i - lookback, i + lookback], and a swing low when its
low is strictly less than every other low in that window. Equal neighbours
disqualify the candidate so flat tops and bottoms never produce a point.
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .types import Candle, RawExtremum, SwingKind

logger = logging.getLogger(__name__)


def _strict_window_extrema(highs: np.ndarray, lows: np.ndarray, lookback: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vectorized strict swing detection using numpy sliding windows.

    Args:
        highs: 1D numpy array of high prices
        lows: 1D numpy array of low prices
        lookback: Number of candles before/after to check

    Returns:
        Tuple of (swing_high_indices, swing_low_indices) as numpy arrays
    """
    n = len(highs)
    window_size = 2 * lookback + 1

    if n < window_size:
        return np.array([], dtype=np.int64), np.array([], dtype=np.int64)

    # Views, no copies. Row k is centered on candle k + lookback.
    high_windows = np.lib.stride_tricks.sliding_window_view(highs, window_size)
    low_windows = np.lib.stride_tricks.sliding_window_view(lows, window_size)

    center_highs = high_windows[:, lookback]
    center_lows = low_windows[:, lookback]

    # Left and right halves of the view, so no window is copied
    neighbour_max_high = np.maximum(
        high_windows[:, :lookback].max(axis=1),
        high_windows[:, lookback + 1:].max(axis=1),
    )
    neighbour_min_low = np.minimum(
        low_windows[:, :lookback].min(axis=1),
        low_windows[:, lookback + 1:].min(axis=1),
    )

    is_swing_high = center_highs > neighbour_max_high
    is_swing_low = center_lows < neighbour_min_low

    swing_high_indices = np.where(is_swing_high)[0] + lookback
    swing_low_indices = np.where(is_swing_low)[0] + lookback

    return swing_high_indices, swing_low_indices


def detect_extrema(candles: Sequence[Candle], lookback: int = 5) -> List[RawExtremum]:
    """
    Scan a candle series for local extrema.

    Args:
        candles: Chronologically ordered candles.
        lookback: Candles checked on each side of a candidate. Must be >= 1.

    Returns:
        Raw extrema sorted by index. A candle that is both a swing high and
        a swing low (an outside bar) yields two entries, the high first.
        Series shorter than 2 * lookback + 1 yield an empty list.

    Raises:
        ValueError: If lookback < 1.
    """
    if lookback < 1:
        raise ValueError(f"lookback must be >= 1, got {lookback}")

    if len(candles) < 2 * lookback + 1:
        logger.debug(
            f"Insufficient candles for swing detection: {len(candles)} < {2 * lookback + 1}"
        )
        return []

    highs = np.fromiter((c.high for c in candles), dtype=np.float64, count=len(candles))
    lows = np.fromiter((c.low for c in candles), dtype=np.float64, count=len(candles))

    high_indices, low_indices = _strict_window_extrema(highs, lows, lookback)

    extrema = [RawExtremum(index=int(i), price=float(highs[i]), kind=SwingKind.HIGH) for i in high_indices]
    extrema.extend(RawExtremum(index=int(i), price=float(lows[i]), kind=SwingKind.LOW) for i in low_indices)

    # High before low on outside bars
    extrema.sort(key=lambda e: (e.index, e.kind != SwingKind.HIGH))

    logger.debug(
        f"Detected {len(high_indices)} swing highs and {len(low_indices)} swing lows "
        f"in {len(candles)} candles (lookback={lookback})"
    )
    return extrema
