"""
Tests for strict symmetric-window extremum detection.
"""

import tracemalloc

import numpy as np
import pytest

from swing_structure.extremum_detector import detect_extrema
from swing_structure.types import SwingKind

from conftest import candles_from_closes, candles_from_extremes


class TestWindowFloor:
    """Series shorter than 2 * lookback + 1 produce nothing."""

    @pytest.mark.parametrize("lookback", [1, 2, 3, 5])
    def test_short_series_is_empty(self, lookback):
        for length in range(0, 2 * lookback + 1):
            candles = candles_from_closes([100 + (i % 3) for i in range(length)])
            assert detect_extrema(candles, lookback) == []

    def test_minimum_length_can_detect(self):
        # 3 candles, lookback 1: the middle one is the only candidate
        candles = candles_from_extremes([10, 12, 11], [9, 10, 9.5])
        extrema = detect_extrema(candles, lookback=1)
        assert [(e.index, e.kind) for e in extrema] == [(1, SwingKind.HIGH)]

    def test_invalid_lookback_raises(self):
        candles = candles_from_closes([1, 2, 3])
        with pytest.raises(ValueError):
            detect_extrema(candles, lookback=0)


class TestStrictness:
    """Ties anywhere in the window disqualify a candidate."""

    def test_single_peak_detected(self):
        highs = [10, 11, 12, 13, 14, 20, 14, 13, 12, 11, 10]
        lows = [h - 2 for h in highs]
        extrema = detect_extrema(candles_from_extremes(highs, lows), lookback=5)

        assert len(extrema) == 1
        assert extrema[0].index == 5
        assert extrema[0].price == 20
        assert extrema[0].kind == SwingKind.HIGH

    def test_flat_top_is_not_a_swing_high(self):
        highs = [10, 11, 15, 15, 11, 10, 9]
        lows = [5, 6, 7, 7, 6, 5, 4]
        extrema = detect_extrema(candles_from_extremes(highs, lows), lookback=2)
        assert all(e.kind != SwingKind.HIGH for e in extrema)

    def test_equal_low_at_window_edge_disqualifies(self):
        highs = [10, 10.5, 10.2, 10.6, 10.1]
        lows = [5, 8, 5, 8, 9]
        # Candle 2 ties candle 0, which is inside the lookback=2 window
        extrema = detect_extrema(candles_from_extremes(highs, lows), lookback=2)
        assert not any(e.kind == SwingKind.LOW and e.index == 2 for e in extrema)

    def test_edges_are_never_candidates(self):
        # Global max at index 0 and global min at the last index
        highs = [30, 12, 14, 12, 11, 10, 9]
        lows = [8, 9, 10, 9, 8, 7, 1]
        extrema = detect_extrema(candles_from_extremes(highs, lows), lookback=2)
        indices = {e.index for e in extrema}
        assert 0 not in indices
        assert 6 not in indices


class TestOutsideBar:
    """A candle can be both a swing high and a swing low."""

    def test_outside_bar_yields_high_then_low(self):
        highs = [5, 10, 5]
        lows = [3, 1, 3]
        extrema = detect_extrema(candles_from_extremes(highs, lows), lookback=1)

        assert [(e.index, e.kind) for e in extrema] == [
            (1, SwingKind.HIGH),
            (1, SwingKind.LOW),
        ]
        assert extrema[0].price == 10
        assert extrema[1].price == 1


class TestOrdering:

    def test_results_sorted_by_index(self, random_walk_candles):
        candles = random_walk_candles(300, seed=7)
        extrema = detect_extrema(candles, lookback=3)
        keys = [(e.index, e.kind != SwingKind.HIGH) for e in extrema]
        assert keys == sorted(keys)

    def test_prices_come_from_the_matching_side(self, random_walk_candles):
        candles = random_walk_candles(200, seed=11)
        for extremum in detect_extrema(candles, lookback=2):
            candle = candles[extremum.index]
            expected = candle.high if extremum.kind == SwingKind.HIGH else candle.low
            assert extremum.price == expected


class TestWideWindows:
    """Large lookbacks stay within memory proportional to the series."""

    def test_wide_window_memory(self):
        rng = np.random.RandomState(3)
        closes = 100 + np.cumsum(rng.normal(0, 1, 8000))
        candles = candles_from_closes(closes.tolist())

        tracemalloc.start()
        try:
            detect_extrema(candles, lookback=2000)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        # A copy of the windows would be (n - 2L) x 2L floats, about 64 MB each
        assert peak < 10_000_000

    @pytest.mark.parametrize("lookback", [1, 3, 7])
    def test_matches_brute_force(self, random_walk_candles, lookback):
        candles = random_walk_candles(150, seed=lookback)
        expected = []
        for i in range(lookback, len(candles) - lookback):
            others = [c for c in candles[i - lookback:i + lookback + 1] if c.index != i]
            if candles[i].high > max(c.high for c in others):
                expected.append((i, SwingKind.HIGH))
            if candles[i].low < min(c.low for c in others):
                expected.append((i, SwingKind.LOW))

        assert [(e.index, e.kind) for e in detect_extrema(candles, lookback)] == expected
