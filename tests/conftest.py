"""
Shared test fixtures and helpers for swing structure tests.
"""

from typing import List, Sequence

import numpy as np
import pytest

from swing_structure.types import Candle, SwingLabel, SwingPoint


def make_candle(
    index: int,
    open_: float,
    high: float,
    low: float,
    close: float,
    timestamp: int = None,
    volume: float = 0.0,
) -> Candle:
    """Helper to create Candle objects for testing.

    Args:
        index: Candle index in the series
        open_: Opening price
        high: High price
        low: Low price
        close: Closing price
        timestamp: Unix timestamp (defaults to 1700000000 + index * 60)
        volume: Traded volume

    Returns:
        Candle object for use in detector tests
    """
    return Candle(
        index=index,
        timestamp=1700000000 + index * 60 if timestamp is None else timestamp,
        open=open_,
        high=high,
        low=low,
        close=close,
        volume=volume,
    )


def candles_from_extremes(highs: Sequence[float], lows: Sequence[float]) -> List[Candle]:
    """Candles with the given highs/lows; open and close sit at the midpoint."""
    candles = []
    for i, (high, low) in enumerate(zip(highs, lows)):
        mid = (high + low) / 2
        candles.append(make_candle(i, mid, high, low, mid))
    return candles


def candles_from_closes(closes: Sequence[float], spread: float = 1.0) -> List[Candle]:
    """Candles with high/low `spread` away from each close."""
    return [
        make_candle(i, close, close + spread, close - spread, close)
        for i, close in enumerate(closes)
    ]


def make_point(index: int, price: float, label: SwingLabel,
               synthetic: bool = False) -> SwingPoint:
    """Swing point with a timestamp matching make_candle()."""
    return SwingPoint(
        index=index,
        timestamp=1700000000 + index * 60,
        price=price,
        kind=label.kind,
        label=label,
        synthetic=synthetic,
    )


# Closes of a clean zigzag. With lookback=2 the swing points are
# H@3 (17), L@6 (9), H@10 (19), L@13 (11), H@17 (21).
ZIGZAG_CLOSES = [10, 12, 14, 16, 14, 12, 10, 12, 14, 16,
                 18, 16, 14, 12, 14, 16, 18, 20, 18, 16]


@pytest.fixture
def zigzag_candles() -> List[Candle]:
    return candles_from_closes(ZIGZAG_CLOSES)


@pytest.fixture
def zigzag_csv(tmp_path):
    """The zigzag series written as a time,open,high,low,close CSV."""
    lines = ["time,open,high,low,close,volume"]
    for candle in candles_from_closes(ZIGZAG_CLOSES):
        lines.append(
            f"{candle.timestamp},{candle.open},{candle.high},{candle.low},{candle.close},100"
        )
    p = tmp_path / "zigzag.csv"
    p.write_text("\n".join(lines) + "\n")
    return str(p)


@pytest.fixture
def random_walk_candles():
    """Factory for seeded random-walk candle series."""

    def _make(length: int, seed: int) -> List[Candle]:
        rng = np.random.RandomState(seed)
        closes = 100 + np.cumsum(rng.normal(0, 1, length))
        candles = []
        prev_close = 100.0
        for i, close in enumerate(closes):
            open_ = prev_close
            high = max(open_, close) + abs(rng.normal(0, 0.5))
            low = min(open_, close) - abs(rng.normal(0, 0.5))
            candles.append(make_candle(i, float(open_), float(high), float(low), float(close)))
            prev_close = float(close)
        return candles

    return _make
