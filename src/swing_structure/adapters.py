"""
Adapters between swing structure types and external representations.

- DataFrame <-> Candle list
- Swing points -> serializable records for chart rendering
"""

import math
import numbers
from datetime import datetime
from typing import Any, Dict, List, Sequence, Union

import pandas as pd

from .types import Candle, SwingPoint

TimestampLike = Union[int, float, str, datetime, pd.Timestamp]

# Used when a frame carries no timestamps at all
DEFAULT_START_TIMESTAMP = 1700000000
DEFAULT_SPACING_SECONDS = 60

# Numeric timestamps must fall between the epoch and 9999-12-31T23:59:59Z
MAX_TIMESTAMP = 253402300799


def parse_timestamp(value: TimestampLike) -> int:
    """
    Convert a timestamp to Unix seconds.

    Numbers are taken as Unix seconds and must be finite and non-negative.
    Strings and datetimes without a timezone are treated as UTC so the same
    wall-clock time maps to the same instant across timeframes.

    Raises:
        ValueError: If the value cannot be parsed.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if isinstance(value, numbers.Real):
        if not math.isfinite(value) or not 0 <= value <= MAX_TIMESTAMP:
            raise ValueError(f"Invalid timestamp: {value!r}")
        return int(value)

    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid timestamp: {value!r}") from e
    if pd.isna(ts):
        raise ValueError(f"Invalid timestamp: {value!r}")

    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    return int(ts.timestamp())


def dataframe_to_candles(df: pd.DataFrame) -> List[Candle]:
    """
    Convert DataFrame with OHLC columns to Candle list.

    Handles various column naming conventions commonly used in market data.

    Args:
        df: DataFrame with OHLC columns (open/Open, high/High, ...).
            Timestamps come from a timestamp/time/date/datetime column or
            from a DatetimeIndex. Volume is optional.

    Returns:
        List of Candle objects with sequential indices starting at 0.

    Raises:
        ValueError: If an OHLC column is missing.
    """
    col_map = {c.lower(): c for c in df.columns}

    missing = [c for c in ("open", "high", "low", "close") if c not in col_map]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Found: {list(df.columns)}")

    ts_col = next((col_map[c] for c in ("timestamp", "time", "date", "datetime") if c in col_map), None)
    use_index = ts_col is None and isinstance(df.index, pd.DatetimeIndex)
    volume_col = col_map.get("volume")

    candles = []
    for position, (idx, row) in enumerate(df.iterrows()):
        if ts_col is not None:
            timestamp = parse_timestamp(row[ts_col])
        elif use_index:
            timestamp = parse_timestamp(idx)
        else:
            timestamp = DEFAULT_START_TIMESTAMP + position * DEFAULT_SPACING_SECONDS

        candles.append(Candle(
            index=position,
            timestamp=timestamp,
            open=float(row[col_map["open"]]),
            high=float(row[col_map["high"]]),
            low=float(row[col_map["low"]]),
            close=float(row[col_map["close"]]),
            volume=float(row[volume_col]) if volume_col is not None and pd.notna(row[volume_col]) else 0.0,
        ))
    return candles


def candles_to_dataframe(candles: Sequence[Candle]) -> pd.DataFrame:
    """Inverse of dataframe_to_candles(): UTC DatetimeIndex named 'timestamp'."""
    df = pd.DataFrame(
        {
            "open": [c.open for c in candles],
            "high": [c.high for c in candles],
            "low": [c.low for c in candles],
            "close": [c.close for c in candles],
            "volume": [c.volume for c in candles],
        },
        index=pd.to_datetime([c.timestamp for c in candles], unit="s", utc=True),
    )
    df.index.name = "timestamp"
    return df


def swing_point_to_record(point: SwingPoint) -> Dict[str, Any]:
    """Serialize one swing point for chart rendering."""
    return {
        "timestamp": point.date.isoformat(),
        "time": point.timestamp,
        "price": point.price,
        "label": point.label.value,
        "index": point.index,
    }


def swing_points_to_records(points: Sequence[SwingPoint]) -> List[Dict[str, Any]]:
    """Serialize swing points as {timestamp, time, price, label, index} records."""
    return [swing_point_to_record(p) for p in points]
