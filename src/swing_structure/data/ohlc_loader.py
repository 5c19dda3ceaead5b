import logging
import os
from typing import List

import pandas as pd

from ..adapters import dataframe_to_candles
from ..types import Candle

logger = logging.getLogger(__name__)

FORMAT_A_COLUMNS = ['date', 'time', 'open', 'high', 'low', 'close', 'volume']

# Share of invalid OHLC rows tolerated before the whole file is rejected
MAX_INVALID_ROW_RATIO = 0.01


def detect_format(filepath: str) -> str:
    """
    Detects the format of the CSV file.

    Args:
        filepath: Path to the CSV file.

    Returns:
        "format_a" for semicolon-separated data without header
            (DD/MM/YYYY;HH:MM:SS;open;high;low;close;volume).
        "format_b" for comma-separated data with a time,open,high,low,close
            header and Unix epoch seconds.

    Raises:
        FileNotFoundError, ValueError.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, 'r') as f:
        # Skip blank lines at the top
        lines = [f.readline() for _ in range(10)]
    lines = [line.strip() for line in lines if line.strip()]

    if not lines:
        raise ValueError("File is empty")

    first_line = lines[0]

    if ';' in first_line:
        return "format_a"

    if ',' in first_line:
        lowered = first_line.lower()
        if "time" in lowered and "open" in lowered:
            return "format_b"

        parts = first_line.split(',')
        if parts[0].replace('.', '', 1).isdigit():
            return "format_b"

    raise ValueError(
        "Could not detect CSV format. Expected semicolon-separated historical "
        "format or comma-separated format with a time,open,high,low,close header."
    )


def _read_format_a(filepath: str) -> pd.DataFrame:
    df = pd.read_csv(
        filepath,
        sep=';',
        header=None,
        names=FORMAT_A_COLUMNS,
        dtype={
            'date': str, 'time': str,
            'open': 'float64', 'high': 'float64', 'low': 'float64', 'close': 'float64',
            'volume': 'float64'
        },
        engine='c'
    )
    datetime_str = df['date'] + ' ' + df['time']
    df['timestamp'] = pd.to_datetime(datetime_str, format='%d/%m/%Y %H:%M:%S', utc=True)
    df.drop(columns=['date', 'time'], inplace=True)
    return df


def _read_format_b(filepath: str) -> pd.DataFrame:
    df = pd.read_csv(filepath, sep=',', engine='c')
    df.columns = df.columns.str.lower()

    required = {'time', 'open', 'high', 'low', 'close'}
    if not required.issubset(df.columns):
        raise ValueError(f"Missing required columns. Found: {df.columns.tolist()}")

    if 'volume' not in df.columns:
        df['volume'] = 0.0
    else:
        df['volume'] = df['volume'].fillna(0).astype('float64')

    df['timestamp'] = pd.to_datetime(df['time'], unit='s', utc=True)
    df.drop(columns=['time'], inplace=True)

    for c in ['open', 'high', 'low', 'close']:
        df[c] = df[c].astype('float64')
    return df


def load_ohlc(filepath: str) -> pd.DataFrame:
    """
    Loads OHLC data from a CSV file into a standardized DataFrame.

    Args:
        filepath: Path to the CSV file.

    Returns:
        DataFrame indexed by UTC timestamp with columns
        open, high, low, close, volume; sorted, without duplicate timestamps.

    Raises:
        FileNotFoundError, ValueError.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")

    if os.path.getsize(filepath) == 0:
        raise ValueError("File is empty")

    fmt = detect_format(filepath)

    try:
        df = _read_format_a(filepath) if fmt == "format_a" else _read_format_b(filepath)
    except (KeyError, ValueError, TypeError, pd.errors.ParserError) as e:
        raise ValueError(f"Error parsing file: {e}") from e

    df = df[['timestamp', 'open', 'high', 'low', 'close', 'volume']]
    df.set_index('timestamp', inplace=True)
    # Stable sort so 'last' below still means last in the file
    df.sort_index(inplace=True, kind='mergesort')

    # Keep the last row for a repeated timestamp (later rows are corrections)
    duplicate_timestamps = df.index.duplicated(keep='last')
    if duplicate_timestamps.any():
        logger.debug(
            f"Duplicate timestamps in {os.path.basename(filepath)}: "
            f"{duplicate_timestamps.sum()} removed (kept last occurrence)"
        )
        df = df[~duplicate_timestamps]

    valid_ohlc = (
        (df['low'] <= df['open']) & (df['open'] <= df['high']) &
        (df['low'] <= df['close']) & (df['close'] <= df['high'])
    )
    valid_mask = valid_ohlc & (df['volume'] >= 0)

    if not valid_mask.all():
        invalid_count = int((~valid_mask).sum())
        total_count = len(df)

        if invalid_count / total_count > MAX_INVALID_ROW_RATIO:
            raise ValueError(
                f"Too many invalid rows: {invalid_count}/{total_count} ({invalid_count / total_count:.2%})"
            )

        logger.warning(f"Dropping {invalid_count} invalid OHLC row(s) from {filepath}")
        df = df[valid_mask]

    return df


def load_candles(filepath: str) -> List[Candle]:
    """
    Load a CSV file straight into a Candle list indexed from 0.

    Raises:
        FileNotFoundError, ValueError.
    """
    df = load_ohlc(filepath)
    logger.info(f"Loaded {len(df)} candles from {os.path.basename(filepath)}")
    return dataframe_to_candles(df)
