"""
Swing Detection Configuration

Centralized configuration for swing point detection and trend analysis.
"""

from dataclasses import dataclass, replace


# Window size of the trend lookup tables (1 to 4 labels).
MAX_TREND_WINDOW = 4


@dataclass(frozen=True)
class DetectionConfig:
    """
    All configurable parameters for the swing point pipeline.

    Attributes:
        lookback: Number of candles checked on each side of a candidate
            extremum. A series needs at least 2 * lookback + 1 candles to
            produce any swing point. Default 5.
        trend_window: Number of most recent swing points fed to the trend
            table. Must be between 1 and 4. Default 4.

    Example:
        >>> config = DetectionConfig.default()
        >>> config.lookback
        5
        >>> config.with_lookback(3).min_candles
        7
    """
    lookback: int = 5
    trend_window: int = MAX_TREND_WINDOW

    def __post_init__(self):
        if isinstance(self.lookback, bool) or not isinstance(self.lookback, int):
            raise ValueError(f"lookback must be an integer, got {self.lookback!r}")
        if self.lookback < 1:
            raise ValueError(f"lookback must be >= 1, got {self.lookback}")
        if not 1 <= self.trend_window <= MAX_TREND_WINDOW:
            raise ValueError(
                f"trend_window must be between 1 and {MAX_TREND_WINDOW}, got {self.trend_window}"
            )

    @classmethod
    def default(cls) -> "DetectionConfig":
        """Create a config with default values."""
        return cls()

    @property
    def min_candles(self) -> int:
        """Smallest series length that can contain a swing point."""
        return 2 * self.lookback + 1

    def with_lookback(self, lookback: int) -> "DetectionConfig":
        """
        Create a new config with a different lookback.

        Since DetectionConfig is frozen, this creates a new instance.
        """
        return replace(self, lookback=lookback)

    def with_trend_window(self, trend_window: int) -> "DetectionConfig":
        """Create a new config with a different trend window."""
        return replace(self, trend_window=trend_window)
