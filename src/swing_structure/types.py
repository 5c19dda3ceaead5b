"""Core data types for swing point detection."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Tuple


@dataclass
class Candle:
    """Single OHLC candle"""
    index: int
    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    @property
    def date(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)


class SwingKind(str, Enum):
    """Which side of the range a swing point sits on."""
    HIGH = "high"
    LOW = "low"


class SwingLabel(str, Enum):
    """
    Structure label of a swing point relative to the previous swing
    point of the same kind.
    """
    HH = "HH"  # Higher High
    LH = "LH"  # Lower High
    HL = "HL"  # Higher Low
    LL = "LL"  # Lower Low

    @property
    def kind(self) -> SwingKind:
        if self in (SwingLabel.HH, SwingLabel.LH):
            return SwingKind.HIGH
        return SwingKind.LOW

    @property
    def is_bullish(self) -> bool:
        """HH and HL are the labels of an up-trending structure."""
        return self in (SwingLabel.HH, SwingLabel.HL)

    @classmethod
    def for_kind(cls, kind: SwingKind, higher: bool) -> "SwingLabel":
        """
        Pick the label for a point of `kind`.

        Args:
            kind: HIGH or LOW.
            higher: True when the point is above its same-kind predecessor
                (or has no predecessor).
        """
        if kind == SwingKind.HIGH:
            return cls.HH if higher else cls.LH
        return cls.HL if higher else cls.LL


class TrendVerdict(str, Enum):
    """Qualitative trend read from the latest swing points."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class RawExtremum:
    """A local extremum found by the window scan, before labeling."""
    index: int
    price: float
    kind: SwingKind


@dataclass
class SwingPoint:
    """
    A labeled turning point in a candle series.

    Attributes:
        index: Position of the candle in the series.
        timestamp: Unix timestamp (seconds) of that candle.
        price: The high (for HIGH points) or low (for LOW points) that qualified.
        kind: HIGH or LOW. Fixed once the extremum is found.
        label: HH/LH for highs, HL/LL for lows. Rewritten by later passes.
        synthetic: True when the point was inserted by the repair pass
            rather than found by the window scan.
    """
    index: int
    timestamp: int
    price: float
    kind: SwingKind
    label: SwingLabel
    synthetic: bool = False

    def __post_init__(self):
        if self.label.kind != self.kind:
            raise ValueError(
                f"Label {self.label.value} is not valid for a swing {self.kind.value}"
            )

    @property
    def is_high(self) -> bool:
        return self.kind == SwingKind.HIGH

    @property
    def is_low(self) -> bool:
        return self.kind == SwingKind.LOW

    @property
    def date(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)


@dataclass(frozen=True)
class AnalysisResult:
    """
    Profit/loss read-out between an entry candle and the next reversal.

    Prices are candle closes. Percentages are relative to the entry price.
    `reversal_label` is the label of the reversal swing point, or
    "end of data" when the window runs to the last candle.
    """
    entry_index: int
    reversal_index: int
    entry_price: float
    reversal_price: float
    max_favorable_price: float
    max_adverse_price: float
    max_favorable_pct: float
    max_adverse_pct: float
    final_pnl_abs: float
    final_pnl_pct: float
    candle_count: int
    trend_verdict: TrendVerdict
    reversal_label: str

    def to_dict(self) -> dict:
        """Plain dict with enum values flattened to strings."""
        return {
            "entry_index": self.entry_index,
            "reversal_index": self.reversal_index,
            "entry_price": self.entry_price,
            "reversal_price": self.reversal_price,
            "max_favorable_price": self.max_favorable_price,
            "max_adverse_price": self.max_adverse_price,
            "max_favorable_pct": self.max_favorable_pct,
            "max_adverse_pct": self.max_adverse_pct,
            "final_pnl_abs": self.final_pnl_abs,
            "final_pnl_pct": self.final_pnl_pct,
            "candle_count": self.candle_count,
            "trend_verdict": self.trend_verdict.value,
            "reversal_label": self.reversal_label,
        }


@dataclass
class SwingSequence:
    """
    Output of the swing point pipeline.

    Attributes:
        points: Swing points in ascending index order.
        unresolved_pairs: (previous_index, current_index) of same-kind
            neighbours that had no candle between them, so no opposite
            point could be inserted. When non-empty the alternation
            invariant does not hold around those pairs.
    """
    points: List[SwingPoint] = field(default_factory=list)
    unresolved_pairs: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def is_alternating(self) -> bool:
        """True when no two neighbouring points share a kind."""
        return all(a.kind != b.kind for a, b in zip(self.points, self.points[1:]))

    def __len__(self) -> int:
        return len(self.points)


END_OF_DATA = "end of data"

