# Swing Structure
#
# Swing point detection, HH/HL/LH/LL labeling, trend verdicts and
# entry-to-reversal analysis over OHLC candle series.

from .types import (
    Candle,
    SwingKind,
    SwingLabel,
    TrendVerdict,
    RawExtremum,
    SwingPoint,
    SwingSequence,
    AnalysisResult,
    END_OF_DATA,
)
from .detection_config import DetectionConfig

# Pipeline stages
from .extremum_detector import detect_extrema
from .classifier import SwingState, classify
from .repair import repair, repair_with_report
from .relabel import relabel
from .calculator import build_swing_sequence, calculate_swing_points

# Consumers of the final sequence
from .trend_oracle import analyze_trend, recent_swing_points, trend_from_labels
from .trend_sequences import TrendSequence, detect_trend_sequences, label_transitions, format_transition
from .entry_analyzer import analyze_entry, find_reversal

from .adapters import (
    candles_to_dataframe,
    dataframe_to_candles,
    parse_timestamp,
    swing_points_to_records,
)

__version__ = "0.1.0"
