"""
Swing Point Calculator

Runs the full pipeline over a candle series:

    detect_extrema -> classify -> repair -> relabel

The result is a chronologically ordered sequence of HH/HL/LH/LL points in
which highs and lows alternate (except around pairs reported as
unresolved by the repair pass).
"""

import logging
from typing import List, Optional, Sequence

from .classifier import classify
from .detection_config import DetectionConfig
from .extremum_detector import detect_extrema
from .relabel import relabel
from .repair import repair_with_report
from .types import Candle, SwingPoint, SwingSequence

logger = logging.getLogger(__name__)


def build_swing_sequence(candles: Sequence[Candle],
                         config: Optional[DetectionConfig] = None) -> SwingSequence:
    """
    Detect and label the swing points of a candle series.

    Args:
        candles: Chronologically ordered candles, indexed 0..N-1.
        config: Detection parameters (uses default if not provided).

    Returns:
        SwingSequence with the final points and any unresolved pairs.
        Series shorter than 2 * lookback + 1 give an empty sequence.
    """
    config = config or DetectionConfig.default()

    raw = detect_extrema(candles, config.lookback)
    if not raw:
        return SwingSequence()

    classified = classify(raw, candles)
    repaired = repair_with_report(classified, candles)
    final_points = relabel(repaired.points)

    synthetic_count = sum(1 for p in final_points if p.synthetic)
    logger.debug(
        f"Swing pipeline: {len(raw)} extrema, {synthetic_count} synthetic, "
        f"{len(final_points)} final points"
    )
    if repaired.unresolved_pairs:
        logger.warning(
            f"{len(repaired.unresolved_pairs)} same-kind pair(s) could not be repaired; "
            f"sequence does not fully alternate"
        )

    return SwingSequence(points=final_points, unresolved_pairs=repaired.unresolved_pairs)


def calculate_swing_points(candles: Sequence[Candle], lookback: int = 5) -> List[SwingPoint]:
    """
    Convenience wrapper returning only the final swing points.

    Args:
        candles: Chronologically ordered candles.
        lookback: Candles checked on each side of a candidate (default 5).

    Returns:
        Final swing points in ascending index order.

    Raises:
        ValueError: If lookback < 1.
    """
    return build_swing_sequence(candles, DetectionConfig(lookback=lookback)).points
