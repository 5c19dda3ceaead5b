"""
Conversion helper functions for swing point routers.
"""

import math
from typing import List, Sequence

from fastapi import HTTPException

from ....adapters import parse_timestamp, swing_points_to_records
from ....trend_oracle import analyze_trend
from ....types import AnalysisResult, Candle, SwingSequence
from ...schemas import (
    AnalysisResponse,
    CandlePayload,
    SwingPointResponse,
    TimeframeSwingResponse,
)


def payloads_to_candles(payloads: Sequence[CandlePayload]) -> List[Candle]:
    """
    Convert candle payloads to Candles indexed from 0.

    Raises:
        HTTPException: 422 if a timestamp cannot be parsed, a price is NaN
            or infinite, or the series is not in ascending time order.
    """
    candles = []
    for position, payload in enumerate(payloads):
        try:
            timestamp = parse_timestamp(payload.timestamp)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=f"Candle {position}: {e}")

        prices = (payload.open, payload.high, payload.low, payload.close, payload.volume)
        if not all(math.isfinite(p) for p in prices):
            raise HTTPException(
                status_code=422,
                detail=f"Candle {position}: prices and volume must be finite numbers"
            )

        if candles and timestamp <= candles[-1].timestamp:
            raise HTTPException(
                status_code=422,
                detail=f"Candle {position}: timestamps must be strictly increasing"
            )

        candles.append(Candle(
            index=position,
            timestamp=timestamp,
            open=payload.open,
            high=payload.high,
            low=payload.low,
            close=payload.close,
            volume=payload.volume,
        ))
    return candles


def swing_sequence_to_response(sequence: SwingSequence) -> TimeframeSwingResponse:
    """Convert a pipeline result to its per-timeframe response."""
    return TimeframeSwingResponse(
        swing_points=[SwingPointResponse(**record) for record in swing_points_to_records(sequence.points)],
        trend=analyze_trend(sequence.points).value,
        is_alternating=sequence.is_alternating,
        unresolved_pairs=list(sequence.unresolved_pairs),
    )


def analysis_to_response(result: AnalysisResult) -> AnalysisResponse:
    return AnalysisResponse(**result.to_dict())
