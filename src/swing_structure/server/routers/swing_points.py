"""
Swing points router.

Thin adapter over the swing structure engine: the caller supplies candles,
the engine runs once per requested timeframe.

Endpoints:
- POST /api/swing-points - Swing points and trend per timeframe
- POST /api/swing-points/analyze - Entry-to-reversal analysis
"""

import logging

from fastapi import APIRouter, HTTPException

from ...calculator import build_swing_sequence
from ...detection_config import DetectionConfig
from ...entry_analyzer import analyze_entry
from ..schemas import (
    TIMEFRAMES,
    AnalysisResponse,
    AnalyzeRequest,
    SwingPointsRequest,
    SwingPointsResponse,
)
from .helpers import analysis_to_response, payloads_to_candles, swing_sequence_to_response

logger = logging.getLogger(__name__)
router = APIRouter(tags=["swing-points"])


@router.post("/api/swing-points", response_model=SwingPointsResponse)
async def calculate_swing_points(request: SwingPointsRequest):
    """
    Calculate swing points for each requested timeframe.

    Timeframes missing from the request, or sent with no candles, come back
    as null. Series shorter than 2 * lookback + 1 return an empty list of
    swing points.
    """
    config = DetectionConfig(lookback=request.lookback)
    logger.info(
        f"Swing points for {request.company_name} ({request.instrument_key}), "
        f"timeframes={sorted(request.timeframes)}, lookback={request.lookback}"
    )

    results = {}
    for timeframe in TIMEFRAMES:
        payloads = request.timeframes.get(timeframe)
        if not payloads:
            results[timeframe] = None
            continue

        candles = payloads_to_candles(payloads)
        sequence = build_swing_sequence(candles, config)
        results[timeframe] = swing_sequence_to_response(sequence)

    return SwingPointsResponse(
        instrument_key=request.instrument_key,
        company_name=request.company_name,
        lookback=request.lookback,
        timeframes=results,
    )


@router.post("/api/swing-points/analyze", response_model=AnalysisResponse)
async def analyze_entry_candle(request: AnalyzeRequest):
    """
    Analyze price behaviour from an entry candle to the next reversal.

    Returns 404 when no analysis is possible (entry out of range or on the
    last candle).
    """
    candles = payloads_to_candles(request.candles)
    config = DetectionConfig(lookback=request.lookback, trend_window=request.trend_window)
    sequence = build_swing_sequence(candles, config)

    result = analyze_entry(candles, request.entry_index, sequence.points, trend_window=config.trend_window)
    if result is None:
        raise HTTPException(
            status_code=404,
            detail=(
                f"No analysis possible for entry index {request.entry_index}: "
                f"the entry must be before the last of {len(candles)} candles"
            )
        )

    return analysis_to_response(result)
