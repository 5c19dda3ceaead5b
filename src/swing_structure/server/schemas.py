"""
Pydantic models for the swing points API.

All request/response schemas for swing point and entry analysis endpoints.
"""
from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

Timeframe = Literal["15Min", "1H", "4H", "1D"]
TIMEFRAMES: Tuple[str, ...] = ("15Min", "1H", "4H", "1D")

# Largest lookback accepted over HTTP
MAX_LOOKBACK = 500


# ============================================================================
# Candle Payloads
# ============================================================================


class CandlePayload(BaseModel):
    """A single OHLC candle as sent by the dashboard. Prices must be finite."""
    timestamp: Union[int, float, str]  # Unix seconds or ISO-8601 (naive = UTC)
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0


# ============================================================================
# Swing Points
# ============================================================================


class SwingPointsRequest(BaseModel):
    """Request to compute swing points for one instrument across timeframes."""
    model_config = ConfigDict(populate_by_name=True)

    instrument_key: str = Field(alias="instrumentKey")
    company_name: str = Field(alias="companyName")
    lookback: int = Field(default=5, ge=1, le=MAX_LOOKBACK)
    timeframes: Dict[Timeframe, List[CandlePayload]]


class SwingPointResponse(BaseModel):
    """A swing point for chart rendering."""
    timestamp: str
    time: int
    price: float
    label: str  # HH, HL, LH or LL
    index: int


class TimeframeSwingResponse(BaseModel):
    """Swing points and trend verdict for a single timeframe."""
    swing_points: List[SwingPointResponse]
    trend: str  # bullish, bearish or neutral
    is_alternating: bool
    unresolved_pairs: List[Tuple[int, int]] = []


class SwingPointsResponse(BaseModel):
    """Swing points per timeframe. Timeframes not requested are null."""
    instrument_key: str
    company_name: str
    lookback: int
    timeframes: Dict[str, Optional[TimeframeSwingResponse]]


# ============================================================================
# Entry Analysis
# ============================================================================


class AnalyzeRequest(BaseModel):
    """Request to analyze the window from an entry candle to the next reversal."""
    model_config = ConfigDict(populate_by_name=True)

    candles: List[CandlePayload]
    entry_index: int = Field(alias="entryIndex")
    lookback: int = Field(default=5, ge=1, le=MAX_LOOKBACK)
    trend_window: int = Field(default=4, ge=1, le=4)


class AnalysisResponse(BaseModel):
    """Profit/loss statistics between entry and reversal."""
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
    trend_verdict: str
    reversal_label: str
