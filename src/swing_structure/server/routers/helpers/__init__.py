"""
Helper functions for swing point routers.

Provides conversion functions between API payloads and engine types.
"""

from .conversions import (
    payloads_to_candles,
    swing_sequence_to_response,
    analysis_to_response,
)

__all__ = [
    'payloads_to_candles',
    'swing_sequence_to_response',
    'analysis_to_response',
]
