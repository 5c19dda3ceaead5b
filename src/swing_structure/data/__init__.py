# OHLC file loading

from .ohlc_loader import detect_format, load_candles, load_ohlc

__all__ = ["detect_format", "load_candles", "load_ohlc"]
