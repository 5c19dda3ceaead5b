"""
FastAPI backend for swing point detection.

Minimal server for:
- Swing point calculation per timeframe
- Entry-to-reversal analysis

The server never fetches market data; candles arrive in the request.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from .routers import swing_points_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Swing Structure Server",
    description="Swing point detection, trend verdicts and entry analysis",
    version=__version__,
)

# Enable CORS for the dashboard frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(swing_points_router)


@app.get("/api/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": __version__,
    }
