"""
Router package for the swing points server.

Routers:
- swing_points.py: Swing point calculation and entry analysis
"""

from .swing_points import router as swing_points_router

__all__ = [
    "swing_points_router",
]
