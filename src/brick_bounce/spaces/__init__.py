"""
2D geometry used by the simulation.
"""

from __future__ import annotations

from .geometry import Rect, Vector2, circle_intersects_rect, normalized

__all__ = [
    "Rect",
    "Vector2",
    "circle_intersects_rect",
    "normalized",
]
