"""
Scenes for Brick Bounce.
"""

from __future__ import annotations

from .breakout import BreakoutScene, outcome_banner, read_intent

__all__ = [
    "BreakoutScene",
    "outcome_banner",
    "read_intent",
]
