"""
Breakout match: world model, per-tick systems and controller.
"""

from __future__ import annotations

from .controller import Match
from .models import BreakoutIntent, MatchSnapshot, Outcome

__all__ = [
    "BreakoutIntent",
    "Match",
    "MatchSnapshot",
    "Outcome",
]
