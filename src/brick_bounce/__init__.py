"""
Brick Bounce: a Breakout-style arcade game.

The simulation core (entities, match controller) is independent of pygame's
display layer; :mod:`brick_bounce.app` wires it to a window.
"""

from __future__ import annotations

from .difficulty import DIFFICULTY_PRESETS, MatchConfig, preset
from .match import BreakoutIntent, Match, MatchSnapshot, Outcome

__all__ = [
    "DIFFICULTY_PRESETS",
    "BreakoutIntent",
    "Match",
    "MatchConfig",
    "MatchSnapshot",
    "Outcome",
    "preset",
]

__version__ = "0.1.0"
