"""
Entities package for Brick Bounce.
This package contains the paddle, ball and brick definitions.
"""

from __future__ import annotations

from .ball import Ball, BallStep
from .brick import Brick, BrickField
from .paddle import Paddle

__all__ = [
    "Ball",
    "BallStep",
    "Brick",
    "BrickField",
    "Paddle",
]
