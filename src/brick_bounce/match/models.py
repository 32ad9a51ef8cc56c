"""
Breakout match model
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from mini_arcade_core.scenes.sim_scene import (
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)

from brick_bounce.constants import Color
from brick_bounce.entities.ball import Ball, BallStep
from brick_bounce.entities.brick import BrickField
from brick_bounce.entities.paddle import Paddle

Outcome = Literal["PLAYING", "WON", "LOST"]


@dataclass(frozen=True)
class BreakoutIntent(BaseIntent):
    """
    Player intent for one tick.

    :ivar move_left (bool): Left is held.
    :ivar move_right (bool): Right is held.
    :ivar serve (bool): Serve was requested.
    """

    move_left: bool = False
    move_right: bool = False
    serve: bool = False


@dataclass
class BreakoutWorld(BaseWorld):
    """
    Everything a match owns.

    :ivar viewport (tuple[float, float]): Playfield size (width, height).
    :ivar paddle (Paddle): Player paddle; also carries the lives.
    :ivar ball (Ball): The ball.
    :ivar bricks (BrickField): Brick grid.
    :ivar score (int): Points so far; never decreases within a match.
    :ivar outcome (Outcome): Current match outcome.
    """

    viewport: tuple[float, float]
    paddle: Paddle
    ball: Ball
    bricks: BrickField
    score: int = 0
    outcome: Outcome = "PLAYING"


@dataclass
class BreakoutTickContext(BaseTickContext[BreakoutWorld, BreakoutIntent]):
    """
    Context for a Breakout match tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last tick.

    :ivar world (BreakoutWorld): Match state.
    :ivar commands (CommandQueue): Command queue.

    :ivar intent (Optional[BreakoutIntent]): Player intent for this tick.
    :ivar ball_step (BallStep | None): Ball events, set by the ball system.
    """

    ball_step: BallStep | None = None


@dataclass(frozen=True)
class BrickView:
    """Draw data for one alive brick."""

    rect: tuple[float, float, float, float]
    color: Color


@dataclass(frozen=True)
class MatchSnapshot:
    """
    Read-only view of a match for the rendering layer.

    :ivar paddle (tuple[float, float, float, float]): Paddle (x, y, w, h).
    :ivar paddle_color (Color): Paddle color.
    :ivar ball_center (tuple[float, float]): Ball center.
    :ivar ball_radius (float): Ball radius.
    :ivar ball_color (Color): Ball color.
    :ivar ball_active (bool): Ball has been served.
    :ivar bricks (tuple[BrickView, ...]): Alive bricks in grid order.
    :ivar score (int): Current score.
    :ivar lives (int): Remaining lives.
    :ivar outcome (Outcome): Current outcome.
    """

    paddle: tuple[float, float, float, float]
    paddle_color: Color
    ball_center: tuple[float, float]
    ball_radius: float
    ball_color: Color
    ball_active: bool
    bricks: tuple[BrickView, ...]
    score: int
    lives: int
    outcome: Outcome
