"""
Per-tick systems for a Breakout match.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.utils import logger

from brick_bounce.difficulty import MatchConfig
from brick_bounce.entities.ball import Ball
from brick_bounce.entities.paddle import Paddle
from brick_bounce.match.models import BreakoutTickContext, BreakoutWorld


def respawn_round(world: BreakoutWorld, config: MatchConfig):
    """Put a fresh paddle and unserved ball in place, keeping the lives."""
    lives = world.paddle.lives
    world.paddle = Paddle.spawn(config)
    world.paddle.lives = lives
    world.ball = Ball.spawn(world.paddle, config)


@dataclass
class PaddleSystem:
    """
    Move the paddle based on intent.
    """

    name: str = "breakout_paddle"
    order: int = 20

    def step(self, ctx: BreakoutTickContext):
        """Move the paddle based on intent."""
        width, _ = ctx.world.viewport
        ctx.world.paddle.update(ctx.intent, ctx.dt, width)


@dataclass
class BallSystem:
    """
    Serve, collide and move the ball.
    """

    name: str = "breakout_ball"
    order: int = 30

    def step(self, ctx: BreakoutTickContext):
        """Advance the ball and record what happened."""
        world = ctx.world
        ctx.ball_step = world.ball.update(
            ctx.intent, world.paddle, world.bricks, ctx.dt, world.viewport
        )


@dataclass
class RulesSystem:
    """
    Apply Breakout rules: scoring, life loss, win and loss.
    """

    config: MatchConfig
    name: str = "breakout_rules"
    order: int = 50

    def step(self, ctx: BreakoutTickContext):
        """Fold the ball's events into score and outcome."""
        step = ctx.ball_step
        if step is None:
            return

        world = ctx.world
        world.score += step.score_delta

        if step.game_over:
            world.outcome = "LOST"
            logger.info(f"Out of lives, final score {world.score}")
            return

        if step.field_cleared:
            world.outcome = "WON"
            logger.info(f"Field cleared, final score {world.score}")
            return

        if step.life_lost:
            logger.info(f"Life lost, {world.paddle.lives} left")
            respawn_round(world, self.config)
