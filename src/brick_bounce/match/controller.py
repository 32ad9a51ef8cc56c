"""
Match controller: owns the world and advances it one tick at a time.
"""

from __future__ import annotations

from mini_arcade_core.engine.commands import CommandQueue
from mini_arcade_core.runtime.input_frame import InputFrame
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline
from mini_arcade_core.utils import logger

from brick_bounce.difficulty import MatchConfig
from brick_bounce.entities.ball import Ball
from brick_bounce.entities.brick import BrickField
from brick_bounce.entities.paddle import Paddle
from brick_bounce.match.models import (
    BreakoutIntent,
    BreakoutTickContext,
    BreakoutWorld,
    BrickView,
    MatchSnapshot,
    Outcome,
)
from brick_bounce.match.systems import (
    BallSystem,
    PaddleSystem,
    RulesSystem,
    respawn_round,
)


def build_world(config: MatchConfig) -> BreakoutWorld:
    """Fresh world in its initial layout."""
    paddle = Paddle.spawn(config)
    return BreakoutWorld(
        entities=[],
        viewport=config.viewport,
        paddle=paddle,
        ball=Ball.spawn(paddle, config),
        bricks=BrickField.from_config(config),
    )


class Match:
    """
    One game of Breakout.

    Call :meth:`tick` once per frame. Once it returns ``"WON"`` or
    ``"LOST"`` the match is over; call :meth:`reset` to play again.
    """

    def __init__(self, config: MatchConfig | None = None):
        """
        :param config: Match tunables.
        :type config: MatchConfig, optional
        """
        self.config = config or MatchConfig()
        self.world = build_world(self.config)
        self.commands = CommandQueue()
        self.frame_index = 0
        self.systems = SystemPipeline[BreakoutTickContext]()
        self.systems.extend(
            [
                PaddleSystem(),
                BallSystem(),
                RulesSystem(self.config),
            ]
        )

    @property
    def score(self) -> int:
        """Points scored so far."""
        return self.world.score

    @property
    def lives(self) -> int:
        """Lives left."""
        return self.world.paddle.lives

    @property
    def outcome(self) -> Outcome:
        """Current match outcome."""
        return self.world.outcome

    @property
    def finished(self) -> bool:
        """Whether the match has reached a terminal outcome."""
        return self.world.outcome != "PLAYING"

    def tick(self, intent: BreakoutIntent, dt: float) -> Outcome:
        """
        Advance the match by ``dt`` seconds.

        Ticking a finished match is a caller error; it is ignored with a
        warning and the terminal outcome is returned again.

        :param intent: Player intent for this tick.
        :type intent: BreakoutIntent

        :param dt: Elapsed time since the previous tick (sec).
        :type dt: float

        :return: Outcome after this tick.
        :rtype: Outcome
        """
        if self.finished:
            logger.warning(
                f"tick() on a finished match ({self.world.outcome}), ignoring"
            )
            return self.world.outcome

        if self.config.max_dt is not None:
            dt = min(dt, self.config.max_dt)

        self.frame_index += 1
        ctx = BreakoutTickContext(
            input_frame=InputFrame(frame_index=self.frame_index, dt=dt),
            dt=dt,
            world=self.world,
            commands=self.commands,
            intent=intent,
        )
        self.systems.step(ctx)
        return self.world.outcome

    def reset(self):
        """Start over: new layout, zero score, full lives."""
        self.world = build_world(self.config)
        logger.info("Match reset")

    def reset_round(self):
        """Respawn paddle and ball after a lost life; bricks and lives stay."""
        respawn_round(self.world, self.config)
        logger.debug("Round reset")

    def snapshot(self) -> MatchSnapshot:
        """Current state for drawing."""
        world = self.world
        ball = world.ball
        return MatchSnapshot(
            paddle=world.paddle.rect.to_tuple(),
            paddle_color=world.paddle.color,
            ball_center=(ball.pos.x, ball.pos.y),
            ball_radius=ball.radius,
            ball_color=ball.color,
            ball_active=ball.active,
            bricks=tuple(
                BrickView(rect=brick.rect.to_tuple(), color=brick.color)
                for brick in world.bricks.alive()
            ),
            score=world.score,
            lives=world.paddle.lives,
            outcome=world.outcome,
        )
