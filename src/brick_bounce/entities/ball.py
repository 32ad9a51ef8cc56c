"""
Ball entity for Brick Bounce: motion and collision response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mini_arcade_core.utils import logger

from brick_bounce.constants import BALL_COLOR, Color
from brick_bounce.spaces.geometry import (
    Rect,
    Vector2,
    circle_intersects_rect,
    normalized,
)

from .brick import BrickField
from .paddle import Paddle

if TYPE_CHECKING:
    from brick_bounce.difficulty import MatchConfig
    from brick_bounce.match.models import BreakoutIntent


@dataclass(frozen=True)
class BallStep:
    """
    What happened to the ball during one update.

    :ivar score_delta (int): Reward of the brick hit this tick, or 0.
    :ivar life_lost (bool): The ball went past the bottom edge.
    :ivar game_over (bool): That was the last life.
    :ivar field_cleared (bool): The last alive brick was hit.
    """

    score_delta: int = 0
    life_lost: bool = False
    game_over: bool = False
    field_cleared: bool = False


@dataclass
class Ball:
    """
    The ball. Rests on the paddle until served, then flies at a constant
    speed.

    :ivar pos (Vector2): Center of the ball.
    :ivar vel (Vector2): Velocity (px/sec).
    :ivar radius (float): Radius.
    :ivar speed (float): Speed once served; every bounce keeps it.
    :ivar active (bool): False while resting on the paddle.
    :ivar english (float): Fraction of paddle velocity added on a paddle hit.
    :ivar color (Color): Draw color.
    """

    pos: Vector2
    radius: float
    speed: float
    vel: Vector2 = field(default_factory=Vector2)
    active: bool = False
    english: float = 0.0
    color: Color = BALL_COLOR

    @classmethod
    def spawn(cls, paddle: Paddle, config: MatchConfig) -> Ball:
        """Unserved ball sitting on top of the paddle's center."""
        ball = cls(
            pos=Vector2(0.0, 0.0),
            radius=config.ball_radius,
            speed=config.ball_speed,
            english=config.english,
        )
        ball.rest_on(paddle)
        return ball

    def rest_on(self, paddle: Paddle):
        """Glue the ball above the paddle center, riding its velocity."""
        self.pos.x = paddle.rect.center_x
        self.pos.y = paddle.rect.top - self.radius
        self.vel.x = paddle.vel_x
        self.vel.y = 0.0

    # Justification: one call resolves the whole tick for the ball
    # pylint: disable=too-many-arguments
    def update(
        self,
        intent: BreakoutIntent,
        paddle: Paddle,
        bricks: BrickField,
        dt: float,
        viewport: tuple[float, float],
    ) -> BallStep:
        """
        Serve, collide, and move the ball for one tick.

        Order: serve, paddle, walls, bricks, integrate. A ball that falls
        past the bottom costs the paddle a life and returns right away;
        nothing is reset here, the caller decides what happens next.

        :param intent: Player intent for this tick.
        :type intent: BreakoutIntent

        :param paddle: The paddle, already moved this tick.
        :type paddle: Paddle

        :param bricks: Brick field; a hit brick is killed.
        :type bricks: BrickField

        :param dt: Elapsed time (sec).
        :type dt: float

        :param viewport: Playfield size (width, height).
        :type viewport: tuple[float, float]

        :return: Score and life events of this tick.
        :rtype: BallStep
        """
        if not self.active:
            self.rest_on(paddle)
            if not intent.serve:
                return BallStep()
            self.active = True
            self.vel.y = -self.speed
            logger.info(f"Ball served at x={self.pos.x:.1f}")

        self._collide_paddle(paddle)

        if self._collide_walls(viewport):
            paddle.lives = max(0, paddle.lives - 1)
            return BallStep(life_lost=True, game_over=paddle.lives == 0)

        score_delta = 0
        field_cleared = False
        brick = bricks.find_first_colliding(self.pos, self.radius)
        if brick is not None:
            self._bounce_off(brick.rect)
            brick.kill()
            score_delta = brick.score
            field_cleared = bricks.alive_count() == 0

        # bounces only change direction; speed is reapplied every tick
        self.vel = normalized(self.vel) * self.speed
        self.pos += self.vel * dt

        return BallStep(score_delta=score_delta, field_cleared=field_cleared)

    # pylint: enable=too-many-arguments

    def _collide_paddle(self, paddle: Paddle):
        if not circle_intersects_rect(self.pos, self.radius, paddle.collider):
            return

        self.pos.y = paddle.rect.top - self.radius
        self.vel.y = -abs(self.vel.y)
        self.vel.x += self.english * paddle.vel_x

    def _collide_walls(self, viewport: tuple[float, float]) -> bool:
        """Bounce off side and top walls; True if the ball left the bottom."""
        width, height = viewport
        r = self.radius

        if (self.vel.x < 0 and self.pos.x - r < 0) or (
            self.vel.x > 0 and self.pos.x + r > width
        ):
            self.vel.x *= -1

        if self.vel.y < 0 and self.pos.y - r < 0:
            self.vel.y *= -1
        elif self.vel.y > 0 and self.pos.y + r > height:
            return True

        return False

    def _bounce_off(self, rect: Rect):
        """
        Push the ball out of ``rect`` along the axis of least penetration
        and reflect that velocity component. Ties go to the vertical axis.
        """
        x, y = self.pos.x, self.pos.y
        r = self.radius

        if x - rect.left < rect.right - x:
            dist_x, flush_x = x - rect.left, rect.left - r
        else:
            dist_x, flush_x = rect.right - x, rect.right + r

        if y - rect.top < rect.bottom - y:
            dist_y, flush_y = y - rect.top, rect.top - r
        else:
            dist_y, flush_y = rect.bottom - y, rect.bottom + r

        if dist_x < dist_y:
            self.pos.x = flush_x
            self.vel.x *= -1
        else:
            self.pos.y = flush_y
            self.vel.y *= -1
