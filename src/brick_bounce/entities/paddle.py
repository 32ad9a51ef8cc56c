"""
Paddle entity for Brick Bounce.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from brick_bounce.constants import PADDLE_COLOR, Color
from brick_bounce.spaces.geometry import Rect

if TYPE_CHECKING:
    from brick_bounce.difficulty import MatchConfig
    from brick_bounce.match.models import BreakoutIntent


@dataclass
class Paddle:
    """
    Player paddle, moving horizontally along the bottom of the screen.

    :ivar rect (Rect): Paddle rectangle.
    :ivar speed (float): Speed while a move key is held (px/sec).
    :ivar vel_x (float): Current horizontal velocity.
    :ivar lives (int): Remaining attempts.
    :ivar color (Color): Draw color.
    """

    rect: Rect
    speed: float
    vel_x: float = 0.0
    lives: int = 0
    color: Color = PADDLE_COLOR

    @classmethod
    def spawn(cls, config: MatchConfig) -> Paddle:
        """
        Paddle at its starting spot: centered, two paddle heights above the
        bottom edge, with the configured number of lives.
        """
        x = (config.screen_width - config.paddle_width) / 2
        y = config.screen_height - config.paddle_height * 2
        return cls(
            rect=Rect(x, y, config.paddle_width, config.paddle_height),
            speed=config.paddle_speed,
            lives=config.lives,
        )

    @property
    def collider(self) -> Rect:
        """Collider for the paddle."""
        return self.rect

    def update(self, intent: BreakoutIntent, dt: float, screen_width: float):
        """
        Set velocity from the held keys, move, and clamp to the screen.

        Left wins when both directions are held.

        :param intent: Player intent for this tick.
        :type intent: BreakoutIntent

        :param dt: Elapsed time (sec).
        :type dt: float

        :param screen_width: Playfield width.
        :type screen_width: float
        """
        if intent.move_left:
            self.vel_x = -self.speed
        elif intent.move_right:
            self.vel_x = self.speed
        else:
            self.vel_x = 0.0

        self.rect.x += self.vel_x * dt
        self.rect.x = max(
            0.0, min(screen_width - self.rect.width, self.rect.x)
        )
