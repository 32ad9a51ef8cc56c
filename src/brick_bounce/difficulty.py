"""
Match configuration and difficulty presets for Brick Bounce.
"""

from __future__ import annotations

from dataclasses import dataclass

from brick_bounce.constants import (
    BALL_RADIUS,
    BALL_SPEED,
    BRICK_BASE_SCORE,
    BRICK_COLS,
    BRICK_PADDING,
    BRICK_ROWS,
    BRICK_SCORE_STEP,
    BRICK_SIZE,
    ENGLISH_FACTOR,
    PADDLE_SIZE,
    PADDLE_SPEED,
    PLAYER_LIVES,
    WINDOW_SIZE,
)


# Justification: one flat bag of tunables is easier to preset than nesting
# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class MatchConfig:
    """
    Tunables for a single match.

    - screen_width/screen_height: playfield size (px)
    - paddle_speed: paddle speed while a move key is held (px/sec)
    - ball_speed: constant ball speed once served (px/sec)
    - english: fraction of paddle velocity added to the ball on a paddle bounce
    - max_dt: clamp for a single tick's dt, None to simulate it as given
    """

    screen_width: float = WINDOW_SIZE[0]
    screen_height: float = WINDOW_SIZE[1]

    paddle_width: float = PADDLE_SIZE[0]
    paddle_height: float = PADDLE_SIZE[1]
    paddle_speed: float = PADDLE_SPEED
    lives: int = PLAYER_LIVES

    ball_radius: float = BALL_RADIUS
    ball_speed: float = BALL_SPEED
    english: float = ENGLISH_FACTOR

    brick_rows: int = BRICK_ROWS
    brick_cols: int = BRICK_COLS
    brick_width: float = BRICK_SIZE[0]
    brick_height: float = BRICK_SIZE[1]
    brick_padding: float = BRICK_PADDING
    brick_base_score: int = BRICK_BASE_SCORE
    brick_score_step: int = BRICK_SCORE_STEP

    max_dt: float | None = None

    def __post_init__(self):
        positive = {
            "screen_width": self.screen_width,
            "screen_height": self.screen_height,
            "paddle_width": self.paddle_width,
            "paddle_height": self.paddle_height,
            "paddle_speed": self.paddle_speed,
            "lives": self.lives,
            "ball_radius": self.ball_radius,
            "ball_speed": self.ball_speed,
            "brick_rows": self.brick_rows,
            "brick_cols": self.brick_cols,
            "brick_width": self.brick_width,
            "brick_height": self.brick_height,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")

        if self.paddle_width > self.screen_width:
            raise ValueError("paddle_width must fit inside screen_width")
        if self.brick_padding < 0:
            raise ValueError("brick_padding must not be negative")
        if self.max_dt is not None and self.max_dt <= 0:
            raise ValueError("max_dt must be positive or None")

    @property
    def viewport(self) -> tuple[float, float]:
        """Playfield size as (width, height)."""
        return self.screen_width, self.screen_height


# pylint: enable=too-many-instance-attributes


DIFFICULTY_PRESETS: dict[str, MatchConfig] = {
    "easy": MatchConfig(ball_speed=PADDLE_SPEED * 1.1, lives=5),
    "normal": MatchConfig(),
    "hard": MatchConfig(
        ball_speed=PADDLE_SPEED * 1.8, lives=2, paddle_width=110.0
    ),
}


def preset(name: str) -> MatchConfig:
    """
    Look up a difficulty preset.

    :param name: Preset name, case-insensitive.
    :type name: str

    :return: The preset's match configuration.
    :rtype: MatchConfig

    :raises KeyError: If no preset has that name.
    """
    key = name.lower()
    if key not in DIFFICULTY_PRESETS:
        known = ", ".join(DIFFICULTY_PRESETS)
        raise KeyError(f"Unknown difficulty {name!r} (known: {known})")
    return DIFFICULTY_PRESETS[key]
