"""
Game-wide constants for Brick Bounce.
"""

from __future__ import annotations

Color = tuple[int, int, int]

WINDOW_SIZE = (900, 800)
FPS = 60
# Frames slower than this are simulated as if this much time passed.
MAX_FRAME_DT = 0.05

PADDLE_SIZE = (150.0, 10.0)
PADDLE_SPEED = 450.0
PLAYER_LIVES = 3

BALL_RADIUS = 20.0
BALL_SPEED = PADDLE_SPEED * 1.4
# fraction of the paddle velocity added to the ball on a paddle bounce
ENGLISH_FACTOR = 0.3

BRICK_ROWS = 6
BRICK_COLS = 8
BRICK_SIZE = (WINDOW_SIZE[0] / 12.0, PADDLE_SIZE[1] * 2.5)
BRICK_PADDING = 20.0
BRICK_BASE_SCORE = 10
BRICK_SCORE_STEP = 10

# Colors
BACKGROUND: Color = (24, 24, 24)
WHITE: Color = (245, 245, 245)
GRAY: Color = (130, 130, 130)
PADDLE_COLOR: Color = (255, 161, 0)
BALL_COLOR: Color = (230, 41, 55)
BRICK_BASE_COLOR: Color = (0, 121, 241)


def brighten(color: Color, factor: float) -> Color:
    """
    Move a color towards white (factor > 0) or black (factor < 0).

    :param color: Base RGB color.
    :type color: Color

    :param factor: Amount in [-1, 1].
    :type factor: float

    :return: Adjusted RGB color.
    :rtype: Color
    """
    factor = max(-1.0, min(1.0, factor))
    if factor < 0:
        return tuple(  # type: ignore[return-value]
            int(c * (1.0 + factor)) for c in color
        )
    return tuple(  # type: ignore[return-value]
        int(c + (255 - c) * factor) for c in color
    )


def tier_color(row: int, rows: int) -> Color:
    """Brick color for a grid row; lower rows are lighter."""
    return brighten(BRICK_BASE_COLOR, row / rows if rows else 0.0)
