"""
Breakout scene: keyboard input in, pygame drawing out.

No game rules live here; the scene feeds intents to a :class:`Match` and
draws its snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Collection, Sequence

import pygame
from mini_arcade_core.utils import logger

from brick_bounce.constants import BACKGROUND, GRAY, WHITE
from brick_bounce.match import BreakoutIntent, Match, MatchSnapshot, Outcome

LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
SERVE_KEY = pygame.K_SPACE
PAUSE_KEYS = (pygame.K_p, pygame.K_ESCAPE)

BANNERS: dict[Outcome, str] = {
    "WON": "YOU WIN!",
    "LOST": "SKILL ISSUE!",
}
GOD_MODE_BANNER = "GOD MODE!"

LIFE_RADIUS = 8


def read_intent(
    keys_down: Sequence[bool], keys_pressed: Collection[int]
) -> BreakoutIntent:
    """
    Build the tick intent from keyboard state.

    :param keys_down: Held keys, indexed by key code
        (``pygame.key.get_pressed()``).
    :type keys_down: Sequence[bool]

    :param keys_pressed: Keys that went down this frame.
    :type keys_pressed: Collection[int]

    :return: Intent for the match.
    :rtype: BreakoutIntent
    """
    return BreakoutIntent(
        move_left=any(keys_down[key] for key in LEFT_KEYS),
        move_right=any(keys_down[key] for key in RIGHT_KEYS),
        serve=SERVE_KEY in keys_pressed,
    )


def outcome_banner(
    outcome: Outcome, lives: int, starting_lives: int
) -> str | None:
    """
    Text shown over a finished match, or None while playing.

    Clearing the field without losing a life earns ``"GOD MODE!"``.
    """
    if outcome == "WON" and lives == starting_lives:
        return GOD_MODE_BANNER
    return BANNERS.get(outcome)


def draw_bricks(surface: pygame.Surface, snapshot: MatchSnapshot):
    for brick in snapshot.bricks:
        pygame.draw.rect(surface, brick.color, pygame.Rect(brick.rect))


def draw_paddle(surface: pygame.Surface, snapshot: MatchSnapshot):
    pygame.draw.rect(
        surface, snapshot.paddle_color, pygame.Rect(snapshot.paddle)
    )


def draw_ball(surface: pygame.Surface, snapshot: MatchSnapshot):
    x, y = snapshot.ball_center
    pygame.draw.circle(
        surface,
        snapshot.ball_color,
        (int(x), int(y)),
        int(snapshot.ball_radius),
    )


def draw_lives(surface: pygame.Surface, snapshot: MatchSnapshot):
    start_x = 10 + LIFE_RADIUS
    y = 10 + LIFE_RADIUS
    for i in range(snapshot.lives):
        pygame.draw.circle(
            surface,
            snapshot.ball_color,
            (start_x + i * (2 * LIFE_RADIUS + 5), y),
            LIFE_RADIUS,
        )


def draw_centered(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: tuple[int, int, int],
    y_offset: int = 0,
):
    rendered = font.render(text, True, color)
    w, h = surface.get_size()
    rect = rendered.get_rect(center=(w // 2, h // 2 + y_offset))
    surface.blit(rendered, rect)


@dataclass
class BreakoutScene:
    """
    Playable Breakout scene.

    :ivar match (Match): The match being played.
    :ivar paused (bool): Simulation frozen.
    :ivar keys_pressed (set[int]): Keys that went down this frame.
    """

    match: Match
    paused: bool = False
    keys_pressed: set[int] = field(default_factory=set)

    def handle_event(self, event: pygame.event.Event):
        """Collect one-shot key presses; pause toggles right away."""
        if event.type != pygame.KEYDOWN:
            return

        self.keys_pressed.add(event.key)
        if event.key in PAUSE_KEYS and not self.match.finished:
            self.paused = not self.paused
            logger.info("Game paused" if self.paused else "Resuming game")

    def update(self, keys_down: Sequence[bool], dt: float):
        """
        Advance the match, or restart it when a finished match gets SERVE.
        """
        pressed, self.keys_pressed = self.keys_pressed, set()

        if self.match.finished:
            if SERVE_KEY in pressed:
                self.match.reset()
            return

        if self.paused:
            return

        self.match.tick(read_intent(keys_down, pressed), dt)

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        big_font: pygame.font.Font,
    ):
        """Render the current frame."""
        surface.fill(BACKGROUND)
        snapshot = self.match.snapshot()

        banner = outcome_banner(
            snapshot.outcome, snapshot.lives, self.match.config.lives
        )
        if banner is not None:
            draw_centered(surface, big_font, banner, WHITE)
            draw_centered(
                surface, font, f"Score: {snapshot.score}", GRAY, y_offset=48
            )
            draw_centered(
                surface, font, "Press SPACE to play again", GRAY, y_offset=84
            )
            return

        draw_centered(surface, font, f"Score: {snapshot.score}", GRAY)
        draw_bricks(surface, snapshot)
        draw_lives(surface, snapshot)
        draw_paddle(surface, snapshot)
        draw_ball(surface, snapshot)

        if self.paused:
            draw_centered(surface, big_font, "PAUSED", WHITE, y_offset=-80)
