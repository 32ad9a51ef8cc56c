"""
Main application for Brick Bounce.
"""

from __future__ import annotations

from dataclasses import replace

import pygame
from mini_arcade_core.utils import logger

from brick_bounce.constants import FPS, MAX_FRAME_DT
from brick_bounce.difficulty import preset
from brick_bounce.match import Match
from brick_bounce.scenes.breakout import BreakoutScene


def run(difficulty: str = "normal"):
    """
    Main entry point for Brick Bounce.

    - Builds a match from the chosen difficulty preset.
    - Opens a window sized to the playfield.
    - Runs the frame loop until the window is closed.
    """
    config = replace(preset(difficulty), max_dt=MAX_FRAME_DT)

    pygame.init()
    try:
        surface = pygame.display.set_mode(
            (int(config.screen_width), int(config.screen_height))
        )
        pygame.display.set_caption("Brick Bounce")
        font = pygame.font.SysFont(None, 32)
        big_font = pygame.font.SysFont(None, 48)
        clock = pygame.time.Clock()

        scene = BreakoutScene(match=Match(config))
        logger.info(f"Starting Brick Bounce ({difficulty})...")

        running = True
        while running:
            dt = clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    scene.handle_event(event)

            scene.update(pygame.key.get_pressed(), dt)
            scene.draw(surface, font, big_font)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    run()
