"""Shared fixtures for the Brick Bounce tests."""

from __future__ import annotations

import pytest

from brick_bounce.difficulty import MatchConfig
from brick_bounce.match import BreakoutIntent, Match
from brick_bounce.spaces.geometry import Vector2

DT = 1.0 / 60.0


@pytest.fixture
def config() -> MatchConfig:
    return MatchConfig()


@pytest.fixture
def match(config: MatchConfig) -> Match:
    return Match(config)


@pytest.fixture
def idle() -> BreakoutIntent:
    return BreakoutIntent()


def launch(match: Match, pos: tuple[float, float], vel: tuple[float, float]):
    """Put the match's ball in flight at ``pos`` moving with ``vel``."""
    ball = match.world.ball
    ball.active = True
    ball.pos = Vector2(pos)
    ball.vel = Vector2(vel)
    return ball
