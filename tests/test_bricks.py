"""Tests for the brick field layout and lookups."""

from __future__ import annotations

import pytest

from brick_bounce.constants import BRICK_BASE_COLOR, brighten, tier_color
from brick_bounce.entities.brick import Brick, BrickField
from brick_bounce.spaces.geometry import Vector2


@pytest.fixture
def field(config) -> BrickField:
    return BrickField.from_config(config)


class TestLayout:
    """Grid built from the default configuration."""

    def test_brick_count(self, field, config):
        assert len(field) == config.brick_rows * config.brick_cols
        assert field.alive_count() == 48

    def test_first_and_last_positions(self, field):
        first = field.bricks[0]
        assert (first.pos.x, first.pos.y) == (70.0, 20.0)

        second_row = field.bricks[8]
        assert (second_row.row, second_row.col) == (1, 0)
        assert (second_row.pos.x, second_row.pos.y) == (70.0, 65.0)

        last = field.bricks[-1]
        assert (last.row, last.col) == (5, 7)
        assert (last.pos.x, last.pos.y) == (735.0, 245.0)

    def test_reward_tier_by_row(self, field):
        for brick in field.bricks:
            assert brick.score == 10 + 10 * brick.row

    def test_row_colors(self, field):
        assert field.bricks[0].color == BRICK_BASE_COLOR
        assert field.bricks[47].color == tier_color(5, 6)
        assert sum(field.bricks[47].color) > sum(field.bricks[0].color)

    def test_build_is_deterministic(self, config):
        a = BrickField.from_config(config)
        b = BrickField.from_config(config)
        assert a == b


class TestLookups:
    """Alive counting and first-hit search."""

    def test_killed_bricks_not_counted(self, field):
        field.bricks[0].kill()
        field.bricks[5].kill()
        assert field.alive_count() == 46
        assert field.bricks[0] not in list(field.alive())
        assert len(field) == 48

    def test_first_colliding_in_grid_order(self):
        """Two overlapping bricks: the earlier one wins, not the nearer."""
        field = BrickField(
            bricks=[
                Brick(Vector2(0.0, 0.0), 50.0, 20.0, score=10),
                Brick(Vector2(40.0, 0.0), 50.0, 20.0, score=20),
            ]
        )
        hit = field.find_first_colliding(Vector2(60.0, 10.0), 15.0)
        assert hit is field.bricks[0]

    def test_dead_bricks_ignored(self):
        field = BrickField(
            bricks=[
                Brick(Vector2(0.0, 0.0), 50.0, 20.0, score=10),
                Brick(Vector2(40.0, 0.0), 50.0, 20.0, score=20),
            ]
        )
        field.bricks[0].kill()
        hit = field.find_first_colliding(Vector2(60.0, 10.0), 15.0)
        assert hit is field.bricks[1]

    def test_no_collision(self, field):
        assert field.find_first_colliding(Vector2(450.0, 600.0), 20.0) is None


def test_brighten_darkens_and_clamps():
    assert brighten((100, 100, 100), -0.5) == (50, 50, 50)
    assert brighten((100, 0, 255), 2.0) == (255, 255, 255)
