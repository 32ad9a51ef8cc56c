"""Tests for match configuration and difficulty presets."""

from __future__ import annotations

from dataclasses import replace

import pytest

from brick_bounce.difficulty import DIFFICULTY_PRESETS, MatchConfig, preset


def test_defaults_match_classic_layout():
    config = MatchConfig()
    assert config.viewport == (900, 800)
    assert config.ball_speed == pytest.approx(630.0)
    assert config.lives == 3
    assert (config.brick_rows, config.brick_cols) == (6, 8)
    assert (config.brick_width, config.brick_height) == (75.0, 25.0)
    assert config.max_dt is None


def test_preset_lookup_is_case_insensitive():
    assert preset("HARD") is DIFFICULTY_PRESETS["hard"]
    assert preset("normal") == MatchConfig()


def test_presets_order_by_difficulty():
    easy, normal, hard = (preset(n) for n in ("easy", "normal", "hard"))
    assert easy.ball_speed < normal.ball_speed < hard.ball_speed
    assert easy.lives > normal.lives > hard.lives


def test_unknown_preset():
    with pytest.raises(KeyError, match="Unknown difficulty"):
        preset("nightmare")


@pytest.mark.parametrize(
    "overrides",
    [
        {"lives": 0},
        {"ball_speed": -1.0},
        {"brick_rows": 0},
        {"paddle_width": 1000.0},
        {"brick_padding": -5.0},
        {"max_dt": 0.0},
    ],
)
def test_invalid_config_rejected(overrides):
    with pytest.raises(ValueError):
        MatchConfig(**overrides)


def test_replace_revalidates():
    with pytest.raises(ValueError, match="lives"):
        replace(MatchConfig(), lives=-1)
