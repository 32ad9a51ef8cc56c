"""Tests for the geometry primitives."""

from __future__ import annotations

import pytest

from brick_bounce.spaces.geometry import (
    Rect,
    Vector2,
    circle_intersects_rect,
    normalized,
)


class TestNormalized:
    """Normalizing vectors, including the zero vector."""

    def test_zero_vector_is_a_no_op(self):
        """The zero vector normalizes to zero instead of raising."""
        result = normalized(Vector2(0.0, 0.0))
        assert result.x == 0.0
        assert result.y == 0.0

    def test_unit_length(self):
        """Non-zero vectors come back with length 1."""
        result = normalized(Vector2(3.0, -4.0))
        assert result.length() == pytest.approx(1.0)
        assert result.x == pytest.approx(0.6)
        assert result.y == pytest.approx(-0.8)

    def test_input_not_mutated(self):
        vec = Vector2(10.0, 0.0)
        normalized(vec)
        assert vec.x == 10.0


class TestRect:
    """Float rectangle helpers."""

    def test_edges_and_center(self):
        rect = Rect(100.0, 50.0, 75.0, 25.0)
        assert rect.left == 100.0
        assert rect.right == 175.0
        assert rect.top == 50.0
        assert rect.bottom == 75.0
        assert rect.center_x == 137.5
        assert rect.center_y == 62.5

    def test_copy_is_independent(self):
        rect = Rect(1.0, 2.0, 3.0, 4.0)
        other = rect.copy()
        other.x = 99.0
        assert rect.x == 1.0
        assert other.to_tuple() == (99.0, 2.0, 3.0, 4.0)


class TestCircleIntersectsRect:
    """Circle vs rectangle overlap."""

    rect = Rect(100.0, 100.0, 75.0, 25.0)

    def test_center_inside(self):
        assert circle_intersects_rect(Vector2(120.0, 110.0), 5.0, self.rect)

    def test_overlapping_edge(self):
        assert circle_intersects_rect(Vector2(90.0, 110.0), 15.0, self.rect)

    def test_far_away(self):
        assert not circle_intersects_rect(Vector2(0.0, 0.0), 10.0, self.rect)

    def test_touching_edge_is_not_a_hit(self):
        """A circle resting exactly on the top edge does not collide."""
        assert not circle_intersects_rect(
            Vector2(120.0, 80.0), 20.0, self.rect
        )

    def test_corner_uses_true_distance(self):
        """Bounding boxes overlap near a corner but the circle does not."""
        assert not circle_intersects_rect(Vector2(90.0, 90.0), 12.0, self.rect)
        assert circle_intersects_rect(Vector2(95.0, 95.0), 12.0, self.rect)
