"""
Geometry primitives: float rectangles, vectors and circle/rect overlap.

Screen space throughout: origin at the top-left, y grows downward.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygame.math import Vector2


def normalized(vec: Vector2) -> Vector2:
    """
    Unit-length copy of ``vec``.

    pygame raises on normalizing a zero vector; here the zero vector
    normalizes to itself.

    :param vec: Vector to normalize.
    :type vec: Vector2

    :return: A new unit vector, or a zero vector.
    :rtype: Vector2
    """
    if vec.length_squared() == 0:
        return Vector2(0.0, 0.0)
    return vec.normalize()


@dataclass
class Rect:
    """
    Axis-aligned rectangle with float coordinates (``pygame.Rect`` is
    integer-only).

    :ivar x (float): Left edge.
    :ivar y (float): Top edge.
    :ivar width (float): Width.
    :ivar height (float): Height.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        """Left edge."""
        return self.x

    @property
    def right(self) -> float:
        """Right edge."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Top edge."""
        return self.y

    @property
    def bottom(self) -> float:
        """Bottom edge."""
        return self.y + self.height

    @property
    def center_x(self) -> float:
        """Horizontal center."""
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        """Vertical center."""
        return self.y + self.height / 2

    def copy(self) -> Rect:
        """Independent copy of this rectangle."""
        return Rect(self.x, self.y, self.width, self.height)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """(x, y, width, height)"""
        return self.x, self.y, self.width, self.height


def circle_intersects_rect(center: Vector2, radius: float, rect: Rect) -> bool:
    """
    Whether a circle overlaps a rectangle.

    Touching edges do not count, so a ball resting exactly on a surface is
    not a collision.

    :param center: Circle center.
    :type center: Vector2

    :param radius: Circle radius.
    :type radius: float

    :param rect: Rectangle to test against.
    :type rect: Rect

    :return: True if the shapes overlap.
    :rtype: bool
    """
    closest_x = max(rect.left, min(center.x, rect.right))
    closest_y = max(rect.top, min(center.y, rect.bottom))
    dx = center.x - closest_x
    dy = center.y - closest_y
    return dx * dx + dy * dy < radius * radius
