"""
Bricks and the brick field for Brick Bounce.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from brick_bounce.constants import Color, tier_color
from brick_bounce.spaces.geometry import Rect, Vector2, circle_intersects_rect

if TYPE_CHECKING:
    from brick_bounce.difficulty import MatchConfig


@dataclass
class Brick:
    """
    One destructible brick.

    Only ``alive`` changes after creation.

    :ivar pos (Vector2): Top-left corner.
    :ivar width (float): Width.
    :ivar height (float): Height.
    :ivar score (int): Reward for destroying it.
    :ivar row (int): Grid row (reward tier).
    :ivar col (int): Grid column.
    :ivar color (Color): Draw color.
    :ivar alive (bool): False once hit.
    """

    pos: Vector2
    width: float
    height: float
    score: int
    row: int = 0
    col: int = 0
    color: Color = (255, 255, 255)
    alive: bool = True

    @property
    def rect(self) -> Rect:
        """Collider for the brick."""
        return Rect(self.pos.x, self.pos.y, self.width, self.height)

    def kill(self):
        """Remove the brick from play; it stays in the grid."""
        self.alive = False


@dataclass
class BrickField:
    """
    Fixed grid of bricks in row-major order.

    Hit bricks stay in the list and are marked dead, so indices and the
    iteration order used by :meth:`find_first_colliding` never shift.

    :ivar bricks (list[Brick]): All bricks, alive or not.
    """

    bricks: list[Brick] = field(default_factory=list)

    # Justification: the layout really has this many knobs
    # pylint: disable=too-many-arguments
    @classmethod
    def build(
        cls,
        rows: int,
        cols: int,
        padding: float,
        screen_width: float,
        *,
        brick_width: float,
        brick_height: float,
        base_score: int,
        score_step: int,
    ) -> BrickField:
        """
        Lay out a ``rows x cols`` grid centered horizontally.

        Brick ``(r, c)`` sits at
        ``(start_x + c * (padding + width), padding + r * (padding + height))``
        and is worth ``base_score + r * score_step``.

        :param rows: Number of rows.
        :type rows: int

        :param cols: Number of columns.
        :type cols: int

        :param padding: Gap between bricks and above the first row.
        :type padding: float

        :param screen_width: Playfield width used for centering.
        :type screen_width: float

        :return: A field with every brick alive.
        :rtype: BrickField
        """
        start_x = (screen_width - cols * (brick_width + padding)) / 2
        bricks = []
        for row in range(rows):
            color = tier_color(row, rows)
            for col in range(cols):
                bricks.append(
                    Brick(
                        pos=Vector2(
                            start_x + col * (padding + brick_width),
                            padding + row * (padding + brick_height),
                        ),
                        width=brick_width,
                        height=brick_height,
                        score=base_score + row * score_step,
                        row=row,
                        col=col,
                        color=color,
                    )
                )
        return cls(bricks=bricks)

    # pylint: enable=too-many-arguments

    @classmethod
    def from_config(cls, config: MatchConfig) -> BrickField:
        """Build the grid described by a match config."""
        return cls.build(
            config.brick_rows,
            config.brick_cols,
            config.brick_padding,
            config.screen_width,
            brick_width=config.brick_width,
            brick_height=config.brick_height,
            base_score=config.brick_base_score,
            score_step=config.brick_score_step,
        )

    def __len__(self) -> int:
        return len(self.bricks)

    def alive(self) -> Iterator[Brick]:
        """Alive bricks, in grid order."""
        return (brick for brick in self.bricks if brick.alive)

    def alive_count(self) -> int:
        return sum(1 for _ in self.alive())

    def find_first_colliding(
        self, center: Vector2, radius: float
    ) -> Brick | None:
        """
        First alive brick, in grid order, that overlaps the circle.

        This is the first hit in iteration order, not the nearest brick.

        :param center: Circle center.
        :type center: Vector2

        :param radius: Circle radius.
        :type radius: float

        :return: The colliding brick, or None.
        :rtype: Brick | None
        """
        for brick in self.alive():
            if circle_intersects_rect(center, radius, brick.rect):
                return brick
        return None
