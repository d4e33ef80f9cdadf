"""The player's catcher and the shapes that fall towards it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

GAME_WIDTH = 60
GAME_HEIGHT = 20


class Shape(IntEnum):
    """Kinds of falling shape, each worth a fixed number of points."""

    STAR = 0
    SQUARE = 1
    CIRCLE = 2
    DIAMOND = 3
    CROSS = 4

    def points(self) -> int:
        """Score awarded for catching this shape."""
        return _POINTS[self]


_POINTS = {
    Shape.STAR: 10,
    Shape.SQUARE: 20,
    Shape.CIRCLE: 30,
    Shape.DIAMOND: 40,
    Shape.CROSS: 50,
}


@dataclass
class Player:
    """The triangle at the bottom of the field."""

    x: int = GAME_WIDTH // 2
    y: int = GAME_HEIGHT - 1

    def move(self, direction: int) -> None:
        """Step left (-1) or right (1), staying inside the border."""
        new_x = self.x + direction
        if 1 <= new_x < GAME_WIDTH - 1:
            self.x = new_x


@dataclass
class FallingObject:
    """A shape dropping down the field.

    ``speed`` is the number of frames per downward step: 1 is fastest, 3 slowest.
    """

    shape: Shape
    x: int
    y: int = 0
    speed: int = 1

    @property
    def points(self) -> int:
        return self.shape.points()