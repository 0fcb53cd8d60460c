"""Things on the play field: apple, wall blocks and snake sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

CELL_SIZE = 20.0

Vector = tuple[float, float]
RGB = tuple[int, int, int]

RED: RGB = (255, 0, 0)
GREEN: RGB = (0, 255, 0)
BLUE: RGB = (0, 0, 255)
YELLOW: RGB = (255, 255, 0)
WHITE: RGB = (255, 255, 255)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap; touching edges do not count."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.x + self.width, other.x + other.width)
        bottom = min(self.y + self.height, other.y + other.height)
        return left < right and top < bottom


class SnakeColor(IntEnum):
    """Colours a snake can be bought in, by their shop index."""

    GREEN = 0
    RED = 1
    BLUE = 2
    YELLOW = 3

    @classmethod
    def from_index(cls, index: int) -> SnakeColor:
        """Return the colour for ``index``, green for anything unknown."""
        try:
            return cls(index)
        except ValueError:
            return cls.GREEN

    @property
    def rgb(self) -> RGB:
        return _SNAKE_RGB[self]


_SNAKE_RGB = {
    SnakeColor.GREEN: GREEN,
    SnakeColor.RED: RED,
    SnakeColor.BLUE: BLUE,
    SnakeColor.YELLOW: YELLOW,
}


@dataclass
class Apple:
    """The red square the snake eats."""

    position: Vector = (400.0, 300.0)
    color: RGB = RED

    def rect(self) -> Rect:
        return Rect(self.position[0], self.position[1], CELL_SIZE, CELL_SIZE)


@dataclass
class Wall:
    """A white block the snake must not touch."""

    position: Vector
    size: Vector = (CELL_SIZE, CELL_SIZE)
    color: RGB = WHITE

    def rect(self) -> Rect:
        return Rect(self.position[0], self.position[1], self.size[0], self.size[1])


@dataclass
class SnakeSection:
    """One square of the snake.

    ``position`` is where the section logically is; the drawn square only
    follows it when ``update`` is called.
    """

    position: Vector
    color: SnakeColor = SnakeColor.GREEN
    drawn_position: Vector = field(init=False)

    def __post_init__(self) -> None:
        self.drawn_position = self.position

    def update(self) -> None:
        """Move the drawn square to the current position."""
        self.drawn_position = self.position

    def rect(self) -> Rect:
        return Rect(self.drawn_position[0], self.drawn_position[1], CELL_SIZE, CELL_SIZE)