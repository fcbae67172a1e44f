"""The snake: a list of grid cells led by its head."""

from __future__ import annotations

from enum import Enum

Point = tuple[int, int]

START: Point = (5, 5)


class Direction(Enum):
    """A heading on the grid, valued by its (dx, dy) step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class Snake:
    """A snake that starts as a single cell heading right."""

    def __init__(self) -> None:
        self.body: list[Point] = [START]
        self.direction = Direction.RIGHT

    @property
    def head(self) -> Point:
        return self.body[0]

    def move(self) -> None:
        """Advance one cell in the current direction, dropping the tail."""
        x, y = self.head
        dx, dy = self.direction.value
        self.body.insert(0, (x + dx, y + dy))
        self.body.pop()

    def grow(self) -> None:
        """Lengthen by one cell; the new tail unfolds on the next moves."""
        self.body.append(self.body[-1])

    def check_collision(self) -> bool:
        """Return True if the head overlaps any other part of the body."""
        return self.head in self.body[1:]

    def set_direction(self, direction: Direction) -> None:
        """Turn, unless the turn would reverse straight back."""
        if direction is not self.direction.opposite:
            self.direction = direction