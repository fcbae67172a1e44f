"""Food placed at random on the grid."""

from __future__ import annotations

import random
from collections.abc import Iterable

from snakegrid.snake import Point


class Food:
    """A single piece of food on a ``max_x`` by ``max_y`` grid."""

    def __init__(self, max_x: int, max_y: int, rng: random.Random | None = None) -> None:
        if max_x <= 0 or max_y <= 0:
            raise ValueError(f"grid size must be positive, got {max_x}x{max_y}")
        self.max_x = max_x
        self.max_y = max_y
        self.rng = rng if rng is not None else random.Random()
        self.position: Point = self._random_point()

    def _random_point(self) -> Point:
        return (self.rng.randrange(self.max_x), self.rng.randrange(self.max_y))

    def generate(self, body: Iterable[Point] = ()) -> Point:
        """Move the food to a random cell not covered by ``body``.

        Each rejected candidate becomes the cell the next one must differ from.
        """
        occupied = set(body)
        if not occupied:
            self.position = self._random_point()
            return self.position

        free = any(
            (x, y) not in occupied
            for x in range(self.max_x)
            for y in range(self.max_y)
        )
        if not free:
            raise ValueError("no free cell left for the food")

        while True:
            candidate = self._random_point()
            previous, self.position = self.position, candidate
            if candidate not in occupied and candidate != previous:
                return candidate