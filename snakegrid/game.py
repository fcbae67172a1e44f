"""Game state and rules, independent of any display."""

from __future__ import annotations

import logging
import random
import re
from enum import Enum
from pathlib import Path

from snakegrid.food import Food
from snakegrid.snake import Direction, Point, Snake

log = logging.getLogger(__name__)

GRID_SIZE = 20
GRID_WIDTH = 30
GRID_HEIGHT = 30
DEFAULT_SCORE_FILE = "save.txt"

_DIRECTION_KEYS = {
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}


class Speed(Enum):
    """Game speeds, valued by the tick interval in milliseconds."""

    NORMAL = 150
    ONE_AND_HALF = 100
    DOUBLE = 75


class ScoreStore:
    """Keeps the best score in a small text file."""

    def __init__(self, path: str | Path = DEFAULT_SCORE_FILE) -> None:
        self.path = Path(path)

    def load(self) -> int:
        """Return the saved score, or 0 when there is none to read."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            log.warning("cannot read score file %s: %s", self.path, exc)
            return 0
        match = re.match(r"\s*([+-]?\d+)", text)
        return int(match.group(1)) if match else 0

    def save(self, score: int) -> None:
        try:
            self.path.write_text(str(score), encoding="utf-8")
        except OSError as exc:
            log.warning("cannot write score file %s: %s", self.path, exc)


class Game:
    """One game of snake: the snake, the food, the score and the timer state."""

    def __init__(self, store: ScoreStore | None = None, rng: random.Random | None = None) -> None:
        self.store = store if store is not None else ScoreStore()
        self.rng = rng if rng is not None else random.Random()
        self.width = GRID_WIDTH
        self.height = GRID_HEIGHT
        self.snake = Snake()
        self.food = Food(self.width, self.height, self.rng)
        self.speed = Speed.NORMAL
        self.interval = self.speed.value
        self.running = False
        self.starts = 0
        self.game_over = True
        self.paused = False
        self.direction_changed = False
        self.score = 0
        self.high_score = self.store.load()
        self.start_enabled = True
        self.pause_enabled = False

    def _start_timer(self, interval: int) -> None:
        self.interval = interval
        self.running = True

    def _stop_timer(self) -> None:
        self.running = False

    def _reset(self) -> None:
        self.snake = Snake()
        self.food.generate(self.snake.body)
        self.game_over = False
        self.paused = False
        self.score = 0

    def _out_of_bounds(self, point: Point) -> bool:
        x, y = point
        return x < 0 or y < 0 or x >= self.width or y >= self.height

    def check_collision(self) -> bool:
        """End the game if the head left the grid or ran into the body."""
        hit = self._out_of_bounds(self.snake.head) or self.snake.check_collision()
        if hit:
            self.game_over = True
            self._stop_timer()
        return hit

    def tick(self) -> None:
        """Advance the game by one step."""
        self.snake.move()
        self.direction_changed = False

        if self.check_collision():
            self.start_enabled = True
            self.pause_enabled = False
            if self.score > self.high_score:
                self.high_score = self.score
                self.store.save(self.high_score)
            self.score = 0
            return

        if self.snake.head == self.food.position:
            self.score += 1
            self.snake.grow()
            self.food.generate(self.snake.body)

        self.start_enabled = False

    def handle_key(self, key: str) -> None:
        """React to a key name such as "r", "space", "up" or "w"."""
        key = key.lower()
        if self.game_over and key == "r":
            self._reset()
            self.pause_enabled = False
            self._start_timer(self.speed.value)
            return

        if not self.game_over and key == "space":
            self.toggle_pause()
            return

        if self.direction_changed:
            return

        direction = _DIRECTION_KEYS.get(key)
        if direction is not None:
            self.snake.set_direction(direction)
            self.direction_changed = True

    def start(self) -> None:
        """Begin a new game if none is in progress."""
        if not self.game_over:
            return
        self._reset()
        self.pause_enabled = True
        self._start_timer(self.speed.value)
        self.starts += 1

    def toggle_pause(self) -> None:
        if self.paused:
            self._start_timer(self.speed.value)
            self.paused = False
        else:
            self._stop_timer()
            self.paused = True

    def restart(self) -> None:
        """Start over at once, at the normal tick interval."""
        self._reset()
        self._start_timer(Speed.NORMAL.value)
        self.starts += 1

    def set_speed(self, speed: Speed) -> None:
        self.speed = speed
        self._stop_timer()
        if not self.game_over:
            self._start_timer(speed.value)