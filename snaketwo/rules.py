"""Rules of play: movement, growth, scoring, levels and collisions."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum, IntEnum
from pathlib import Path

from snaketwo.entities import CELL_SIZE, Apple, Rect, SnakeColor, SnakeSection, Wall, Vector

RESOLUTION: Vector = (800.0, 600.0)
LEVEL_ROWS = 30
LEVEL_COLUMNS = 40
WALL_CHAR = "x"

START_SPEED = 5
APPLES_PER_LEVEL = 10
SECTIONS_PER_APPLE = 4
START_POSITIONS: tuple[Vector, ...] = ((100.0, 100.0), (80.0, 100.0), (60.0, 100.0))


class Direction(IntEnum):
    """Where the snake's head is heading."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def opposite(self) -> Direction:
        return Direction((self + 2) % 4)

    @property
    def offset(self) -> Vector:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (0.0, -CELL_SIZE),
    Direction.RIGHT: (CELL_SIZE, 0.0),
    Direction.DOWN: (0.0, CELL_SIZE),
    Direction.LEFT: (-CELL_SIZE, 0.0),
}


class GameState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAMEOVER = "gameover"


def parse_level(lines: Iterable[str]) -> list[Wall]:
    """Turn a level layout into wall blocks, one per 'x' in the 40 by 30 grid."""
    rows = iter(lines)
    walls: list[Wall] = []
    for y in range(LEVEL_ROWS):
        line = next(rows, "").rstrip("\n")
        for x, char in enumerate(line[:LEVEL_COLUMNS]):
            if char == WALL_CHAR:
                walls.append(Wall((x * CELL_SIZE, y * CELL_SIZE)))
    return walls


def discover_levels(directory: Path | str) -> list[Path]:
    """List the level files named in ``levels.txt`` that actually exist, in order."""
    root = Path(directory)
    try:
        manifest = (root / "levels.txt").read_text()
    except OSError:
        return []
    found: list[Path] = []
    for name in manifest.split("\n"):
        name = name.rstrip("\r")
        if not name:
            continue
        candidate = root / name
        if candidate.is_file():
            found.append(candidate)
    return found


def _load_level(path: Path) -> list[Wall]:
    try:
        text = path.read_text()
    except OSError:
        return []
    return parse_level(text.split("\n"))


class SnakeGame:
    """The state of one game of snake, independent of any display."""

    def __init__(
        self,
        levels: Sequence[Path | str],
        color: SnakeColor = SnakeColor.GREEN,
        rng: random.Random | None = None,
    ) -> None:
        self.levels = [Path(level) for level in levels]
        self.color = color
        self.rng = rng if rng is not None else random.Random()
        self.snake: list[SnakeSection] = []
        self.walls: list[Wall] = []
        self.apple = Apple()
        self.direction_queue: deque[Direction] = deque()
        self.start()

    @property
    def max_levels(self) -> int:
        return len(self.levels)

    def start(self) -> None:
        """Reset everything and begin again from level 1."""
        self.score = 0
        self.speed = START_SPEED
        self.direction = Direction.RIGHT
        self.time_since_last_move = 0.0
        self.sections_to_add = 0
        self.direction_queue.clear()
        self.walls = []
        self.apples_this_level = 0
        self.apples_total = 0
        self.level = 1
        self._load_level(self.level)
        self._new_snake()
        self.place_apple()
        self.state = GameState.RUNNING
        self.last_state = self.state

    def add_direction(self, direction: Direction) -> None:
        """Queue a turn, ignoring an immediate repeat of the last queued one."""
        if not self.direction_queue or self.direction_queue[-1] != direction:
            self.direction_queue.append(direction)

    def toggle_pause(self) -> None:
        """Pause a running game or resume a paused one."""
        if self.state is GameState.RUNNING:
            self.last_state = self.state
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = self.last_state

    def tick(self, delta: float) -> bool:
        """Let ``delta`` seconds pass; return True if the snake moved."""
        if self.state is not GameState.RUNNING:
            return False
        self.time_since_last_move += delta
        if self.time_since_last_move >= 1.0 / self.speed:
            self.step()
            self.time_since_last_move = 0.0
            return True
        return False

    def step(self) -> None:
        """Move the snake one cell and resolve what it runs into."""
        self._turn()
        self.score += len(self.snake) + self.apples_total + 1
        self._move_snake()
        self._eat_apple()
        self._check_game_over()

    def place_apple(self) -> None:
        """Put the apple on a random free cell inside the border."""
        columns = int(RESOLUTION[0] / CELL_SIZE - 2)
        rows = int(RESOLUTION[1] / CELL_SIZE - 2)
        obstacles = [s.rect() for s in self.snake] + [w.rect() for w in self.walls]
        while True:
            x = (1 + self.rng.randrange(columns)) * CELL_SIZE
            y = (1 + self.rng.randrange(rows)) * CELL_SIZE
            spot = Rect(x, y, CELL_SIZE, CELL_SIZE)
            if not any(spot.intersects(obstacle) for obstacle in obstacles):
                self.apple.position = (x, y)
                return

    def _load_level(self, number: int) -> None:
        if not 1 <= number <= len(self.levels):
            raise IndexError(f"level {number} does not exist")
        self.walls.extend(_load_level(self.levels[number - 1]))

    def _new_snake(self) -> None:
        self.snake = [SnakeSection(position, self.color) for position in START_POSITIONS]

    def _begin_next_level(self) -> None:
        self.level += 1
        self.walls = []
        self.direction_queue.clear()
        self.speed = 2 + self.level
        self.direction = Direction.RIGHT
        self.sections_to_add = 0
        self.apples_this_level = 0
        self._load_level(self.level)
        self._new_snake()
        self.place_apple()

    def _turn(self) -> None:
        if self.direction_queue:
            wanted = self.direction_queue.popleft()
            if wanted != self.direction.opposite:
                self.direction = wanted

    def _move_snake(self) -> None:
        if self.sections_to_add:
            self.snake.append(SnakeSection(self.snake[-1].position, self.color))
            self.sections_to_add -= 1

        head = self.snake[0]
        previous = head.position
        dx, dy = self.direction.offset
        head.position = (previous[0] + dx, previous[1] + dy)
        for section in self.snake[1:]:
            section.position, previous = previous, section.position
        for section in self.snake:
            section.update()

    def _eat_apple(self) -> None:
        if not self.snake[0].rect().intersects(self.apple.rect()):
            return
        self.apples_this_level += 1
        self.apples_total += 1
        if self.apples_this_level >= APPLES_PER_LEVEL and self.level < self.max_levels:
            self._begin_next_level()
            return
        self.sections_to_add += SECTIONS_PER_APPLE
        self.speed += 1
        self.place_apple()

    def _check_game_over(self) -> None:
        head = self.snake[0].rect()
        obstacles = [s.rect() for s in self.snake[1:]] + [w.rect() for w in self.walls]
        if any(head.intersects(obstacle) for obstacle in obstacles):
            self.state = GameState.GAMEOVER