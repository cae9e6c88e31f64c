"""Rules of the Circuit Maze game: trace the circuit one tile at a time."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

TILE_SIZE = 100
ROWS = 6
COLS = 6
TIME_LIMIT = 60.0

WIN_TEXT = "Success! You completed the circuit."
WRONG_STEP_TEXT = "Wrong step! You lost."
TIMEOUT_TEXT = "Time's up! You lost."


class TileType(enum.Enum):
    """What occupies a grid tile."""

    EMPTY = enum.auto()
    START = enum.auto()
    END = enum.auto()
    RESISTOR = enum.auto()
    WIRE = enum.auto()
    DIODE = enum.auto()
    CAPACITOR = enum.auto()
    BATTERY = enum.auto()


# The tiles to click, in order, as (row, col).
VALID_PATH: tuple[tuple[int, int], ...] = (
    (0, 0), (0, 1), (0, 2), (0, 3), (1, 2), (2, 2), (3, 2), (3, 3), (3, 4), (3, 5),
)

# Component labels are placed by (col, row), so they appear mirrored across
# the diagonal from the path that has to be clicked.
COMPONENTS: tuple[tuple[tuple[int, int], str], ...] = (
    ((0, 0), "S"), ((0, 1), "R"), ((0, 2), "W"), ((0, 3), "D"),
    ((1, 2), "W"), ((2, 2), "C"), ((3, 2), "B"),
    ((3, 3), "W"), ((3, 4), "W"), ((3, 5), "E"),
)

_LABEL_TYPES = {
    "S": TileType.START,
    "E": TileType.END,
    "R": TileType.RESISTOR,
    "C": TileType.CAPACITOR,
    "D": TileType.DIODE,
    "B": TileType.BATTERY,
    "W": TileType.WIRE,
}


def is_valid_step(index: int, pos: tuple[int, int]) -> bool:
    """True when ``pos`` (row, col) is the ``index``-th tile of the path."""
    return 0 <= index < len(VALID_PATH) and VALID_PATH[index] == tuple(pos)


def glow_level(elapsed: float) -> int:
    """Pulsing brightness, between 145 and 255, after ``elapsed`` seconds."""
    return int(200 + 55 * math.sin(elapsed * 2.0))


@dataclass
class Tile:
    """One grid cell and what has happened to it."""

    type: TileType = TileType.EMPTY
    label: str = ""
    visited: bool = False
    wrong: bool = False

    @property
    def is_component(self) -> bool:
        return self.type is not TileType.EMPTY


def _build_grid() -> list[list[Tile]]:
    grid = [[Tile() for _ in range(COLS)] for _ in range(ROWS)]
    for (col, row), label in COMPONENTS:
        tile = grid[row][col]
        tile.label = label
        tile.type = _LABEL_TYPES[label]
    return grid


@dataclass
class CircuitMaze:
    """The grid, progress along the path and the outcome."""

    grid: list[list[Tile]] = field(default_factory=_build_grid)
    path_index: int = 0
    won: bool = False
    lost: bool = False
    result: str = ""

    @property
    def finished(self) -> bool:
        return self.won or self.lost

    def tile_at(self, row: int, col: int) -> Tile:
        """The tile in the given row and column."""
        if not (0 <= row < ROWS and 0 <= col < COLS):
            raise IndexError(f"no tile at row {row}, column {col}")
        return self.grid[row][col]

    def click(self, x: int, y: int) -> None:
        """Handle a mouse press at pixel ``(x, y)``."""
        if self.finished or x < 0 or y < 0:
            return
        col, row = x // TILE_SIZE, y // TILE_SIZE
        if col >= COLS or row >= ROWS:
            return
        tile = self.grid[row][col]
        if is_valid_step(self.path_index, (row, col)):
            tile.visited = True
            self.path_index += 1
            if self.path_index == len(VALID_PATH):
                self.won = True
                self.result = WIN_TEXT
        else:
            tile.wrong = True
            self.lost = True
            self.result = WRONG_STEP_TEXT

    def update(self, elapsed: float) -> None:
        """Apply the time limit after ``elapsed`` seconds of play."""
        if elapsed >= TIME_LIMIT and not self.won:
            self.lost = True
            self.result = TIMEOUT_TEXT

    def time_left(self, elapsed: float) -> int:
        """Whole seconds remaining, truncated towards zero."""
        return int(TIME_LIMIT - elapsed)