"""A small text maze walked by a single player."""

import argparse
import sys
from collections.abc import Sequence
from enum import Enum

WALL = "."
GOAL = ">"
PLAYER = "*"

DEFAULT_GRID = (
    "..................",
    ".   .    .       .",
    "... .  .....     .",
    ".    ..       .  .",
    ".  ....    ..... .",
    ".  .  .      . . .",
    ".  .  ..  .... . .",
    ". ..     ..  ... .",
    ".      .  .      >",
    "..................",
)
DEFAULT_START = (1, 8)


class Direction(Enum):
    """A step on the grid as ``(dx, dy)``."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Maze:
    """A grid of walls (``.``), open cells and a goal (``>``) with a player on it."""

    def __init__(
        self,
        grid: Sequence[str] = DEFAULT_GRID,
        start: tuple[int, int] = DEFAULT_START,
    ) -> None:
        if not grid:
            raise ValueError("grid must have at least one row")
        self._grid = tuple(grid)
        if self._cell(*start) in (None, WALL):
            raise ValueError(f"start {start} is not an open cell")
        self._x, self._y = start

    def _cell(self, x: int, y: int) -> str | None:
        if 0 <= y < len(self._grid) and 0 <= x < len(self._grid[y]):
            return self._grid[y][x]
        return None

    @property
    def position(self) -> tuple[int, int]:
        """The player's ``(x, y)``."""
        return self._x, self._y

    def move(self, direction: Direction) -> bool:
        """Step the player unless a wall or the edge is in the way; report if it moved."""
        dx, dy = direction.value
        x, y = self._x + dx, self._y + dy
        if self._cell(x, y) in (None, WALL):
            return False
        self._x, self._y = x, y
        return True

    def render(self) -> str:
        """Return the grid with the player drawn as ``*``."""
        lines = []
        for y, row in enumerate(self._grid):
            if y == self._y:
                row = row[: self._x] + PLAYER + row[self._x + 1 :]
            lines.append(row)
        return "\n".join(lines)

    def won(self) -> bool:
        """Report whether the player stands on the goal."""
        return self._cell(self._x, self._y) == GOAL


_COMMANDS = {
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}
_QUIT = {"q", "quit", "esc", "exit"}


def _show(maze: Maze) -> None:
    print("\n" * 100, end="")
    print("Use up/down/left/right (or w/s/a/d) to move & q to quit")
    print(maze.render())


def main(argv: Sequence[str] | None = None) -> int:
    """Play the maze, one command per line on standard input."""
    parser = argparse.ArgumentParser(
        prog="maze", description="Walk the player (*) to the goal (>)."
    )
    parser.parse_args(argv)
    maze = Maze()
    _show(maze)
    if not maze.won():
        for line in sys.stdin:
            command = line.strip().lower()
            if command in _QUIT:
                break
            direction = _COMMANDS.get(command)
            if direction is None:
                continue
            if maze.move(direction):
                _show(maze)
            if maze.won():
                break
    if maze.won():
        print("\n\n\nA WINNER IS YOU :)")
    return 0