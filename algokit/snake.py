"""A console snake game on a walled grid."""

import argparse
import queue
import random
import sys
import threading
import time
from collections.abc import Sequence
from typing import TextIO

EMPTY = 0
WALL = -1
FOOD = -2
START_LENGTH = 3

# Direction codes: 0 up, 1 right, 2 down, 3 left, as (dx, dy) on tiles[x][y].
_STEPS = {0: (-1, 0), 1: (0, 1), 2: (1, 0), 3: (0, -1)}
# key -> (new direction, direction that blocks the change)
_TURNS = {"w": (0, 2), "d": (1, 3), "s": (2, None), "a": (3, None)}

_CLEAR = "\033[2J\033[H"


def tile_char(value: int) -> str:
    """Return the character drawn for a tile value."""
    if value > 0:
        return "o"
    if value == WALL:
        return "X"
    if value == FOOD:
        return "O"
    if value == EMPTY:
        return " "
    raise ValueError(f"unknown tile value {value}")


class SnakeGame:
    """Game state: ``tiles[x][y]`` holds walls, food, empty cells and body ages.

    A positive tile is part of the snake and counts down to zero as the
    snake moves on; ``food`` is both the score and the body length.
    """

    def __init__(
        self, width: int = 20, height: int = 20, rng: random.Random | None = None
    ) -> None:
        if width < 3 or height < 3:
            raise ValueError("the board must be at least 3 by 3")
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.tiles = [[EMPTY] * height for _ in range(width)]
        self.direction = 0
        self.food = START_LENGTH
        self.running = True
        self.head = (width // 2, height // 2)
        self.tiles[self.head[0]][self.head[1]] = 1
        for x in range(width):
            self.tiles[x][0] = WALL
            self.tiles[x][height - 1] = WALL
        for y in range(height):
            self.tiles[0][y] = WALL
            self.tiles[width - 1][y] = WALL
        self.generate_food()

    def change_direction(self, key: str) -> None:
        """Turn with w/d/s/a; only 'w' and 'd' refuse to reverse the snake."""
        turn = _TURNS.get(key)
        if turn is None:
            return
        new, blocked_by = turn
        if self.direction != blocked_by:
            self.direction = new

    def _move(self, dx: int, dy: int) -> None:
        x, y = self.head[0] + dx, self.head[1] + dy
        target = self.tiles[x][y]
        if target == FOOD:
            self.food += 1
            self.generate_food()
        elif target != EMPTY:
            self.running = False
        self.head = (x, y)
        self.tiles[x][y] = self.food + 1

    def update(self) -> None:
        """Advance the snake one step and age its body."""
        if not self.running:
            raise RuntimeError("the game is over")
        step = _STEPS.get(self.direction)
        if step is not None:
            self._move(*step)
        for column in self.tiles:
            for y, value in enumerate(column):
                if value > 0:
                    column[y] = value - 1

    def generate_food(self) -> None:
        """Place food on a random empty interior cell."""
        if not any(
            value == EMPTY for column in self.tiles[1:-1] for value in column[1:-1]
        ):
            raise RuntimeError("no free cell left for food")
        while True:
            x = self._rng.randrange(self.width - 2) + 1
            y = self._rng.randrange(self.height - 2) + 1
            if self.tiles[x][y] == EMPTY:
                self.tiles[x][y] = FOOD
                return

    def render(self) -> str:
        """Return the board, one line for each x."""
        return "\n".join(
            "".join(tile_char(value) for value in column) for column in self.tiles
        )


def _read_keys(stream: TextIO, keys: "queue.Queue[str]") -> None:
    for line in stream:
        for char in line:
            if not char.isspace():
                keys.put(char)


def main(argv: Sequence[str] | None = None) -> int:
    """Play snake; steer with w/a/s/d followed by Enter."""
    parser = argparse.ArgumentParser(prog="snake", description="Console snake.")
    parser.add_argument(
        "--delay", type=float, default=0.5, help="seconds between steps"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")

    game = SnakeGame(rng=random.Random(args.seed))
    keys: "queue.Queue[str]" = queue.Queue()
    threading.Thread(target=_read_keys, args=(sys.stdin, keys), daemon=True).start()

    while game.running:
        try:
            game.change_direction(keys.get_nowait())
        except queue.Empty:
            pass
        game.update()
        print(_CLEAR, end="")
        print(game.render())
        time.sleep(args.delay)

    print(f"\t\t!!!Game over!\n\t\tYour score is: {game.food}")
    return 0