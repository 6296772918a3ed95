"""Snake body representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator
from numbers import Integral

Cell = tuple[int, int]


class EmptySnakeError(RuntimeError):
    """Raised when an operation needs a head but the body is empty."""


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    The y axis grows downwards, so UP decreases y.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the direction that would cause a 180° reversal."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def _validate_cell(cell: Cell) -> Cell:
    """Validate and normalize a cell to a pair of plain ints."""
    x, y = cell
    if not isinstance(x, Integral) or not isinstance(y, Integral):
        raise TypeError(
            f"Cell coordinates must be integers, got {cell!r}.",
        )
    return int(x), int(y)


class Snake:
    """A snake represented as an ordered deque of (x, y) body cells.

    The head is ``body[0]``; the tail is ``body[-1]``. Moving only ever
    prepends a cell; whether the tail goes away is decided by
    :meth:`consume_food`.
    """

    def __init__(self, cells: Iterable[Cell]) -> None:
        self.body: deque[Cell] = deque(_validate_cell(cell) for cell in cells)
        if not self.body:
            raise ValueError("Snake body must contain at least 1 cell.")

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    @property
    def head(self) -> Cell:
        """Return the head cell."""
        if not self.body:
            raise EmptySnakeError("Snake head is missing.")
        return self.body[0]

    @property
    def tail(self) -> Cell:
        """Return the tail cell."""
        if not self.body:
            raise EmptySnakeError("Snake tail is missing.")
        return self.body[-1]

    def move(self, direction: Direction) -> Cell:
        """Prepend a new head one cell along *direction*.

        The tail is left in place. Returns the new head.
        """
        x, y = self.head
        dx, dy = direction.value
        new_head = (x + dx, y + dy)
        self.body.appendleft(new_head)
        return new_head

    def consume_food(self, food: Cell) -> bool:
        """Resolve the tick's growth against *food*.

        Returns ``True`` if the food remains uneaten, in which case the tail
        is dropped. Returns ``False`` when the head sits on the food; the
        tail is kept and the snake has grown by one cell.
        """
        if self.head == tuple(food):
            return False
        self.body.pop()
        return True

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return tuple(cell) in self.body

    def self_collision(self) -> bool:
        """Check whether the head overlaps any other body cell."""
        head = self.head
        return any(seg == head for seg in list(self.body)[1:])

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "length": len(self.body),
        }
