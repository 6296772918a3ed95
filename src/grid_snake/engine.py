"""Tick-based game state composing playfield, snake, and food logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.food import FoodSpawner
from grid_snake.grid import Playfield
from grid_snake.snake import Cell, Direction, Snake

if TYPE_CHECKING:
    from grid_snake.config import GameConfig

logger = logging.getLogger(__name__)

# Key names understood by :func:`direction_for`, matched case-insensitively.
_KEY_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def direction_for(button: object) -> Direction | None:
    """Map an input event to a direction, or ``None`` if it is not one."""
    if isinstance(button, Direction):
        return button
    if isinstance(button, str):
        return _KEY_DIRECTIONS.get(button.strip().lower())
    return None


class GameState:
    """Single-snake game state advanced one tick at a time.

    Owns the playfield, the snake, the current direction and the food cell.
    :meth:`update` is the only transition; the game never ends on its own,
    so wall or self collisions are left for the caller to act on via
    :attr:`has_collided`.
    """

    def __init__(
        self,
        playfield: Playfield,
        body: Iterable[Cell],
        direction: Direction = Direction.RIGHT,
        food: Cell | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.playfield = playfield
        self.snake = Snake(body)
        self.direction = direction
        self.food_spawner = FoodSpawner(playfield, rng=rng)
        self.food: Cell = (
            self.food_spawner.spawn() if food is None else tuple(food)
        )
        self.score = 0
        self.tick = 0

    @classmethod
    def new_session(
        cls,
        width: int = 40,
        height: int = 30,
        seed: int | None = None,
    ) -> GameState:
        """Start a session: a 2-cell snake on the left edge heading right."""
        mid = height // 2
        return cls(
            Playfield(width=width, height=height),
            body=[(1, mid), (0, mid)],
            direction=Direction.RIGHT,
            rng=np.random.default_rng(seed),
        )

    @classmethod
    def from_config(cls, config: GameConfig) -> GameState:
        """Start a session sized and seeded from *config*."""
        return cls.new_session(
            width=config.width, height=config.height, seed=config.seed,
        )

    def set_direction(self, button: object) -> None:
        """Turn towards *button* unless it is the reverse of the current heading.

        Non-directional inputs are ignored.
        """
        candidate = direction_for(button)
        if candidate is None or candidate is self.direction.opposite:
            return
        self.direction = candidate

    def update(self) -> None:
        """Advance the game by one tick."""
        self.snake.move(self.direction)
        ate = not self.snake.consume_food(self.food)
        if ate:
            self.score += 1
            logger.debug(
                "Food eaten at %s on tick %d (length %d).",
                self.food, self.tick, len(self.snake),
            )
            self.food = self.food_spawner.spawn()
        self.tick += 1

    @property
    def has_collided(self) -> bool:
        """Whether the head is off the playfield or on the body."""
        return (
            not self.playfield.in_bounds(self.snake.head)
            or self.snake.self_collision()
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "playfield": self.playfield.to_dict(),
            "snake": self.snake.to_dict(),
            "direction": self.direction.name,
            "food": list(self.food),
        }
