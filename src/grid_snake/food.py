"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from grid_snake.grid import Playfield
    from grid_snake.snake import Cell

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Draws food cells uniformly from the playfield interior.

    Uses an injected NumPy RNG so placement is reproducible under a seed.
    Cells are not checked against the snake body; food may land on it.
    """

    def __init__(
        self,
        playfield: Playfield,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.playfield = playfield
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self) -> Cell:
        """Return a new food cell with x in [1, W-2] and y in [1, H-2]."""
        x_min, x_max = self.playfield.interior_x
        y_min, y_max = self.playfield.interior_y
        # integers() excludes the upper bound.
        x = int(self.rng.integers(x_min, x_max + 1))
        y = int(self.rng.integers(y_min, y_max + 1))
        logger.debug("Food spawned at (%d, %d).", x, y)
        return x, y
