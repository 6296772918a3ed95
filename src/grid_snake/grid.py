"""Playfield bounds and grid-to-pixel conversion."""

from __future__ import annotations

from dataclasses import dataclass

from grid_snake.snake import Cell

# Side length of one grid cell in pixels for the rendering collaborator.
BLOCK_SIZE = 20


@dataclass(frozen=True)
class Playfield:
    """A ``width`` × ``height`` grid measured in cells.

    Coordinates use (x, y) ordering with the origin in the top-left corner.
    The interior excludes the outermost one-cell ring and is where food is
    placed.
    """

    width: int = 40
    height: int = 30

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ValueError("Playfield dimensions must be at least 3×3.")

    @property
    def interior_x(self) -> tuple[int, int]:
        """Inclusive (min, max) interior x range."""
        return 1, self.width - 2

    @property
    def interior_y(self) -> tuple[int, int]:
        """Inclusive (min, max) interior y range."""
        return 1, self.height - 2

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies within the playfield."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def in_interior(self, cell: Cell) -> bool:
        """Check whether a cell lies within the interior bounds."""
        x, y = cell
        x_min, x_max = self.interior_x
        y_min, y_max = self.interior_y
        return x_min <= x <= x_max and y_min <= y <= y_max

    def cell_rect(
        self, cell: Cell, block_size: int = BLOCK_SIZE,
    ) -> tuple[int, int, int, int]:
        """Return the (left, top, width, height) pixel square for a cell."""
        x, y = cell
        return x * block_size, y * block_size, block_size, block_size

    def pixel_size(self, block_size: int = BLOCK_SIZE) -> tuple[int, int]:
        """Return the window size in pixels for the whole playfield."""
        return self.width * block_size, self.height * block_size

    def to_dict(self) -> dict:
        """Serialize playfield bounds to a dictionary."""
        return {"width": self.width, "height": self.height}
