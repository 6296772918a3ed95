"""Grid Snake — core simulation logic."""

from grid_snake.config import GameConfig
from grid_snake.driver import TickDriver
from grid_snake.engine import GameState, direction_for
from grid_snake.food import FoodSpawner
from grid_snake.grid import BLOCK_SIZE, Playfield
from grid_snake.snake import Direction, EmptySnakeError, Snake

__all__ = [
    "BLOCK_SIZE",
    "Direction",
    "EmptySnakeError",
    "FoodSpawner",
    "GameConfig",
    "GameState",
    "Playfield",
    "Snake",
    "TickDriver",
    "direction_for",
]
