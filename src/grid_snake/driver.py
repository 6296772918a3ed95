"""Fixed-rate asyncio tick driver with a non-blocking input queue."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from grid_snake.engine import GameState

logger = logging.getLogger(__name__)

TickCallback = Callable[[dict], None]


class TickDriver:
    """Runs :meth:`GameState.update` at ``ups`` updates per second.

    Input events are queued with :meth:`submit` from any coroutine or
    callback and applied in arrival order right before the next update, so
    the last direction submitted within a tick window wins.
    """

    def __init__(
        self,
        state: GameState,
        ups: float = 5.0,
        on_tick: TickCallback | None = None,
        stop_on_collision: bool = False,
    ) -> None:
        if ups <= 0:
            raise ValueError("ups must be positive.")
        self.state = state
        self.ups = ups
        self.on_tick = on_tick
        self.stop_on_collision = stop_on_collision
        self.running = False
        self._inputs: asyncio.Queue[object] = asyncio.Queue()

    @property
    def tick_interval(self) -> float:
        return 1.0 / self.ups

    def submit(self, button: object) -> None:
        """Queue an input event without blocking."""
        self._inputs.put_nowait(button)

    def step(self) -> dict:
        """Apply queued input, advance one tick, and notify the listener."""
        while not self._inputs.empty():
            self.state.set_direction(self._inputs.get_nowait())
        self.state.update()
        snapshot = self.state.get_state()
        if self.on_tick is not None:
            self.on_tick(snapshot)
        return snapshot

    def stop(self) -> None:
        """Ask the running loop to exit after the current tick."""
        self.running = False

    async def run(self, max_ticks: int | None = None) -> int:
        """Tick until stopped, *max_ticks* is reached, or a collision ends it.

        Returns the number of ticks this call performed.
        """
        ticks = 0
        self.running = True
        logger.info("Tick driver started at %.1f updates/s.", self.ups)
        try:
            while self.running:
                if max_ticks is not None and ticks >= max_ticks:
                    break
                await asyncio.sleep(self.tick_interval)
                self.step()
                ticks += 1
                if self.stop_on_collision and self.state.has_collided:
                    logger.info(
                        "Collision on tick %d with score %d.",
                        self.state.tick, self.state.score,
                    )
                    break
        except asyncio.CancelledError:
            logger.info("Tick driver cancelled after %d ticks.", ticks)
            raise
        except Exception:
            logger.exception("Tick driver error on tick %d.", self.state.tick)
            raise
        finally:
            self.running = False
        return ticks
