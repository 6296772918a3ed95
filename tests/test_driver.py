"""Tests for the asyncio tick driver."""

from __future__ import annotations

import asyncio

import numpy as np
import pytest

from grid_snake.driver import TickDriver
from grid_snake.engine import GameState
from grid_snake.grid import Playfield
from grid_snake.snake import Direction


def _state(width: int = 40, height: int = 30) -> GameState:
    return GameState(
        Playfield(width=width, height=height),
        body=[(5, 5), (4, 5)],
        food=(30, 20),
        rng=np.random.default_rng(0),
    )


class TestDriverInit:
    def test_invalid_ups(self):
        with pytest.raises(ValueError, match="ups"):
            TickDriver(_state(), ups=0)

    def test_tick_interval(self):
        assert TickDriver(_state(), ups=5).tick_interval == pytest.approx(0.2)


class TestDriverStep:
    def test_step_advances_one_tick(self):
        driver = TickDriver(_state())
        snapshot = driver.step()
        assert snapshot["tick"] == 1
        assert driver.state.snake.head == (6, 5)

    def test_queued_input_applied_before_update(self):
        driver = TickDriver(_state())
        driver.submit(Direction.DOWN)
        driver.step()
        assert driver.state.snake.head == (5, 6)

    def test_last_input_wins(self):
        driver = TickDriver(_state())
        driver.submit("Up")
        driver.submit("Left")
        driver.step()
        assert driver.state.direction == Direction.LEFT
        assert driver.state.snake.head == (4, 5)

    def test_input_applied_in_order_against_reversal(self):
        driver = TickDriver(_state())
        driver.submit(Direction.UP)
        driver.submit(Direction.DOWN)
        driver.step()
        assert driver.state.direction == Direction.UP

    def test_on_tick_receives_snapshot(self):
        seen: list[dict] = []
        driver = TickDriver(_state(), on_tick=seen.append)
        driver.step()
        driver.step()
        assert [s["tick"] for s in seen] == [1, 2]


class TestDriverRun:
    @pytest.mark.asyncio
    async def test_run_max_ticks(self):
        driver = TickDriver(_state(), ups=1000)
        ticks = await driver.run(max_ticks=5)
        assert ticks == 5
        assert driver.state.tick == 5
        assert not driver.running

    @pytest.mark.asyncio
    async def test_stop_from_callback(self):
        driver = TickDriver(_state(), ups=1000)
        driver.on_tick = lambda s: driver.stop() if s["tick"] >= 3 else None
        ticks = await driver.run()
        assert ticks == 3

    @pytest.mark.asyncio
    async def test_stop_on_collision(self):
        driver = TickDriver(
            _state(width=8, height=8), ups=1000, stop_on_collision=True,
        )
        await driver.run(max_ticks=50)
        # Head starts at x=5 and leaves the 8-wide field at x=8.
        assert driver.state.tick == 3
        assert driver.state.has_collided

    @pytest.mark.asyncio
    async def test_collision_ignored_by_default(self):
        driver = TickDriver(_state(width=8, height=8), ups=1000)
        ticks = await driver.run(max_ticks=10)
        assert ticks == 10

    @pytest.mark.asyncio
    async def test_cancel_is_clean(self):
        driver = TickDriver(_state(), ups=1000)
        task = asyncio.create_task(driver.run())
        await asyncio.sleep(0.02)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert not driver.running

    @pytest.mark.asyncio
    async def test_timeout_propagates(self):
        driver = TickDriver(_state(), ups=1000)
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(driver.run(), 0.05)
        assert not driver.running

    @pytest.mark.asyncio
    async def test_input_submitted_while_running(self):
        driver = TickDriver(_state(), ups=1000)

        def _turn(snapshot: dict) -> None:
            if snapshot["tick"] == 1:
                driver.submit(Direction.DOWN)

        driver.on_tick = _turn
        await driver.run(max_ticks=2)
        assert driver.state.snake.head == (6, 6)
