"""CLI launcher for headless Grid Snake sessions."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from grid_snake.config import GameConfig
from grid_snake.driver import TickDriver
from grid_snake.engine import GameState
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_MOVE_CODES: dict[str, Direction] = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid Snake headless simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser("run", help="Simulate a session and print its state.")
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    run_p.add_argument("--width", type=int, default=None)
    run_p.add_argument("--height", type=int, default=None)
    run_p.add_argument("--seed", type=int, default=None)
    run_p.add_argument("--ups", type=float, default=None)
    run_p.add_argument("--ticks", type=int, default=20)
    run_p.add_argument(
        "--moves", type=str, default="",
        help="One of U/D/L/R per tick; other characters leave input empty.",
    )
    run_p.add_argument(
        "--stop-on-collision", action="store_true", default=None,
    )
    run_p.add_argument(
        "--realtime", action="store_true",
        help="Drive ticks with the asyncio timer instead of back to back.",
    )

    # --- config ---
    config_p = sub.add_parser("config", help="Write a config file.")
    config_p.add_argument("output", help="Path for the JSON config.")
    config_p.add_argument("--width", type=int, default=None)
    config_p.add_argument("--height", type=int, default=None)
    config_p.add_argument("--seed", type=int, default=None)
    config_p.add_argument("--ups", type=float, default=None)

    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = (
        GameConfig.load(args.config)
        if getattr(args, "config", None) else GameConfig()
    )
    overrides: dict = {}
    for name in ("width", "height", "seed", "ups", "stop_on_collision"):
        val = getattr(args, name, None)
        if val is not None:
            overrides[name] = val
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _run_session(args: argparse.Namespace, config: GameConfig) -> int:
    state = GameState.from_config(config)
    driver = TickDriver(
        state, ups=config.ups, stop_on_collision=config.stop_on_collision,
    )
    moves = args.moves.upper()

    if args.realtime:
        async def _feed_and_run() -> None:
            driver.on_tick = lambda _snapshot: _queue_move(driver, moves)
            _queue_move(driver, moves)
            await driver.run(max_ticks=args.ticks)

        asyncio.run(_feed_and_run())
    else:
        for _ in range(args.ticks):
            _queue_move(driver, moves)
            driver.step()
            if config.stop_on_collision and state.has_collided:
                logger.info("Collision on tick %d.", state.tick)
                break

    print(json.dumps(state.get_state()))  # noqa: T201
    return 0


def _queue_move(driver: TickDriver, moves: str) -> None:
    tick = driver.state.tick
    if tick < len(moves) and moves[tick] in _MOVE_CODES:
        driver.submit(_MOVE_CODES[moves[tick]])


def _write_config(args: argparse.Namespace, config: GameConfig) -> int:
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_session,
        "config": _write_config,
    }
    try:
        config = _resolve_config(args)
    except ValueError as exc:
        parser.error(str(exc))
    return handlers[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
