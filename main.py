"""Text based driver showcasing the movement rules."""

from __future__ import annotations

import logging
from typing import Sequence

from tankbattle import Direction, Game, GameConfig, IllegalMoveError, Position, Tank, Team

PATROL: Sequence[Direction] = (
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
    Direction.UP,
    Direction.UP,
    Direction.LEFT,
    Direction.RIGHT,
    Direction.RIGHT,
)


def run_demo(config: GameConfig = GameConfig()) -> Game:
    game = Game.from_config(config)
    tank = game.add_tank(Tank(3, 1, Team.BLUE, 2, Position(0, 0), "Test", 1))
    print(tank)
    game.spawn_tank(Team.RED, Position(2, 0), "Rival")
    print(f"[Board] {config.board_length}x{config.board_height}, {len(game)} tanks deployed.")
    for direction in PATROL:
        try:
            position = game.make_move(tank.id, direction)
        except IllegalMoveError as exc:
            print(f"- {direction}: rejected ({exc})")
        else:
            print(f"- {direction}: now at {position}")
    return game


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    run_demo()
