"""Unit tests covering the movement rules."""
from __future__ import annotations

import pytest

from tankbattle import (
    Board,
    Direction,
    Game,
    OccupiedError,
    OutOfBoundsError,
    Position,
    Tank,
    TankNotFoundError,
    Team,
)
from tankbattle.movement import MovementEngine


def _make_tank(tank_id: int, x: int, y: int, team: Team = Team.BLUE) -> Tank:
    return Tank(3, 1, team, 2, Position(x, y), "Test", tank_id)


@pytest.fixture()
def game() -> Game:
    return Game(Board(8, 8), [_make_tank(1, 0, 0)])


def test_legal_moves_walk_a_square(game: Game) -> None:
    steps = [
        (Direction.RIGHT, Position(1, 0)),
        (Direction.DOWN, Position(1, 1)),
        (Direction.LEFT, Position(0, 1)),
        (Direction.UP, Position(0, 0)),
    ]
    for direction, expected in steps:
        assert game.make_move(1, direction) == expected
        assert game.get_tank(1).position == expected


def test_board_edges_reject_moves(game: Game) -> None:
    with pytest.raises(OutOfBoundsError, match="Illegal to move Left from 0,0"):
        game.make_move(1, Direction.LEFT)
    assert game.get_tank(1).position == Position(0, 0)

    game.force_set_position(1, Position(7, 0))
    with pytest.raises(OutOfBoundsError, match="Illegal to move Right from 7,0"):
        game.make_move(1, Direction.RIGHT)
    assert game.get_tank(1).position == Position(7, 0)

    game.force_set_position(1, Position(0, 7))
    with pytest.raises(OutOfBoundsError, match="Illegal to move Down from 0,7"):
        game.make_move(1, Direction.DOWN)
    assert game.get_tank(1).position == Position(0, 7)

    game.force_set_position(1, Position(0, 0))
    with pytest.raises(OutOfBoundsError, match="Illegal to move Up from 0,0"):
        game.make_move(1, Direction.UP)
    assert game.get_tank(1).position == Position(0, 0)


def test_out_of_bounds_error_carries_context(game: Game) -> None:
    with pytest.raises(OutOfBoundsError) as excinfo:
        game.make_move(1, Direction.UP)
    assert excinfo.value.direction is Direction.UP
    assert excinfo.value.from_position == Position(0, 0)


def test_collision_with_other_tank_is_rejected() -> None:
    game = Game(Board(8, 8), [_make_tank(1, 0, 0), _make_tank(2, 0, 1)])
    with pytest.raises(OccupiedError) as excinfo:
        game.make_move(1, Direction.DOWN)
    assert excinfo.value.occupant_id == 2
    assert excinfo.value.from_position == Position(0, 0)
    assert game.get_tank(1).position == Position(0, 0)
    assert game.get_tank(2).position == Position(0, 1)


def test_enemy_tank_also_blocks() -> None:
    game = Game(Board(8, 8), [_make_tank(1, 3, 3), _make_tank(2, 4, 3, Team.RED)])
    with pytest.raises(OccupiedError):
        game.make_move(1, Direction.RIGHT)


def test_round_trips_from_interior_cell() -> None:
    game = Game(Board(5, 4), [_make_tank(1, 2, 2)])
    assert game.make_move(1, Direction.RIGHT) == Position(3, 2)
    assert game.make_move(1, Direction.LEFT) == Position(2, 2)
    assert game.make_move(1, Direction.DOWN) == Position(2, 3)
    assert game.make_move(1, Direction.UP) == Position(2, 2)


def test_unknown_tank_is_reported(game: Game) -> None:
    with pytest.raises(TankNotFoundError) as excinfo:
        game.make_move(42, Direction.RIGHT)
    assert excinfo.value.tank_id == 42
    assert game.get_tank(1).position == Position(0, 0)
    assert not game.move_log


def test_single_cell_board_blocks_every_direction() -> None:
    game = Game(Board(1, 1), [_make_tank(1, 0, 0)])
    for direction in Direction:
        with pytest.raises(OutOfBoundsError):
            game.make_move(1, direction)


def test_vacated_cell_can_be_entered() -> None:
    game = Game(Board(3, 1), [_make_tank(1, 0, 0), _make_tank(2, 1, 0)])
    game.make_move(2, Direction.RIGHT)
    assert game.make_move(1, Direction.RIGHT) == Position(1, 0)


def test_move_accepts_direction_names(game: Game) -> None:
    assert game.make_move(1, "Right") == Position(1, 0)


def test_engine_destination_respects_bounds() -> None:
    engine = MovementEngine(Board(4, 2))
    assert engine.destination(Position(3, 0), Direction.RIGHT) is None
    assert engine.destination(Position(2, 0), Direction.RIGHT) == Position(3, 0)
    assert engine.destination(Position(0, 1), Direction.DOWN) is None
    assert engine.destination(Position(0, 1), Direction.UP) == Position(0, 0)


def test_engine_does_not_mutate_tanks() -> None:
    engine = MovementEngine(Board(8, 8))
    tank = _make_tank(1, 0, 0)
    moved, destination = engine.validate({1: tank}, 1, Direction.RIGHT)
    assert moved is tank
    assert destination == Position(1, 0)
    assert tank.position == Position(0, 0)
