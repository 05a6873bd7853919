"""Movement validation for tanks on the grid."""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple

from .board import Board
from .entities import Direction, Position, Tank


class MoveError(RuntimeError):
    """Base class for rejected move requests."""


class TankNotFoundError(MoveError):
    """Raised when a request references an unknown tank id."""

    def __init__(self, tank_id: int):
        super().__init__(f"Tank id not found: {tank_id}")
        self.tank_id = tank_id


class IllegalMoveError(MoveError):
    """A move that the rules forbid from the tank's current cell."""

    def __init__(self, direction: Direction, from_position: Position):
        super().__init__(f"Illegal to move {direction} from {from_position}")
        self.direction = direction
        self.from_position = from_position


class OutOfBoundsError(IllegalMoveError):
    """Raised when the destination would leave the board."""


class OccupiedError(IllegalMoveError):
    """Raised when another tank already holds the destination."""

    def __init__(self, direction: Direction, from_position: Position, occupant_id: int):
        super().__init__(direction, from_position)
        self.occupant_id = occupant_id


class MovementEngine:
    """Stateless rules engine deciding where a tank may move.

    The engine never mutates tanks.  :meth:`validate` returns the resolved
    tank and its legal destination; committing the position is left to the
    owner of the tanks so the whole request runs under one lock.
    """

    def __init__(self, board: Board):
        self.board = board

    def destination(self, position: Position, direction: Direction) -> Optional[Position]:
        """Return the cell one step from ``position``, or ``None`` off-board."""

        x, y = position.x, position.y
        if direction is Direction.RIGHT:
            return Position(x + 1, y) if x + 1 < self.board.length else None
        if direction is Direction.LEFT:
            return Position(x - 1, y) if x > 0 else None
        if direction is Direction.DOWN:
            return Position(x, y + 1) if y + 1 < self.board.height else None
        if direction is Direction.UP:
            return Position(x, y - 1) if y > 0 else None
        raise ValueError(f"Unknown direction: {direction!r}")

    def validate(
        self, tanks: Mapping[int, Tank], tank_id: int, direction: Direction
    ) -> Tuple[Tank, Position]:
        # Occupancy is checked against the pre-move world.
        occupied: Dict[Position, int] = {tank.position: tank.id for tank in tanks.values()}
        moving = tanks.get(tank_id)
        if moving is None:
            raise TankNotFoundError(tank_id)

        origin = moving.position
        candidate = self.destination(origin, direction)
        if candidate is None:
            raise OutOfBoundsError(direction, origin)
        occupant_id = occupied.get(candidate)
        if occupant_id is not None:
            raise OccupiedError(direction, origin, occupant_id)
        return moving, candidate


__all__ = [
    "IllegalMoveError",
    "MoveError",
    "MovementEngine",
    "OccupiedError",
    "OutOfBoundsError",
    "TankNotFoundError",
]
