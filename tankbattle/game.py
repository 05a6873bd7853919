"""Authoritative state for a single tank battle."""

from __future__ import annotations

import itertools
import logging
import threading
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Deque, Dict, Iterable, Iterator, List, Optional

from .board import Board
from .config import GameConfig
from .entities import Direction, Position, Tank, Team
from .movement import MoveError, MovementEngine, TankNotFoundError

logger = logging.getLogger(__name__)


class RegistryError(ValueError):
    """Base class for failures while registering tanks."""


class DuplicateTankError(RegistryError):
    """Raised when a tank id is already taken."""


class PlacementError(RegistryError):
    """Raised when a tank cannot be placed at its starting position."""


class InvalidTankError(RegistryError):
    """Raised when a tank carries stats outside the configured limits."""


@dataclass
class MoveRecord:
    """Entry in the game's move log.

    ``direction`` is ``None`` for administrative placements.
    """

    sequence: int
    tank_id: int
    origin: Position
    destination: Position
    direction: Optional[Direction] = None


class Game:
    """Owns the board and every tank taking part in the battle.

    Tanks are kept in insertion order and addressed by their integer id.
    All mutations hold the game lock for their whole duration.
    """

    def __init__(
        self,
        board: Board,
        tanks: Iterable[Tank] = (),
        config: Optional[GameConfig] = None,
    ):
        if config is None:
            config = GameConfig(board_length=board.length, board_height=board.height)
        elif (config.board_length, config.board_height) != (board.length, board.height):
            raise ValueError(
                f"Config describes a {config.board_length}x{config.board_height} board"
                f" but the board is {board.length}x{board.height}"
            )
        config.validate()
        self.config = config
        self.board = board
        self.engine = MovementEngine(board)
        self.move_log: Deque[MoveRecord] = deque(maxlen=config.move_log_size)
        self._tanks: Dict[int, Tank] = {}
        self._lock = threading.RLock()
        self._sequence = itertools.count(1)
        for tank in tanks:
            self.add_tank(tank)

    @classmethod
    def from_config(cls, config: GameConfig) -> "Game":
        return cls(Board.from_config(config), config=config)

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------
    @property
    def tanks(self) -> List[Tank]:
        return list(self._tanks.values())

    def __len__(self) -> int:
        return len(self._tanks)

    def __contains__(self, tank_id: object) -> bool:
        return tank_id in self._tanks

    def get_tank(self, tank_id: int) -> Optional[Tank]:
        return self._tanks.get(tank_id)

    @contextmanager
    def edit_tank(self, tank_id: int) -> Iterator[Tank]:
        """Yield a tank for in-place edits while holding the game lock."""

        with self._lock:
            tank = self._tanks.get(tank_id)
            if tank is None:
                raise TankNotFoundError(tank_id)
            yield tank

    def add_tank(self, tank: Tank) -> Tank:
        with self._lock:
            if tank.id in self._tanks:
                raise DuplicateTankError(f"Tank id {tank.id} is already registered")
            self._check_stats(tank)
            if not self.board.contains(tank.position):
                raise PlacementError(f"Position {tank.position} is outside the board")
            occupant = self._occupant(tank.position)
            if occupant is not None:
                raise PlacementError(f"Position {tank.position} is held by tank {occupant.id}")
            self._tanks[tank.id] = tank
            logger.info("Registered tank %s (%s) at %s", tank.id, tank.name, tank.position)
            return tank

    def spawn_tank(
        self,
        team: Team,
        position: Position,
        name: str,
        life: Optional[int] = None,
        action_points: Optional[int] = None,
        range: Optional[int] = None,
    ) -> Tank:
        """Create a tank with a registry-assigned id and place it."""

        with self._lock:
            tank = Tank(
                life=self.config.default_life if life is None else life,
                action_points=(
                    self.config.default_action_points if action_points is None else action_points
                ),
                team=team,
                range=self.config.default_range if range is None else range,
                position=position,
                name=name,
                id=self._next_id(),
            )
            return self.add_tank(tank)

    def _check_stats(self, tank: Tank) -> None:
        if not 0 <= tank.life <= self.config.max_life:
            raise InvalidTankError(
                f"Tank life must be between 0 and {self.config.max_life}, got {tank.life}"
            )
        if tank.action_points < 0:
            raise InvalidTankError(
                f"Tank action points cannot be negative, got {tank.action_points}"
            )
        if tank.range < 0:
            raise InvalidTankError(f"Tank range cannot be negative, got {tank.range}")

    def _next_id(self) -> int:
        return max(self._tanks, default=0) + 1

    def _occupant(self, position: Position) -> Optional[Tank]:
        for tank in self._tanks.values():
            if tank.position == position:
                return tank
        return None

    # ------------------------------------------------------------------
    # Mutation entry points
    # ------------------------------------------------------------------
    def make_move(self, tank_id: int, direction: Direction) -> Position:
        """Move a tank one cell and return its new position.

        Raises :class:`~tankbattle.movement.TankNotFoundError`,
        :class:`~tankbattle.movement.OutOfBoundsError` or
        :class:`~tankbattle.movement.OccupiedError`.  Nothing is mutated
        unless every check passes.
        """

        direction = Direction(direction)
        with self._lock:
            try:
                tank, destination = self.engine.validate(self._tanks, tank_id, direction)
            except MoveError as exc:
                logger.debug("Move rejected for tank %s: %s", tank_id, exc)
                raise
            origin = tank.position
            tank.position = destination
            self._record(tank_id, origin, destination, direction)
            logger.info("Tank %s moved %s from %s to %s", tank_id, direction, origin, destination)
            return destination

    def force_set_position(self, tank_id: int, position: Position) -> bool:
        """Overwrite a tank's position, bypassing occupancy checks.

        Intended for setup and tests.  An unknown id raises
        :class:`~tankbattle.movement.TankNotFoundError`; a position outside
        the board is ignored and ``False`` is returned.
        """

        with self.edit_tank(tank_id) as tank:
            if not self.board.contains(position):
                logger.debug("Ignoring off-board placement of tank %s at %s", tank_id, position)
                return False
            origin = tank.position
            tank.position = position
            self._record(tank_id, origin, position, None)
            logger.info("Tank %s placed at %s", tank_id, position)
            return True

    def _record(
        self,
        tank_id: int,
        origin: Position,
        destination: Position,
        direction: Optional[Direction],
    ) -> None:
        self.move_log.append(
            MoveRecord(
                sequence=next(self._sequence),
                tank_id=tank_id,
                origin=origin,
                destination=destination,
                direction=direction,
            )
        )

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "board": self.board.to_dict(),
                "tanks": [tank.serialise() for tank in self._tanks.values()],
                "moves": self.move_log[-1].sequence if self.move_log else 0,
            }


__all__ = [
    "DuplicateTankError",
    "Game",
    "InvalidTankError",
    "MoveRecord",
    "PlacementError",
    "RegistryError",
]
