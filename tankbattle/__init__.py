"""Core package for the tank battle movement engine.

The package models a rectangular board populated by tanks and exposes
the movement rules a client, AI or network layer calls into.  Everything
runs without graphical dependencies so the rules can be unit tested on
their own.
"""

from .board import Board
from .config import GameConfig
from .entities import Direction, Position, Tank, Team
from .game import (
    DuplicateTankError,
    Game,
    InvalidTankError,
    MoveRecord,
    PlacementError,
    RegistryError,
)
from .movement import (
    IllegalMoveError,
    MoveError,
    MovementEngine,
    OccupiedError,
    OutOfBoundsError,
    TankNotFoundError,
)

__all__ = [
    "Board",
    "Direction",
    "DuplicateTankError",
    "Game",
    "GameConfig",
    "IllegalMoveError",
    "InvalidTankError",
    "MoveError",
    "MoveRecord",
    "MovementEngine",
    "OccupiedError",
    "OutOfBoundsError",
    "PlacementError",
    "Position",
    "RegistryError",
    "Tank",
    "TankNotFoundError",
    "Team",
]
