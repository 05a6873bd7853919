"""Domain entities placed on the battle board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Team(str, Enum):
    """Side a tank fights for."""

    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"


class Direction(str, Enum):
    """Axis-aligned movement requests.

    The origin is the top-left cell, so ``UP`` decreases ``y``.
    """

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    def __str__(self) -> str:
        return self.value


_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.UP: (0, -1),
}


@dataclass(frozen=True)
class Position:
    """Immutable board coordinate."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x},{self.y}"

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


@dataclass
class Tank:
    """Mobile unit on the board.

    The constructor only stores what it is given; uniqueness of ``id`` and a
    legal starting ``position`` are enforced when the tank is registered with
    a :class:`~tankbattle.game.Game`.
    """

    life: int
    action_points: int
    team: Team
    range: int
    position: Position
    name: str
    id: int

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Tank id cannot be changed once assigned")
        super().__setattr__(name, value)

    def serialise(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "team": self.team.value,
            "life": self.life,
            "action_points": self.action_points,
            "range": self.range,
            "position": self.position.to_dict(),
        }
