"""Board geometry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .config import GameConfig
from .entities import Position


@dataclass(frozen=True)
class Board:
    """Rectangular extent bounding every valid position.

    The board owns no tanks; it only answers whether a coordinate lies
    inside ``[0, length) x [0, height)``.
    """

    length: int
    height: int

    def __post_init__(self) -> None:
        if self.length <= 0 or self.height <= 0:
            raise ValueError("Board dimensions must be positive")

    @classmethod
    def from_config(cls, config: GameConfig) -> "Board":
        return cls(config.board_length, config.board_height)

    def contains(self, position: Position) -> bool:
        return 0 <= position.x < self.length and 0 <= position.y < self.height

    def to_dict(self) -> Dict[str, int]:
        return {"length": self.length, "height": self.height}
