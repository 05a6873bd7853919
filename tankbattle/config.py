"""Configuration objects for a tank battle game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GameConfig:
    """Static configuration describing how a game is created.

    Attributes
    ----------
    board_length:
        Number of columns on the board.  Valid ``x`` coordinates run from
        ``0`` to ``board_length - 1``.
    board_height:
        Number of rows on the board.  The origin is the top-left cell, so
        ``y`` grows downwards.
    default_life:
        Health given to tanks spawned through the registry when the caller
        does not supply one.
    default_action_points:
        Action points given to spawned tanks.  Only stored; turn accounting
        lives outside the movement engine.
    default_range:
        Attack radius given to spawned tanks.
    max_life:
        Upper bound for tank health.
    move_log_size:
        Number of recent moves kept in the game's move log.  ``None`` keeps
        every move.
    """

    board_length: int = 8
    board_height: int = 8
    default_life: int = 3
    default_action_points: int = 1
    default_range: int = 2
    max_life: int = 255
    move_log_size: Optional[int] = 500

    def validate(self) -> None:
        if self.board_length <= 0 or self.board_height <= 0:
            raise ValueError("Board dimensions must be positive")
        if self.default_life < 0 or self.default_action_points < 0 or self.default_range < 0:
            raise ValueError("Tank defaults cannot be negative")
        if self.default_life > self.max_life:
            raise ValueError("default_life cannot exceed max_life")
        if self.move_log_size is not None and self.move_log_size <= 0:
            raise ValueError("move_log_size must be positive")
