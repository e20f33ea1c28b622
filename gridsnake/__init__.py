from __future__ import annotations

from gridsnake.config import GameConfig
from gridsnake.errors import BoardFullError, ConfigError, SnakeError
from gridsnake.geometry import Direction, Position, in_bounds, is_opposite, next_position
from gridsnake.rules import request_direction, start, tick
from gridsnake.session import KEY_DIRECTIONS, GameSession
from gridsnake.spawn import pick_empty_cell
from gridsnake.state import GameState, GameStatus, new_game

__all__ = [
    "BoardFullError",
    "ConfigError",
    "Direction",
    "GameConfig",
    "GameSession",
    "GameState",
    "GameStatus",
    "KEY_DIRECTIONS",
    "Position",
    "SnakeError",
    "in_bounds",
    "is_opposite",
    "new_game",
    "next_position",
    "pick_empty_cell",
    "request_direction",
    "start",
    "tick",
]
