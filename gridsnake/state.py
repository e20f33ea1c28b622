from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from gridsnake.config import GameConfig
from gridsnake.geometry import Direction, Position
from gridsnake.spawn import RandomSource, pick_empty_cell


class GameStatus(Enum):
    NOT_STARTED = "NOT_STARTED"
    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"
    WON = "WON"

    @property
    def terminal(self) -> bool:
        return self in (GameStatus.GAME_OVER, GameStatus.WON)


@dataclass(frozen=True)
class GameState:
    snake: Tuple[Position, ...]  # head first
    direction: Direction
    next_direction: Optional[Direction]
    food: Position
    score: int
    status: GameStatus
    board_size: int

    @property
    def head(self) -> Position:
        return self.snake[0]


def initial_snake(board_size: int, length: int) -> List[Position]:
    """Horizontal snake with its head on the board center, body extending left."""
    center = board_size // 2
    positions = [Position(center - i, center) for i in range(length)]

    # Small boards: slide the body right so the tail stays on the board.
    if positions[-1].x < 0:
        tail_x = (board_size - length) // 2
        head_x = tail_x + length - 1
        positions = [Position(head_x - i, center) for i in range(length)]
    return positions


def new_game(
    config: GameConfig,
    status: GameStatus = GameStatus.NOT_STARTED,
    rng: Optional[RandomSource] = None,
) -> GameState:
    snake = initial_snake(config.board_size, config.initial_snake_length)
    return GameState(
        snake=tuple(snake),
        direction=Direction.RIGHT,
        next_direction=None,
        food=pick_empty_cell(config.board_size, snake, rng),
        score=0,
        status=status,
        board_size=config.board_size,
    )
