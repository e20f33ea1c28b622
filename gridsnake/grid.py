from __future__ import annotations

from enum import IntEnum
from typing import Optional

import numpy as np

from gridsnake.config import GameConfig
from gridsnake.state import GameState, GameStatus


class Cell(IntEnum):
    EMPTY = 0
    BODY = 1
    HEAD = 2
    FOOD = 3


CELL_CHARS = {
    Cell.EMPTY: ".",
    Cell.BODY: "o",
    Cell.HEAD: "@",
    Cell.FOOD: "*",
}


def to_grid(state: GameState) -> np.ndarray:
    """Board as an (N, N) int8 array indexed [y, x].

    Drawing order gives head > body > food > empty when cells overlap.
    """
    n = state.board_size
    grid = np.zeros((n, n), dtype=np.int8)

    fx, fy = state.food
    if 0 <= fx < n and 0 <= fy < n:
        grid[fy, fx] = Cell.FOOD

    for x, y in state.snake:
        if 0 <= x < n and 0 <= y < n:
            grid[y, x] = Cell.BODY

    hx, hy = state.head
    if 0 <= hx < n and 0 <= hy < n:
        grid[hy, hx] = Cell.HEAD

    return grid


def render_text(state: GameState) -> str:
    grid = to_grid(state)
    return "\n".join("".join(CELL_CHARS[Cell(int(v))] for v in row) for row in grid)


def status_message(state: GameState, config: Optional[GameConfig] = None) -> str:
    config = config or GameConfig()
    if state.status is GameStatus.NOT_STARTED:
        return "Press Start to begin"
    if state.status is GameStatus.PLAYING:
        return f"Score: {state.score} / {config.winning_score}"
    if state.status is GameStatus.GAME_OVER:
        return "Game Over! You hit a wall or yourself"
    return f"Congratulations! You won with {state.score} points!"


def control_hint(state: GameState) -> str:
    if state.status is GameStatus.NOT_STARTED:
        return "SPACE to start"
    if state.status.terminal:
        return "SPACE to play again"
    return ""
