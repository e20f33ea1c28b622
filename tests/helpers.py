from __future__ import annotations

from typing import Optional, Sequence, Tuple

from gridsnake.geometry import Direction, Position
from gridsnake.state import GameState, GameStatus


class PickCell:
    """Random source that always picks ``target`` (must be among the choices)."""

    def __init__(self, target: Tuple[int, int]) -> None:
        self.target = Position(*target)
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        assert self.target in seq
        return self.target


class PickIndex:
    def __init__(self, index: int) -> None:
        self.index = index

    def choice(self, seq):
        return seq[self.index]


def make_state(
    snake: Sequence[Tuple[int, int]],
    direction: Direction = Direction.RIGHT,
    food: Tuple[int, int] = (0, 0),
    board_size: int = 20,
    score: int = 0,
    status: GameStatus = GameStatus.PLAYING,
    next_direction: Optional[Direction] = None,
) -> GameState:
    return GameState(
        snake=tuple(Position(*p) for p in snake),
        direction=direction,
        next_direction=next_direction,
        food=Position(*food),
        score=score,
        status=status,
        board_size=board_size,
    )
