from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Tuple

Vec2 = Tuple[int, int]


class Position(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Vec2:
        return self.value


def add_pos(a: Vec2, b: Vec2) -> Position:
    return Position(a[0] + b[0], a[1] + b[1])


def next_position(pos: Vec2, direction: Direction) -> Position:
    # No wraparound: leaving the board is reported by in_bounds.
    return add_pos(pos, direction.delta)


def in_bounds(pos: Vec2, board_size: int) -> bool:
    x, y = pos
    return 0 <= x < board_size and 0 <= y < board_size


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.value[0] == -b.value[0] and a.value[1] == -b.value[1]
