from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol, Sequence, TypeVar

from gridsnake.errors import BoardFullError
from gridsnake.geometry import Position, Vec2

T = TypeVar("T")


class RandomSource(Protocol):
    def choice(self, seq: Sequence[T]) -> T: ...


_default_random = random.Random()


def empty_cells(board_size: int, occupied: Iterable[Vec2]) -> List[Position]:
    taken = set(occupied)
    return [
        Position(x, y)
        for x in range(board_size)
        for y in range(board_size)
        if (x, y) not in taken
    ]


def pick_empty_cell(
    board_size: int,
    occupied: Iterable[Vec2],
    rng: Optional[RandomSource] = None,
) -> Position:
    """Return a uniformly random cell not in ``occupied``.

    The full grid is enumerated up front, so the call terminates no matter
    how crowded the board is. Raises :class:`BoardFullError` if no cell is
    free.
    """
    available = empty_cells(board_size, occupied)
    if not available:
        raise BoardFullError(f"no empty cell left on a {board_size}x{board_size} board")
    return (rng or _default_random).choice(available)
