from __future__ import annotations

from dataclasses import dataclass

from gridsnake.errors import ConfigError

DEFAULT_BOARD_SIZE = 20
TICK_INTERVAL_MS = 150
POINTS_PER_FOOD = 3
WINNING_SCORE = 30
INITIAL_SNAKE_LENGTH = 3
CELL_SIZE = 20


@dataclass(frozen=True)
class GameConfig:
    """Fixed game constants, overridable at construction."""

    board_size: int = DEFAULT_BOARD_SIZE
    tick_interval_ms: int = TICK_INTERVAL_MS
    points_per_food: int = POINTS_PER_FOOD
    winning_score: int = WINNING_SCORE
    initial_snake_length: int = INITIAL_SNAKE_LENGTH
    cell_size: int = CELL_SIZE

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.board_size < 1:
            raise ConfigError(f"board_size must be positive, got {self.board_size}")
        if self.initial_snake_length < 1:
            raise ConfigError(
                f"initial_snake_length must be positive, got {self.initial_snake_length}"
            )
        if self.board_size < self.initial_snake_length:
            raise ConfigError(
                f"board_size ({self.board_size}) is smaller than "
                f"initial_snake_length ({self.initial_snake_length})"
            )
        # The opening snake needs at least one free cell for the first food.
        if self.board_size * self.board_size <= self.initial_snake_length:
            raise ConfigError(f"a {self.board_size}x{self.board_size} board leaves no room for food")
        for name in ("tick_interval_ms", "points_per_food", "winning_score", "cell_size"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")
