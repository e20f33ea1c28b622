import pytest

from gridsnake.config import GameConfig
from gridsnake.errors import ConfigError, SnakeError


def test_defaults():
    config = GameConfig()
    assert config.board_size == 20
    assert config.tick_interval_ms == 150
    assert config.points_per_food == 3
    assert config.winning_score == 30
    assert config.initial_snake_length == 3


def test_board_smaller_than_snake_is_rejected():
    with pytest.raises(ConfigError):
        GameConfig(board_size=2, initial_snake_length=3)


def test_board_without_room_for_food_is_rejected():
    with pytest.raises(ConfigError):
        GameConfig(board_size=1, initial_snake_length=1)


@pytest.mark.parametrize(
    "field",
    ["board_size", "tick_interval_ms", "points_per_food", "winning_score", "initial_snake_length", "cell_size"],
)
def test_non_positive_values_are_rejected(field):
    with pytest.raises(ConfigError):
        GameConfig(**{field: 0})


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        GameConfig(winning_score=-1)
    assert issubclass(ConfigError, SnakeError)
