import random

from gridsnake.config import GameConfig
from gridsnake.geometry import Direction
from gridsnake.state import GameStatus, initial_snake, new_game


def test_initial_snake_is_centered_and_extends_left():
    assert initial_snake(20, 3) == [(10, 10), (9, 10), (8, 10)]
    assert initial_snake(5, 1) == [(2, 2)]


def test_initial_snake_slides_right_on_small_boards():
    snake = initial_snake(3, 3)
    assert snake == [(2, 1), (1, 1), (0, 1)]
    assert all(0 <= x < 3 for x, _ in snake)


def test_new_game_starts_not_started():
    state = new_game(GameConfig(), rng=random.Random(0))
    assert state.status is GameStatus.NOT_STARTED
    assert state.direction is Direction.RIGHT
    assert state.next_direction is None
    assert state.score == 0
    assert state.board_size == 20
    assert state.food not in state.snake


def test_new_game_food_never_on_snake():
    config = GameConfig(board_size=4, initial_snake_length=4)
    for seed in range(30):
        state = new_game(config, rng=random.Random(seed))
        assert state.food not in state.snake
        assert 0 <= state.food.x < 4 and 0 <= state.food.y < 4


def test_terminal_statuses():
    assert GameStatus.GAME_OVER.terminal
    assert GameStatus.WON.terminal
    assert not GameStatus.PLAYING.terminal
    assert not GameStatus.NOT_STARTED.terminal
