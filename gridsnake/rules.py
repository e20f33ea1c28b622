from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from gridsnake.config import GameConfig
from gridsnake.errors import BoardFullError
from gridsnake.geometry import Direction, in_bounds, is_opposite, next_position
from gridsnake.spawn import RandomSource, pick_empty_cell
from gridsnake.state import GameState, GameStatus, new_game

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = GameConfig()


def start(config: Optional[GameConfig] = None, rng: Optional[RandomSource] = None) -> GameState:
    """Fresh PLAYING state. Nothing is carried over from a previous game."""
    return new_game(config or _DEFAULT_CONFIG, status=GameStatus.PLAYING, rng=rng)


def request_direction(state: GameState, new_direction: Direction) -> GameState:
    if state.status is not GameStatus.PLAYING:
        return state

    # Checked against the pending intent, so two quick turns can't add up to a reversal.
    reference = state.next_direction or state.direction
    if is_opposite(reference, new_direction):
        return state

    return replace(state, next_direction=new_direction)


def tick(
    state: GameState,
    config: Optional[GameConfig] = None,
    rng: Optional[RandomSource] = None,
) -> GameState:
    if state.status is not GameStatus.PLAYING:
        return state
    config = config or _DEFAULT_CONFIG

    direction = state.next_direction or state.direction
    moved = replace(state, direction=direction, next_direction=None)

    new_head = next_position(state.head, direction)
    if not in_bounds(new_head, state.board_size):
        return replace(moved, status=GameStatus.GAME_OVER)

    ate_food = new_head == state.food

    # The tail vacates this tick unless the snake grows.
    body = state.snake if ate_food else state.snake[:-1]
    if new_head in body:
        return replace(moved, status=GameStatus.GAME_OVER)

    snake = (new_head,) + body
    if not ate_food:
        return replace(moved, snake=snake)

    score = state.score + config.points_per_food
    if score >= config.winning_score:
        return replace(moved, snake=snake, score=score, status=GameStatus.WON)

    try:
        food = pick_empty_cell(state.board_size, snake, rng)
    except BoardFullError:
        logger.debug("Board filled at score %d; no cell left for food", score)
        return replace(moved, snake=snake, score=score, status=GameStatus.WON)

    return replace(moved, snake=snake, score=score, food=food)
