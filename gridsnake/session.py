from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List, Optional

from gridsnake import rules
from gridsnake.config import GameConfig
from gridsnake.geometry import Direction
from gridsnake.spawn import RandomSource
from gridsnake.state import GameState, GameStatus, new_game

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: Dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}

Listener = Callable[[GameState], None]


class GameSession:
    """Owns the single GameState and serializes every change to it.

    The interval driver calls :meth:`on_tick`, input handlers call
    :meth:`on_direction_key`. Both go through one lock, so neither ever sees
    a half-applied update. Listeners are notified while the lock is held, so
    they see states in the order they were produced; the lock is reentrant,
    so a listener may call back into the session.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []
        self._state = new_game(self.config, rng=self.rng)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state.status is GameStatus.PLAYING

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> GameState:
        with self._lock:
            state = self._state = rules.start(self.config, self.rng)
            logger.info("Game started on a %dx%d board", state.board_size, state.board_size)
            self._publish(state)
        return state

    def on_tick(self) -> GameState:
        with self._lock:
            previous = self._state
            state = self._state = rules.tick(previous, self.config, self.rng)
            if state is previous:
                return state
            if state.status.terminal:
                logger.info("Game ended: %s with score %d", state.status.value, state.score)
            self._publish(state)
        return state

    def request_direction(self, direction: Direction) -> GameState:
        with self._lock:
            previous = self._state
            state = self._state = rules.request_direction(previous, direction)
            if state is previous:
                logger.debug("Ignored direction %s (status=%s)", direction.name, state.status.value)
                return state
            self._publish(state)
        return state

    def on_direction_key(self, key: str) -> GameState:
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return self._state
        return self.request_direction(direction)

    def _publish(self, state: GameState) -> None:
        for listener in list(self._listeners):
            listener(state)
