from __future__ import annotations

import argparse
import logging
import random

import pygame

from gridsnake.config import GameConfig
from gridsnake.grid import render_text, status_message
from gridsnake.render import Renderer
from gridsnake.session import GameSession

TICK_EVENT = pygame.USEREVENT + 1

PYGAME_KEYS = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}


def parse_args() -> argparse.Namespace:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Play Snake with the arrow keys")
    parser.add_argument("--board-size", type=int, default=defaults.board_size)
    parser.add_argument("--tick-ms", type=int, default=defaults.tick_interval_ms)
    parser.add_argument("--points", type=int, default=defaults.points_per_food)
    parser.add_argument("--winning-score", type=int, default=defaults.winning_score)
    parser.add_argument("--initial-length", type=int, default=defaults.initial_snake_length)
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size)
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args()


def build_config(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        board_size=args.board_size,
        tick_interval_ms=args.tick_ms,
        points_per_food=args.points,
        winning_score=args.winning_score,
        initial_snake_length=args.initial_length,
        cell_size=args.cell_size,
    )


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    config = build_config(args)
    session = GameSession(config, rng=random.Random(args.seed))
    renderer = Renderer(config.board_size, config.cell_size)

    last_status = session.state.status

    def arm_timer(state) -> None:
        # The interval only runs while a game is in progress; re-arming resets it.
        nonlocal last_status
        if state.status is last_status:
            return
        last_status = state.status
        pygame.time.set_timer(TICK_EVENT, config.tick_interval_ms if session.running else 0)

    session.subscribe(arm_timer)

    quit_requested = False
    while not quit_requested:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == TICK_EVENT:
                session.on_tick()
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    quit_requested = True
                elif event.key in (pygame.K_SPACE, pygame.K_RETURN) and not session.running:
                    session.start()
                elif event.key in PYGAME_KEYS:
                    session.on_direction_key(PYGAME_KEYS[event.key])

        state = session.state
        renderer.draw(state, status_message(state, config))
        pygame.time.wait(10)

    pygame.time.set_timer(TICK_EVENT, 0)
    renderer.close()
    print(render_text(session.state))
    print(f"Final score: {session.state.score}")


if __name__ == "__main__":
    main()
