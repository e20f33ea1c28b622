from __future__ import annotations

from typing import Dict, Tuple

import pygame

from gridsnake.grid import Cell, control_hint, to_grid
from gridsnake.state import GameState, GameStatus

Color = Tuple[int, int, int]

BACKGROUND: Color = (20, 20, 20)
GRID_LINE: Color = (30, 30, 30)
CELL_COLORS: Dict[Cell, Color] = {
    Cell.HEAD: (0, 200, 0),
    Cell.BODY: (0, 150, 0),
    Cell.FOOD: (50, 90, 220),
}
STATUS_COLORS: Dict[GameStatus, Color] = {
    GameStatus.NOT_STARTED: (200, 200, 200),
    GameStatus.PLAYING: (90, 160, 255),
    GameStatus.GAME_OVER: (220, 60, 60),
    GameStatus.WON: (60, 220, 90),
}
LINE_HEIGHT = 22
STATUS_BAR = 3 * LINE_HEIGHT + 8
TEXT: Color = (200, 200, 200)


class Renderer:
    def __init__(self, board_size: int, cell_size: int = 20, caption: str = "Snake") -> None:
        self.board_size = board_size
        self.cell_size = cell_size

        pygame.init()
        width_px = board_size * cell_size
        height_px = board_size * cell_size + STATUS_BAR
        self._window = pygame.display.set_mode((width_px, height_px))
        pygame.display.set_caption(caption)
        self._font = pygame.font.Font(None, 24)

    def draw(self, state: GameState, message: str = "") -> None:
        self._window.fill(BACKGROUND)
        grid = to_grid(state)

        for y in range(self.board_size):
            for x in range(self.board_size):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size,
                    self.cell_size,
                )
                color = CELL_COLORS.get(Cell(int(grid[y, x])))
                if color is not None:
                    pygame.draw.rect(self._window, color, rect)
                pygame.draw.rect(self._window, GRID_LINE, rect, 1)

        lines = [
            (f"Score: {state.score}", TEXT),
            (message, STATUS_COLORS[state.status]),
            (control_hint(state), TEXT),
        ]
        top = self.board_size * self.cell_size + 4
        for i, (line, color) in enumerate(lines):
            if line:
                self._window.blit(self._font.render(line, True, color), (8, top + i * LINE_HEIGHT))

        pygame.display.flip()

    def close(self) -> None:
        pygame.quit()
