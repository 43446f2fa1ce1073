from __future__ import annotations

from typing import Optional, Tuple

import pygame

from falling_blocks.game import COLORS, GameSnapshot, Phase, TetrominoType

BACKGROUND = (20, 20, 20)
GRID_LINE = (50, 50, 50)
WHITE = (255, 255, 255)
TITLE_COLOR = COLORS[TetrominoType.T]


def _color_for_value(v: int) -> Tuple[int, int, int]:
    # Board cells store piece type + 1
    if v <= 0:
        return BACKGROUND
    return COLORS[TetrominoType(v - 1)]


class Renderer:
    def __init__(self, width: int, height: int, cell_size: int = 30, margin_x: int = 50, margin_y: int = 20) -> None:
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.margin_x = margin_x
        self.margin_y = margin_y
        self.title_font: Optional[pygame.font.Font] = None
        self.body_font: Optional[pygame.font.Font] = None

    @property
    def window_size(self) -> Tuple[int, int]:
        w = self.width * self.cell_size + self.margin_x * 2
        h = self.height * self.cell_size + self.margin_y * 2 + 30
        return w, h

    def load_fonts(self) -> None:
        self.title_font = pygame.font.SysFont(None, 64)
        self.body_font = pygame.font.SysFont(None, 28)

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(
            x * self.cell_size + self.margin_x,
            y * self.cell_size + self.margin_y,
            self.cell_size - 2,
            self.cell_size - 2,
        )

    def _draw_text(self, screen: pygame.Surface, font: Optional[pygame.font.Font], text: str,
                   center: Tuple[int, int], color: Tuple[int, int, int]) -> None:
        if font is None:
            return
        img = font.render(text, True, color)
        screen.blit(img, img.get_rect(center=center))

    def draw_start_screen(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND)
        w, h = screen.get_size()
        self._draw_text(screen, self.title_font, "TETRIS", (w // 2, h // 3), TITLE_COLOR)
        self._draw_text(screen, self.body_font, "Press SPACE to Start", (w // 2, h // 2), WHITE)

    def draw_board(self, screen: pygame.Surface, snap: GameSnapshot) -> None:
        screen.fill(BACKGROUND)
        h, w = snap.board.shape
        for y in range(h):
            for x in range(w):
                v = int(snap.board[y, x])
                if v:
                    pygame.draw.rect(screen, _color_for_value(v), self._cell_rect(x, y))

        color = COLORS[snap.piece_kind]
        for i in range(snap.piece_shape.shape[0]):
            for j in range(snap.piece_shape.shape[1]):
                if snap.piece_shape[i, j]:
                    pygame.draw.rect(screen, color, self._cell_rect(snap.piece_x + j, snap.piece_y + i))

        right = w * self.cell_size + self.margin_x
        bottom = h * self.cell_size + self.margin_y
        for y in range(h + 1):
            py = y * self.cell_size + self.margin_y
            pygame.draw.line(screen, GRID_LINE, (self.margin_x, py), (right, py))
        for x in range(w + 1):
            px = x * self.cell_size + self.margin_x
            pygame.draw.line(screen, GRID_LINE, (px, self.margin_y), (px, bottom))

        score_line = f"Score: {snap.score}   High: {snap.high_score}"
        self._draw_text(screen, self.body_font, score_line, (screen.get_width() // 2, bottom + 18), WHITE)
        if snap.phase == Phase.GAME_OVER:
            self._draw_text(screen, self.body_font, "GAME OVER - SPACE to restart",
                            (screen.get_width() // 2, bottom // 2), WHITE)

    def draw(self, screen: pygame.Surface, snap: GameSnapshot) -> None:
        if snap.phase == Phase.NOT_STARTED:
            self.draw_start_screen(screen)
        else:
            self.draw_board(screen, snap)
        pygame.display.set_caption(window_title(snap))
        pygame.display.flip()


def window_title(snap: GameSnapshot) -> str:
    if snap.phase == Phase.NOT_STARTED:
        return "Tetris - Press SPACE to Start"
    if snap.phase == Phase.GAME_OVER:
        return f"GAME OVER - Score: {snap.score} | High: {snap.high_score} (SPACE to restart)"
    return f"Tetris - Score: {snap.score} | High Score: {snap.high_score}"
