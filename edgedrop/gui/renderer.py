"""BoardRenderer — rendu pygame du plateau, des lanceurs et du HUD.

Responsabilités:
- Dessiner la projection d'affichage (`display_board`) sur une surface dédiée
- Appliquer la rotation de la session comme transformation graphique
- Dessiner les 4N lanceurs du périmètre et mettre en évidence la prochaine pose
- Afficher score, rang, progression et multiplicateur

Conventions visuelles:
- Case vide = sombre, case occupée = bleu marine
- Lanceurs numérotés dans le sens horaire depuis le coin haut-gauche
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import pygame

from edgedrop.engine.perimeter import Edge, classify, lane_index

# Constantes écran
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

# Constantes plateau
BOARD_PIXELS = 320  # côté du plateau en pixels
SPAWNER_GAP = 8  # espace entre plateau et lanceurs

# Couleurs
COLOR_BG = (15, 15, 25)
COLOR_EMPTY = (0, 0, 0)
COLOR_TILE = (0, 0, 128)
COLOR_GRID_LINE = (60, 60, 80)
COLOR_SPAWNER = (70, 70, 90)
COLOR_SPAWNER_ACTIVE = (240, 200, 60)
COLOR_TEXT = (235, 235, 235)
COLOR_PROGRESS = (90, 180, 120)
COLOR_BOOST = (220, 120, 60)

Color = Tuple[int, int, int]


class BoardRenderer:
    """Rendu du plateau et du HUD."""

    def __init__(self, screen: pygame.Surface, size: int) -> None:
        """Initialize renderer for an NxN board.

        Args:
            screen: pygame surface to draw on
            size: board dimension N
        """
        self.screen = screen
        self.size = size
        self._font: Optional[pygame.font.Font] = None

    @property
    def cell_size(self) -> int:
        return BOARD_PIXELS // self.size

    @property
    def board_rect(self) -> pygame.Rect:
        side = self.cell_size * self.size
        rect = pygame.Rect(0, 0, side, side)
        rect.center = (self.screen.get_width() // 2, self.screen.get_height() // 2)
        return rect

    def spawner_rect(self, slot: int) -> pygame.Rect:
        """Rectangle écran du lanceur `slot` (repère logique de la session)."""

        cell = self.cell_size
        board = self.board_rect
        edge = classify(self.size, slot)
        lane = lane_index(self.size, slot)

        if edge is Edge.TOP:
            return pygame.Rect(board.left + lane * cell, board.top - cell - SPAWNER_GAP, cell, cell)
        if edge is Edge.BOTTOM:
            return pygame.Rect(board.left + lane * cell, board.bottom + SPAWNER_GAP, cell, cell)
        if edge is Edge.LEFT:
            return pygame.Rect(board.left - cell - SPAWNER_GAP, board.top + lane * cell, cell, cell)
        return pygame.Rect(board.right + SPAWNER_GAP, board.top + lane * cell, cell, cell)

    def _board_surface(self, display_board: Sequence[Sequence[int]]) -> pygame.Surface:
        cell = self.cell_size
        surface = pygame.Surface((cell * self.size, cell * self.size))
        for row_index, row in enumerate(display_board):
            for col_index, value in enumerate(row):
                rect = pygame.Rect(col_index * cell, row_index * cell, cell, cell)
                pygame.draw.rect(surface, COLOR_TILE if value else COLOR_EMPTY, rect)
                pygame.draw.rect(surface, COLOR_GRID_LINE, rect, width=1)
        return surface

    def render_board(self, display_board: Sequence[Sequence[int]], rotation: int) -> None:
        """Dessine la projection d'affichage tournée de `rotation` quarts de tour horaires."""

        surface = self._board_surface(display_board)
        # pygame tourne dans le sens anti-horaire pour un angle positif
        rotated = pygame.transform.rotate(surface, -90 * (rotation % 4))
        self.screen.blit(rotated, rotated.get_rect(center=self.board_rect.center))

    def render_spawners(self, active_slot: Optional[int]) -> None:
        for slot in range(4 * self.size):
            color = COLOR_SPAWNER_ACTIVE if slot == active_slot else COLOR_SPAWNER
            pygame.draw.rect(self.screen, color, self.spawner_rect(slot), border_radius=4)

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 28)
        return self._font

    def render_text(self, text: str, position: Tuple[int, int], color: Color = COLOR_TEXT) -> None:
        surf = self._get_font().render(text, True, color)
        self.screen.blit(surf, position)

    def render_progress(self, fraction: float, rect: pygame.Rect, color: Color = COLOR_PROGRESS) -> None:
        """Barre de progression horizontale remplie à `fraction` (0..1)."""

        fraction = max(0.0, min(1.0, fraction))
        pygame.draw.rect(self.screen, COLOR_GRID_LINE, rect, width=2)
        filled = pygame.Rect(rect.left, rect.top, int(rect.width * fraction), rect.height)
        pygame.draw.rect(self.screen, color, filled)


__all__ = [
    "BoardRenderer",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "BOARD_PIXELS",
    "COLOR_BG",
    "COLOR_BOOST",
]
