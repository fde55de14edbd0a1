"""
Board renderer - draws the block maze once and repaints only changed cells
"""

import pygame

from maze.grid import Cell
from utils.colors import (
    COLOR_WALL, COLOR_PATH, COLOR_START, COLOR_END, COLOR_PLAYER,
    COLOR_GEN_HEAD, COLOR_WIN_PATH
)

CELL_COLORS = {
    Cell.WALL: COLOR_WALL,
    Cell.PATH: COLOR_PATH,
    Cell.START: COLOR_START,
    Cell.END: COLOR_END,
}


class BoardRenderer:
    """
    Keeps a cached surface of the whole maze.

    draw_full() paints every cell and is needed once per maze.
    update_player() repaints just the previous and current player cells,
    which is all a move changes.
    """
    def __init__(self, cell_size):
        self.cell_size = cell_size
        self.surface = None
        self.grid = None

    def cell_rect(self, row, col):
        s = self.cell_size
        return pygame.Rect(col * s, row * s, s, s)

    def _paint_cell(self, row, col):
        pygame.draw.rect(self.surface, CELL_COLORS[self.grid.get(row, col)], self.cell_rect(row, col))

    def _paint_player(self, row, col, pad=2):
        rect = self.cell_rect(row, col).inflate(-pad * 2, -pad * 2)
        pygame.draw.rect(self.surface, COLOR_PLAYER, rect, border_radius=max(2, self.cell_size // 4))

    def draw_full(self, grid, player=None):
        """
        Paint the whole grid onto a fresh surface

        Args:
            grid: MazeGrid to draw
            player: Optional (row, col) of the player
        """
        self.grid = grid
        self.surface = pygame.Surface((grid.cols * self.cell_size, grid.rows * self.cell_size), 0, 32)

        for row in range(grid.rows):
            for col in range(grid.cols):
                self._paint_cell(row, col)

        if player is not None:
            self._paint_player(*player)
        return self.surface

    def update_player(self, prev_pos, pos):
        """
        Restore the cell the player left and draw it on the new one

        Returns:
            List of board-space rects that changed
        """
        dirty = []
        if self.surface is None:
            return dirty

        if prev_pos != pos:
            self._paint_cell(*prev_pos)
            dirty.append(self.cell_rect(*prev_pos))

        self._paint_cell(*pos)
        self._paint_player(*pos)
        dirty.append(self.cell_rect(*pos))
        return dirty

    def draw_carving(self, grid, head=None):
        """Full repaint used while a maze is being carved"""
        self.draw_full(grid)
        if head is not None:
            pygame.draw.rect(self.surface, COLOR_GEN_HEAD, self.cell_rect(*head))
        return self.surface

    def draw_route(self, path, pad=None):
        """Overlay a route (list of cells) without covering Start/End"""
        if pad is None:
            pad = max(2, self.cell_size // 3)
        for row, col in path:
            if self.grid.get(row, col) is Cell.PATH:
                rect = self.cell_rect(row, col).inflate(-pad * 2, -pad * 2)
                pygame.draw.rect(self.surface, COLOR_WIN_PATH, rect)

    def blit(self, screen, origin):
        """Copy the cached board onto the screen at origin (x, y)"""
        if self.surface is not None:
            screen.blit(self.surface, origin)
