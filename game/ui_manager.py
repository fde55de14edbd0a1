"""
UI Manager - handles all UI rendering (HUD, menus, screens)
"""

import pygame
from utils.colors import (
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM, COLOR_TEXT_ERROR,
    COLOR_TIME_FINAL, COLOR_PANEL_BG, COLOR_MENU_SELECTION, COLOR_MENU_BORDER,
    COLOR_MENU_OVERLAY
)
from utils.helpers import format_elapsed
from utils.constants import MIN_MAZE_SIZE, MAX_MAZE_SIZE
from game.input_map import HELP_TEXT


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self):
        # Fonts
        self.font_small = None
        self.font_medium = None
        self.font_large = None
        self.font_title = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_large = pygame.font.SysFont("consolas", 28, bold=True)
        self.font_title = pygame.font.SysFont("consolas", 48, bold=True)

    def draw_hud(self, screen, session, panel_y, screen_w, panel_h):
        """
        Draw HUD (Heads-Up Display)

        Args:
            screen: Pygame screen
            session: GameSession being played
            panel_y: Y position of panel
            screen_w: Screen width
            panel_h: Panel height
        """
        # Panel background
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))

        # Title line
        title = self.font_medium.render(f"MAZE: {session.rows}x{session.cols}", True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(title, (10, panel_y + 8))

        # Position and moves
        row, col = session.position
        info = self.font_small.render(
            f"Current Pos: ({row}, {col}) | Moves: {session.moves}", True, COLOR_TEXT
        )
        screen.blit(info, (10, panel_y + 34))

        # Timer (right side)
        self._draw_timer(screen, session, screen_w - 10, panel_y + 8)

        # Help line
        help_text = self.font_small.render(HELP_TEXT, True, COLOR_TEXT_DIM)
        screen.blit(help_text, (10, panel_y + panel_h - 22))

    def _draw_timer(self, screen, session, right, y):
        """Draw running time, frozen final time or a start hint"""
        if session.is_won:
            text = self.font_medium.render(f"Final Time: {format_elapsed(session.elapsed())}", True, COLOR_TIME_FINAL)
        elif session.timer.started:
            text = self.font_medium.render(f"Time: {format_elapsed(session.elapsed())}", True, COLOR_TEXT)
        else:
            text = self.font_medium.render("Time: --.--s (Start moving!)", True, COLOR_TEXT_DIM)
        text_rect = text.get_rect(topright=(right, y))
        screen.blit(text, text_rect)

    def draw_menu(self, screen, title, menu_items, selected_index, subtitle=None):
        """
        Draw a menu

        Args:
            screen: Pygame screen
            title: Menu title
            menu_items: List of menu item strings
            selected_index: Currently selected item index
            subtitle: Optional subtitle text
        """
        screen_w, screen_h = screen.get_size()

        # Title
        title_text = self.font_title.render(title, True, COLOR_TEXT_HIGHLIGHT)
        title_rect = title_text.get_rect(center=(screen_w // 2, 80))
        screen.blit(title_text, title_rect)

        # Subtitle
        if subtitle:
            subtitle_text = self.font_medium.render(subtitle, True, COLOR_TEXT)
            subtitle_rect = subtitle_text.get_rect(center=(screen_w // 2, 130))
            screen.blit(subtitle_text, subtitle_rect)

        # Menu items
        start_y = 200
        gap = 50

        for i, item in enumerate(menu_items):
            is_selected = i == selected_index
            color = COLOR_MENU_SELECTION if is_selected else COLOR_TEXT

            text = self.font_large.render(item, True, color)
            text_rect = text.get_rect(center=(screen_w // 2, start_y + i * gap))

            # Selection border
            if is_selected:
                border_rect = text_rect.inflate(40, 20)
                pygame.draw.rect(screen, COLOR_MENU_BORDER, border_rect, 3, border_radius=8)

            screen.blit(text, text_rect)

        # Help text at bottom
        text = self.font_small.render("UP/DOWN: Navigate | ENTER: Select | ESC: Back/Quit", True, COLOR_TEXT_DIM)
        text_rect = text.get_rect(center=(screen_w // 2, screen_h - 60))
        screen.blit(text, text_rect)

    def draw_size_prompt(self, screen, size_input, error=None):
        """Draw the maze size prompt with the digits typed so far"""
        screen_w, screen_h = screen.get_size()

        title = self.font_large.render("NEW MAZE", True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(title, title.get_rect(center=(screen_w // 2, 100)))

        prompt = self.font_medium.render(
            f"Enter the maze size (N for NxN, min {MIN_MAZE_SIZE}, max {MAX_MAZE_SIZE}):", True, COLOR_TEXT
        )
        screen.blit(prompt, prompt.get_rect(center=(screen_w // 2, 170)))

        value = self.font_title.render(size_input + "_", True, COLOR_MENU_SELECTION)
        value_rect = value.get_rect(center=(screen_w // 2, 250))
        pygame.draw.rect(screen, COLOR_MENU_BORDER, value_rect.inflate(60, 20), 3, border_radius=8)
        screen.blit(value, value_rect)

        if error:
            err = self.font_small.render(error, True, COLOR_TEXT_ERROR)
            screen.blit(err, err.get_rect(center=(screen_w // 2, 320)))

        hint = self.font_small.render("Even sizes are rounded up to odd | ENTER: Generate | ESC: Back", True, COLOR_TEXT_DIM)
        screen.blit(hint, hint.get_rect(center=(screen_w // 2, screen_h - 60)))

    def draw_generating(self, screen, size):
        """Draw generation banner over the board"""
        screen_w, screen_h = screen.get_size()

        text = self.font_large.render(f"Generating {size}x{size} maze...", True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(text, text.get_rect(center=(screen_w // 2, screen_h // 2)))

        hint = self.font_medium.render("Press SPACE to skip", True, COLOR_TEXT)
        screen.blit(hint, hint.get_rect(center=(screen_w // 2, screen_h // 2 + 40)))

    def draw_win(self, screen, elapsed, moves, shortest, menu_items, selected_index):
        """Draw win overlay with the post-game menu"""
        screen_w, screen_h = screen.get_size()

        # Semi-transparent overlay
        overlay = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        overlay.fill(COLOR_MENU_OVERLAY)
        screen.blit(overlay, (0, 0))

        title = self.font_large.render("YOU REACHED THE END!", True, COLOR_TIME_FINAL)
        screen.blit(title, title.get_rect(center=(screen_w // 2, screen_h // 2 - 110)))

        stats = [
            f"Final Time: {format_elapsed(elapsed)}",
            f"Moves: {moves} (shortest route: {shortest})",
        ]
        for i, stat in enumerate(stats):
            text = self.font_medium.render(stat, True, COLOR_TEXT)
            screen.blit(text, text.get_rect(center=(screen_w // 2, screen_h // 2 - 60 + i * 26)))

        start_y = screen_h // 2 + 20
        for i, item in enumerate(menu_items):
            color = COLOR_MENU_SELECTION if i == selected_index else COLOR_TEXT
            text = self.font_medium.render(item, True, color)
            text_rect = text.get_rect(center=(screen_w // 2, start_y + i * 34))
            if i == selected_index:
                pygame.draw.rect(screen, COLOR_MENU_BORDER, text_rect.inflate(30, 12), 2, border_radius=6)
            screen.blit(text, text_rect)
