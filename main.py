"""
Maze Runner - generate a random perfect maze and race through it
"""

import sys

import pygame

from game.game_state import GameStateManager, GameState, GameFlow
from game.board_renderer import BoardRenderer
from game.ui_manager import UIManager
from game.input_map import key_to_intent
from game.moves import Control, Outcome
from utils.constants import (
    FPS, PANEL_H, CELL_SIZE, MENU_W, MENU_H, MIN_WINDOW_WIDTH, GEN_SPEED,
    KEY_REPEAT_DELAY_MS, PLAYER_MOVE_COOLDOWN_MS
)
from utils.colors import COLOR_BG, COLOR_MAZE_BG
from utils.helpers import board_cell_size
from config import GAME_TITLE, GAME_VERSION


class MazeGame:
    """
    Main game class
    """
    def __init__(self, seed=None):
        pygame.init()

        # Managers
        self.state_manager = GameStateManager()
        self.game_flow = GameFlow(self.state_manager, seed=seed)
        self.ui_manager = UIManager()
        self.board = BoardRenderer(CELL_SIZE)
        self._drawn_session = None

        # Screen (resized whenever a new maze starts)
        self.screen = None
        self.screen_w = MENU_W
        self.screen_h = MENU_H
        self.board_origin = (0, 0)
        self._create_screen(MENU_W, MENU_H)

        # Held movement keys repeat like terminal keystrokes
        pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, PLAYER_MOVE_COOLDOWN_MS)

        self.clock = pygame.time.Clock()
        self.running = True

        # Menu state
        self.menu_index = 0
        self.menu_items = ["Play Game", "Quit"]

        # Post-game menu state
        self.won_index = 0
        self.won_items = ["Play New Maze", "Back to Main Menu", "Quit Game"]

        # Generation state
        self.gen_speed = GEN_SPEED  # Cells per second
        self.gen_accum = 0.0

    def _create_screen(self, width, height):
        """Create or resize screen"""
        self.screen_w = width
        self.screen_h = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

    def _sync_screen(self):
        """Fit the window to the maze on screen, or to the menus"""
        grid = self.game_flow.grid

        if grid is None:
            size = (MENU_W, MENU_H)
        else:
            cell_size = board_cell_size(grid.cols)
            if cell_size != self.board.cell_size:
                self.board = BoardRenderer(cell_size)
                self._drawn_session = None
            board_w = grid.cols * cell_size
            board_h = grid.rows * cell_size
            size = (max(MIN_WINDOW_WIDTH, board_w), board_h + PANEL_H)
            self.board_origin = ((size[0] - board_w) // 2, 0)

        if size != (self.screen_w, self.screen_h):
            self._create_screen(*size)
            if grid is not None:
                print(f"Window {size[0]}x{size[1]} (cell size {self.board.cell_size})")

    # ----- Input -----

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

    def _handle_keydown(self, event):
        """Handle key press based on current state"""
        state = self.state_manager.current_state
        key = event.key

        if state == GameState.MENU:
            self._handle_menu_input(key)

        elif state == GameState.SIZE_PROMPT:
            self._handle_size_prompt_input(event)

        elif state == GameState.GENERATING:
            # Can skip generation with space
            if key == pygame.K_SPACE:
                self.game_flow.finish_generation()
            elif key == pygame.K_ESCAPE:
                self.game_flow.return_to_menu()

        elif state == GameState.PLAYING:
            self._handle_playing_input(key)

        elif state == GameState.WON:
            self._handle_won_input(key)

    def _handle_menu_input(self, key):
        """Handle menu input"""
        if key in (pygame.K_UP, pygame.K_w):
            self.menu_index = (self.menu_index - 1) % len(self.menu_items)
        elif key in (pygame.K_DOWN, pygame.K_s):
            self.menu_index = (self.menu_index + 1) % len(self.menu_items)
        elif key == pygame.K_RETURN:
            self._handle_menu_select()
        elif key == pygame.K_ESCAPE:
            self.running = False

    def _handle_menu_select(self):
        """Handle menu selection"""
        selected = self.menu_items[self.menu_index]

        if selected == "Play Game":
            self.game_flow.open_size_prompt()
        elif selected == "Quit":
            self.running = False

    def _handle_size_prompt_input(self, event):
        """Digits, backspace, enter and escape at the size prompt"""
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self._start_generation()
        elif event.key == pygame.K_BACKSPACE:
            self.game_flow.erase_size_char()
        elif event.key == pygame.K_ESCAPE:
            self.game_flow.return_to_menu()
        elif event.unicode:
            self.game_flow.type_size_char(event.unicode)

    def _start_generation(self):
        if self.game_flow.submit_size(animated=True):
            self.gen_accum = 0.0

    def _handle_playing_input(self, key):
        """Handle playing state input"""
        intent = key_to_intent(key)
        if intent is None:
            return

        session = self.game_flow.session
        outcome = self.game_flow.handle_intent(intent, animated=True)

        if outcome is Control.NEW_MAZE:
            self.gen_accum = 0.0
            return

        if outcome.kind is Outcome.QUIT_REQUESTED:
            print("Quit to main menu")
            return

        if outcome.moved or outcome.kind is Outcome.RESET_REQUESTED:
            self.board.update_player(session.prev_position, session.position)
            if outcome.kind is Outcome.WON:
                self.board.draw_route(self.game_flow.solution)
                self.won_index = 0

    def _handle_won_input(self, key):
        """Post-game menu"""
        if key in (pygame.K_UP, pygame.K_w):
            self.won_index = (self.won_index - 1) % len(self.won_items)
        elif key in (pygame.K_DOWN, pygame.K_s):
            self.won_index = (self.won_index + 1) % len(self.won_items)
        elif key == pygame.K_r:
            # Same maze again from the start
            session = self.game_flow.session
            self.game_flow.handle_intent(Control.RESET)
            self.board.draw_full(session.grid, session.position)
        elif key == pygame.K_RETURN:
            self._handle_won_select()
        elif key == pygame.K_ESCAPE:
            self.game_flow.return_to_menu()

    def _handle_won_select(self):
        selected = self.won_items[self.won_index]

        if selected == "Play New Maze":
            self.game_flow.choose_new_size()
        elif selected == "Back to Main Menu":
            self.game_flow.return_to_menu()
        elif selected == "Quit Game":
            self.running = False

    # ----- Update -----

    def update(self, dt):
        """Update game state"""
        if self.state_manager.is_state(GameState.GENERATING):
            self._update_generation(dt)

    def _update_generation(self, dt):
        """Advance maze carving"""
        self.gen_accum += dt * self.gen_speed
        steps = int(self.gen_accum)

        if steps > 0:
            self.gen_accum -= steps
            self.game_flow.step_generation(steps)

    # ----- Render -----

    def render(self):
        """Render current game state"""
        self._sync_screen()
        self.screen.fill(COLOR_BG)

        state = self.state_manager.current_state

        if state == GameState.MENU:
            self.ui_manager.draw_menu(
                self.screen,
                GAME_TITLE,
                self.menu_items,
                self.menu_index,
                subtitle=f"Version {GAME_VERSION}"
            )

        elif state == GameState.SIZE_PROMPT:
            self.ui_manager.draw_size_prompt(
                self.screen, self.game_flow.size_input, self.game_flow.size_error
            )

        elif state == GameState.GENERATING:
            self._render_generating()

        elif state == GameState.PLAYING:
            self._render_playing()

        elif state == GameState.WON:
            self._render_playing()
            data = self.state_manager.state_data
            self.ui_manager.draw_win(
                self.screen, data.get('time', 0.0), data.get('moves', 0),
                data.get('shortest', 0), self.won_items, self.won_index
            )

        pygame.display.flip()

    def _render_generating(self):
        """Render maze generation"""
        grid = self.game_flow.grid
        if grid is None:
            return

        self.board.draw_carving(grid, self.game_flow.gen_head)
        self.board.blit(self.screen, self.board_origin)
        self.ui_manager.draw_generating(self.screen, grid.rows)

    def _render_playing(self):
        """Render playing state"""
        session = self.game_flow.session
        if session is None:
            return

        # Full redraw only once per maze
        if self._drawn_session is not session:
            self.board.draw_full(session.grid, session.position)
            self._drawn_session = session

        maze_h = self.screen_h - PANEL_H
        pygame.draw.rect(self.screen, COLOR_MAZE_BG, (0, 0, self.screen_w, maze_h))
        self.board.blit(self.screen, self.board_origin)

        self.ui_manager.draw_hud(self.screen, session, maze_h, self.screen_w, PANEL_H)

    def run(self):
        """Main game loop"""
        while self.running:
            dt_ms = self.clock.tick(FPS)
            dt = dt_ms / 1000.0

            self.handle_events()
            self.update(dt)
            self.render()

        pygame.quit()
        print("Program finished. Goodbye!")
        sys.exit()


def main():
    """Entry point"""
    game = MazeGame()
    game.run()


if __name__ == "__main__":
    main()
