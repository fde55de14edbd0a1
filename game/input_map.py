"""
Keyboard bindings - pygame key codes to movement and control intents
"""

import pygame

from game.moves import Direction, Control


KEY_BINDINGS = {
    # Movement: WASD and arrows
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,

    # Controls
    pygame.K_r: Control.RESET,
    pygame.K_n: Control.NEW_MAZE,
    pygame.K_q: Control.QUIT,
    pygame.K_ESCAPE: Control.QUIT,
}

HELP_TEXT = "WASD/Arrows: Move | R: Reset | N: New maze | Q/ESC: Quit"


def key_to_intent(key):
    """Direction or Control bound to `key`, None if unbound"""
    return KEY_BINDINGS.get(key)
