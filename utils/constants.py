"""
Global constants for Maze Runner
"""

# Screen settings
CELL_SIZE = 18          # Largest cell size in pixels
MIN_CELL_SIZE = 8       # Smallest cell size (51x51 mazes)
MAX_BOARD_PX = 720      # Board never grows past this many pixels per side
FPS = 60

# HUD panel height
PANEL_H = 90

# Window size used for menus and the size prompt
MENU_W = 640
MENU_H = 480
MIN_WINDOW_WIDTH = 480

# Maze size limits (N for an NxN grid, checked before odd rounding)
MIN_MAZE_SIZE = 10
MAX_MAZE_SIZE = 50
SIZE_INPUT_MAX_DIGITS = 3

# Carving starts here; the exit sits in the opposite corner
START_ROW = 1
START_COL = 1

# Carving strides (dr, dc): two cells apart so a wall always separates corridors
CARVE_DIRS = [
    (-2, 0),    # up
    (2, 0),     # down
    (0, -2),    # left
    (0, 2),     # right
]

# Generation animation (carved cells per second)
GEN_SPEED = 600

# Keyboard repeat for held movement keys
KEY_REPEAT_DELAY_MS = 180
PLAYER_MOVE_COOLDOWN_MS = 70

# Text glyphs for grid dumps
WALL_CHAR = '#'
PATH_CHAR = ' '
START_CHAR = 'S'
END_CHAR = 'E'
PLAYER_CHAR = '@'
