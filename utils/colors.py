"""
Color palette for Maze Runner
"""

# Background colors
COLOR_BG = (20, 22, 28)           # Main background
COLOR_MAZE_BG = (16, 18, 24)      # Maze area background
COLOR_PANEL_BG = (12, 14, 18)     # Panel background

# Cell colors
COLOR_WALL = (58, 58, 58)         # Wall blocks (dark gray)
COLOR_PATH = (16, 18, 24)         # Carved path
COLOR_START = (60, 200, 120)      # Start cell (green)
COLOR_END = (220, 70, 70)         # End cell (red)
COLOR_GEN_HEAD = (255, 220, 120)  # Cell being carved during generation

# UI colors
COLOR_TEXT = (210, 210, 210)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Highlighted text
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text
COLOR_TEXT_ERROR = (255, 100, 100)  # Validation messages
COLOR_TIME_FINAL = (100, 255, 150)  # Frozen time after a win

# Entity colors
COLOR_PLAYER = (255, 215, 0)      # Player (bright yellow)

# Path colors
COLOR_WIN_PATH = (255, 170, 90)   # Shortest route shown after a win

# Menu colors
COLOR_MENU_OVERLAY = (10, 12, 16, 200)     # Menu overlay (with alpha)
COLOR_MENU_SELECTION = (255, 220, 120)     # Selected menu item
COLOR_MENU_BORDER = (255, 220, 120)        # Selection border
