"""
Game configuration
"""

GAME_TITLE = "Maze Runner"
GAME_VERSION = "1.0.0"
