"""Window, timing and board settings for the game."""

from isotd.geometry import Vec2

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
TARGET_FPS = 60

BOARD_ROWS = 5
BOARD_COLS = 5
TILE_SIZE_PX = 100

SCREEN_DIM = Vec2(SCREEN_WIDTH, SCREEN_HEIGHT)  # px
GRID_DIM = (BOARD_ROWS, BOARD_COLS)  # cells