"""
Configuration for the pygame window, slot grid, colours and text format codes.
"""

# --- Window ---
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
TARGET_FPS = 30
WINDOW_TITLE = "Item Bag"

# --- Colours ---
TEXT_COLOR = (255, 255, 255)  # White
BG_COLOR = (20, 20, 25)
SLOT_BG_COLOR = (40, 40, 50)
SLOT_BORDER_COLOR = (80, 80, 90)
SLOT_SELECTED_COLOR = (255, 215, 0)
QUANTITY_TEXT_COLOR = (255, 255, 255)
DETAIL_BG_COLOR = (30, 30, 35)
DETAIL_TEXT_COLOR = (200, 200, 200)

# --- Slot Grid ---
ICON_SIZE = 32
SLOT_SIZE = 48
SLOT_PADDING = 8
SLOT_COLUMNS = 5
GRID_ORIGIN = (20, 20)

# --- Fonts ---
FONT_NAME = "arial"
FONT_SIZE = 16
TITLE_FONT_SIZE = 20

# --- Text Format Codes ---
FORMAT_RED = "[[RED]]"
FORMAT_YELLOW = "[[YELLOW]]"
FORMAT_GREEN = "[[GREEN]]"
FORMAT_CYAN = "[[CYAN]]"
FORMAT_RESET = "[[/]]"

FORMAT_ERROR = FORMAT_RED
FORMAT_HIGHLIGHT = FORMAT_GREEN
FORMAT_CATEGORY = FORMAT_CYAN
