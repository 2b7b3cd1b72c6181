"""Game constants for the HACK*MATCH bot."""

from __future__ import annotations

# Board geometry

MAX_COLS = 7
MAX_ROWS = 9
LAST_COL = MAX_COLS - 1

# Group sizes that clear
FILE_MATCH_SIZE = 4
BOMB_MATCH_SIZE = 2

# Search / orchestration

MAX_SEARCH_TIME = 0.2            # seconds per search
IMBALANCE_THRESHOLD = 30.0       # rebalance directly at or above this
SCREEN_READ_FAIL_LIMIT = 25

KEY_DELAY_MILLIS = 17
KEY_DELAY = KEY_DELAY_MILLIS / 1000
# Time for a full pick/drop/swap animation to land on screen
BOARD_SOLVE_WAIT = (4 * KEY_DELAY_MILLIS + 3) / 1000

# Default game keys
KEYMAP: dict[str, str] = {
    "left": "a",
    "right": "d",
    "exchange": "j",
    "swap": "k",
}

# Screen layout (pixels, relative to a 1600x900 game window)

WINDOW_WIDTH = 1600
WINDOW_HEIGHT = 900
WINDOW_TITLE = "EXAPUNKS"
WINDOW_ACTIVATE_WAIT = 0.05

ITEM_SIZE = 60
BOARD_X_OFFSET = 367
BOARD_Y_OFFSET = 126
BOARD_PIXEL_WIDTH = MAX_COLS * ITEM_SIZE
BOARD_PIXEL_HEIGHT = 643
BOARD_PIXEL_HEIGHT_ITEMS = 526  # tiles never reach below this line

PIXEL_X_OFFSET = 21  # sample point inside a tile
PIXEL_FUZZ = 3       # max summed |dR|+|dG|+|dB| for two pixels to be "equal"
FILE_STRIP_LEN = 10

PHAGE_HELD_Y_OFFSET = 630
PHAGE_PINK_X_OFFSET = 392 - BOARD_X_OFFSET
PHAGE_PINK_Y_OFFSET = 741 - BOARD_Y_OFFSET
PHAGE_SILVER_X_OFFSET = 385 - BOARD_X_OFFSET
PHAGE_SILVER_Y_OFFSET = 694 - BOARD_Y_OFFSET

# RGB colours keyed by colour code (see tile.Color)
FILE_PIXELS: dict[str, tuple[int, int, int]] = {
    "y": (235, 163, 24),
    "c": (18, 186, 156),
    "r": (220, 22, 49),
    "p": (251, 22, 184),
    "b": (32, 57, 130),
}

BOMB_PIXELS: dict[str, tuple[int, int, int]] = {
    "y": (29, 27, 8),
    "c": (3, 39, 45),
    "r": (66, 9, 15),
    "p": (59, 2, 50),
    "b": (9, 5, 51),
}

# Strip under the cursor that is silver on every frame
PHAGE_SILVER_STRIP: list[tuple[int, int, int]] = [
    (228, 255, 255), (228, 255, 255), (229, 255, 255),
    (229, 255, 255), (229, 255, 255), (228, 255, 255),
]

# Strip that is only visible when the phage carries nothing
PHAGE_PINK_STRIP: list[tuple[int, int, int]] = [
    (178, 14, 122), (221, 8, 148), (222, 4, 149), (224, 0, 150),
    (224, 0, 150), (224, 0, 150), (224, 0, 150), (222, 4, 149),
]
