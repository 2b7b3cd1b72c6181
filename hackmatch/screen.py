"""Screen reader: pixel-signature board, cursor and held-tile detection."""

from __future__ import annotations

import logging

from hackmatch.board import Board, make_board
from hackmatch.constants import (
    BOARD_PIXEL_HEIGHT,
    BOARD_PIXEL_HEIGHT_ITEMS,
    BOARD_PIXEL_WIDTH,
    BOARD_X_OFFSET,
    BOARD_Y_OFFSET,
    BOMB_PIXELS,
    FILE_PIXELS,
    FILE_STRIP_LEN,
    ITEM_SIZE,
    MAX_COLS,
    MAX_ROWS,
    PHAGE_HELD_Y_OFFSET,
    PHAGE_PINK_STRIP,
    PHAGE_PINK_X_OFFSET,
    PHAGE_PINK_Y_OFFSET,
    PHAGE_SILVER_STRIP,
    PHAGE_SILVER_X_OFFSET,
    PHAGE_SILVER_Y_OFFSET,
    PIXEL_FUZZ,
    PIXEL_X_OFFSET,
)
from hackmatch.tile import EMPTY, UNKNOWN, Color, Tile

log = logging.getLogger("hackmatch")


class ScreenReader:
    """Reads the HACK*MATCH board from a screenshot using mss + numpy.

    The game window is expected at its native 1600x900 size with its
    top-left corner at (*window_left*, *window_top*) on screen.
    """

    def __init__(self, window_left: int = 0, window_top: int = 0):
        self.window_left = window_left
        self.window_top = window_top
        self.mss = self._try_import("mss")
        self.np = self._try_import("numpy")
        self.pil = self._try_import("PIL.Image", pip_name="Pillow")

        if self.np is not None:
            np = self.np
            self._file_pixels = {
                Color(code): np.array(rgb, dtype=np.int16) for code, rgb in FILE_PIXELS.items()
            }
            self._bomb_pixels = {
                Color(code): np.array(rgb, dtype=np.int16) for code, rgb in BOMB_PIXELS.items()
            }
            self._silver = np.array(PHAGE_SILVER_STRIP, dtype=np.int16)
            self._pink = np.array(PHAGE_PINK_STRIP, dtype=np.int16)

    @staticmethod
    def _try_import(name: str, pip_name: str | None = None):
        try:
            module = __import__(name)
            for part in name.split(".")[1:]:
                module = getattr(module, part)
            return module
        except ImportError:
            log.error("'%s' not installed.  Run: pip install %s", name, pip_name or name)
            return None

    @property
    def is_available(self) -> bool:
        return all(x is not None for x in (self.mss, self.np, self.pil))

    @property
    def region(self) -> dict[str, int]:
        return {
            "left": self.window_left + BOARD_X_OFFSET,
            "top": self.window_top + BOARD_Y_OFFSET,
            "width": BOARD_PIXEL_WIDTH,
            "height": BOARD_PIXEL_HEIGHT,
        }

    # capture

    def capture_screen(self):
        """Grab the board rectangle; returns a PIL Image."""
        if not self.mss or not self.pil:
            raise RuntimeError("mss / Pillow not available -- install with: pip install mss Pillow")
        with self.mss.mss() as sct:
            shot = sct.grab(self.region)
            return self.pil.frombytes("RGB", shot.size, shot.bgra, "raw", "BGRX")

    def capture(self) -> Board | None:
        """Screenshot and decode; None on a transient read failure."""
        return self.read_board_from_image(self.capture_screen())

    # read board from image

    def read_board_from_image(self, img) -> Board | None:
        """Decode a PIL Image (or RGB array) of the board rectangle."""
        if self.np is None:
            raise RuntimeError("numpy not available -- install with: pip install numpy")
        np = self.np
        if hasattr(img, "convert"):
            img = img.convert("RGB")
        data = np.asarray(img, dtype=np.int16)[:, :, :3]
        if data.shape[0] < BOARD_PIXEL_HEIGHT or data.shape[1] < BOARD_PIXEL_WIDTH:
            log.warning(
                "Image %dx%d is smaller than the board (%dx%d)",
                data.shape[1], data.shape[0], BOARD_PIXEL_WIDTH, BOARD_PIXEL_HEIGHT,
            )
            return None

        y_offset = self._find_y_offset(data)
        if y_offset is None:
            log.warning("Could not find board y offset")
            return None

        cells = [EMPTY] * (MAX_ROWS * MAX_COLS)
        for col in range(MAX_COLS):
            x = col * ITEM_SIZE + PIXEL_X_OFFSET
            for row in range(MAX_ROWS):
                tile = self._tile_at(data, x, row * ITEM_SIZE + y_offset)
                cells[row * MAX_COLS + col] = tile
                if tile.is_occupied:
                    # Gaps beneath a visible tile hold something we cannot read
                    for k in range(row - 1, -1, -1):
                        if cells[k * MAX_COLS + col].is_empty:
                            cells[k * MAX_COLS + col] = UNKNOWN

        cursor = self._find_phage_col(data)
        if cursor is None:
            log.warning("Could not find phage column")
            return None

        held = self._find_held(data, cursor)
        if held is None:
            log.warning("Could not read held item")
            return None

        return make_board(cursor, held, cells)

    # helpers

    def _pixel_matches(self, pixel, target) -> bool:
        return int(self.np.abs(pixel - target).sum()) < PIXEL_FUZZ

    def _strip_matches(self, data, x: int, y: int, strip) -> bool:
        """Compare a horizontal run of pixels starting at (x, y)."""
        if not (0 <= y < data.shape[0] and 0 <= x < data.shape[1]):
            return False
        run = data[y, x:x + len(strip)]
        diff = self.np.abs(run - strip[: len(run)]).sum(axis=1)
        return bool((diff < PIXEL_FUZZ).all())

    def _tile_at(self, data, x: int, y: int) -> Tile:
        if not (0 <= y < data.shape[0] and 0 <= x < data.shape[1]):
            return EMPTY
        pixel = data[y, x]
        for color, target in self._file_pixels.items():
            if self._pixel_matches(pixel, target):
                strip = self.np.tile(target, (FILE_STRIP_LEN, 1))
                if self._strip_matches(data, x, y, strip):
                    return Tile.file(color)
                return EMPTY
        for color, target in self._bomb_pixels.items():
            if self._pixel_matches(pixel, target):
                return Tile.bomb(color)
        return EMPTY

    def _find_y_offset(self, data) -> int | None:
        """Grid phase from the lowest tile on screen."""
        np = self.np
        xs = [col * ITEM_SIZE + PIXEL_X_OFFSET for col in range(MAX_COLS)]
        samples = data[:BOARD_PIXEL_HEIGHT_ITEMS, xs]
        hits = np.zeros(samples.shape[:2], dtype=bool)
        for target in (*self._file_pixels.values(), *self._bomb_pixels.values()):
            hits |= np.abs(samples - target).sum(axis=2) < PIXEL_FUZZ

        for y in np.flatnonzero(hits.any(axis=1))[::-1]:
            for col, x in enumerate(xs):
                if hits[y, col] and self._tile_at(data, x, int(y)).is_occupied:
                    return int(y) % ITEM_SIZE
        return None

    def _find_phage_col(self, data) -> int | None:
        for col in range(MAX_COLS):
            x = col * ITEM_SIZE + PHAGE_SILVER_X_OFFSET
            if self._strip_matches(data, x, PHAGE_SILVER_Y_OFFSET, self._silver):
                return col
        return None

    def _find_held(self, data, cursor: int) -> Tile | None:
        held = self._tile_at(data, cursor * ITEM_SIZE + PIXEL_X_OFFSET, PHAGE_HELD_Y_OFFSET)
        pink_x = cursor * ITEM_SIZE + PHAGE_PINK_X_OFFSET
        empty_handed = self._strip_matches(data, pink_x, PHAGE_PINK_Y_OFFSET, self._pink)
        if empty_handed == held.is_occupied:
            return None
        return held
