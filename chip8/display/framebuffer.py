"""Monochrome 64x32 framebuffer with XOR sprite compositing."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..constants import DISPLAY_HEIGHT, DISPLAY_WIDTH, SPRITE_WIDTH


class Framebuffer:
    """Pixel grid mutated by the interpreter and read by the host renderer.

    Pixels are stored as a ``(height, width)`` boolean array. Readers only
    ever receive copies, so a frame handed to the host cannot change under it.
    """

    def __init__(
        self,
        width: int = DISPLAY_WIDTH,
        height: int = DISPLAY_HEIGHT,
        *,
        clip_sprites: bool = False,
    ):
        self.width = width
        self.height = height
        self.clip_sprites = clip_sprites
        self._pixels = np.zeros((height, width), dtype=bool)

    def clear(self) -> None:
        """Turn every pixel off."""
        self._pixels.fill(False)

    def draw(self, x: int, y: int, rows: Sequence[int]) -> bool:
        """XOR an 8-pixel-wide sprite onto the grid.

        Each entry of ``rows`` is one sprite row, most significant bit on the
        left. The origin wraps to ``(x mod width, y mod height)``. Pixels past
        the right or bottom edge wrap around too, unless ``clip_sprites`` is
        set, in which case they are dropped.

        Returns:
            True if any previously lit pixel was turned off.
        """
        if not rows:
            return False

        origin_x = x % self.width
        origin_y = y % self.height
        bits = np.unpackbits(np.frombuffer(bytes(rows), dtype=np.uint8)).reshape(
            len(rows), SPRITE_WIDTH
        ).astype(bool)

        ys = origin_y + np.arange(len(rows))
        xs = origin_x + np.arange(SPRITE_WIDTH)
        if self.clip_sprites:
            keep_rows = ys < self.height
            keep_cols = xs < self.width
            bits = bits[np.ix_(keep_rows, keep_cols)]
            ys = ys[keep_rows]
            xs = xs[keep_cols]
        else:
            ys %= self.height
            xs %= self.width

        window = np.ix_(ys, xs)
        region = self._pixels[window]
        collision = bool(np.any(region & bits))
        self._pixels[window] = region ^ bits
        return collision

    def get_pixel(self, x: int, y: int) -> bool:
        if 0 <= x < self.width and 0 <= y < self.height:
            return bool(self._pixels[y, x])
        return False

    def set_pixel(self, x: int, y: int, value: bool) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels[y, x] = bool(value)

    def snapshot(self) -> np.ndarray:
        """Return a read-only, row-major copy of all pixels as a flat array."""
        flat = self._pixels.ravel().copy()
        flat.flags.writeable = False
        return flat

    def frame(self) -> np.ndarray:
        """Return a read-only ``(height, width)`` copy of the grid."""
        grid = self._pixels.copy()
        grid.flags.writeable = False
        return grid

    def lit_count(self) -> int:
        return int(np.count_nonzero(self._pixels))

    def to_bytes(self) -> bytes:
        """Pack the grid row-major, eight pixels per byte (MSB first)."""
        return np.packbits(self._pixels).tobytes()


__all__ = ["Framebuffer"]
