"""Built-in hexadecimal glyph set (digits 0-F, 4x5 pixels each)."""

from __future__ import annotations

from typing import List, Tuple

from ..constants import FONT_BASE

GLYPH_HEIGHT = 5  # one byte per row, upper nibble holds the pixels
GLYPH_WIDTH = 4
GLYPH_COUNT = 16

GLYPHS: Tuple[Tuple[int, ...], ...] = (
    (0xF0, 0x90, 0x90, 0x90, 0xF0),  # 0
    (0x20, 0x60, 0x20, 0x20, 0x70),  # 1
    (0xF0, 0x10, 0xF0, 0x80, 0xF0),  # 2
    (0xF0, 0x10, 0xF0, 0x10, 0xF0),  # 3
    (0x90, 0x90, 0xF0, 0x10, 0x10),  # 4
    (0xF0, 0x80, 0xF0, 0x10, 0xF0),  # 5
    (0xF0, 0x80, 0xF0, 0x90, 0xF0),  # 6
    (0xF0, 0x10, 0x20, 0x40, 0x40),  # 7
    (0xF0, 0x90, 0xF0, 0x90, 0xF0),  # 8
    (0xF0, 0x90, 0xF0, 0x10, 0xF0),  # 9
    (0xF0, 0x90, 0xF0, 0x90, 0x90),  # A
    (0xE0, 0x90, 0xE0, 0x90, 0xE0),  # B
    (0xF0, 0x80, 0x80, 0x80, 0xF0),  # C
    (0xE0, 0x90, 0x90, 0x90, 0xE0),  # D
    (0xF0, 0x80, 0xF0, 0x80, 0xF0),  # E
    (0xF0, 0x80, 0xF0, 0x80, 0x80),  # F
)


def font_bytes() -> bytes:
    """Return the glyph set laid out as it is stored in memory."""
    return bytes(row for glyph in GLYPHS for row in glyph)


def glyph_address(digit: int, base: int = FONT_BASE) -> int:
    """Return the memory address of the glyph for a hex digit (low nibble)."""
    return base + (digit & 0xF) * GLYPH_HEIGHT


def glyph_bitmap(digit: int) -> List[List[int]]:
    """Decode a glyph into a 2D bitmap (1 = pixel on)."""
    if not 0 <= digit < GLYPH_COUNT:
        raise ValueError(f"Glyph index out of range: {digit}")
    bitmap: List[List[int]] = []
    for row in GLYPHS[digit]:
        bitmap.append([(row >> (7 - col)) & 1 for col in range(GLYPH_WIDTH)])
    return bitmap
