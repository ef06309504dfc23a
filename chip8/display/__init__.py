"""Display subsystem for the CHIP-8 interpreter."""

from .font import (
    GLYPH_COUNT,
    GLYPH_HEIGHT,
    GLYPHS,
    font_bytes,
    glyph_address,
    glyph_bitmap,
)
from .framebuffer import Framebuffer

__all__ = [
    "Framebuffer",
    "GLYPHS",
    "GLYPH_COUNT",
    "GLYPH_HEIGHT",
    "font_bytes",
    "glyph_address",
    "glyph_bitmap",
]
