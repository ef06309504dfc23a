"""Shared architecture constants for the CHIP-8 interpreter.

Addresses and sizes follow the COSMAC VIP reference layout: 4 KB of RAM
with programs loaded at 0x200 and the interpreter area below it.
"""

# Total addressable memory: 4 KB.
MEMORY_SIZE = 0x1000

# Programs are copied to this address and execution starts here.
PROGRAM_START = 0x200

# Largest program image that fits between PROGRAM_START and the end of RAM.
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START  # 3584 bytes

# Built-in hexadecimal glyphs live in the reserved area below PROGRAM_START.
FONT_BASE = 0x050

REGISTER_COUNT = 16
FLAG_REGISTER = 0xF

STACK_DEPTH = 16

KEY_COUNT = 16

DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32

# Sprites are always eight pixels wide; each byte is one row.
SPRITE_WIDTH = 8

INSTRUCTION_SIZE = 2

BYTE_MASK = 0xFF
WORD_MASK = 0xFFFF
ADDRESS_MASK = 0xFFF

__all__ = [
    "MEMORY_SIZE",
    "PROGRAM_START",
    "MAX_PROGRAM_SIZE",
    "FONT_BASE",
    "REGISTER_COUNT",
    "FLAG_REGISTER",
    "STACK_DEPTH",
    "KEY_COUNT",
    "DISPLAY_WIDTH",
    "DISPLAY_HEIGHT",
    "SPRITE_WIDTH",
    "INSTRUCTION_SIZE",
    "BYTE_MASK",
    "WORD_MASK",
    "ADDRESS_MASK",
]
