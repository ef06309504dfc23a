"""Flat 4 KB RAM for the CHIP-8 interpreter."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .constants import BYTE_MASK, MEMORY_SIZE, PROGRAM_START
from .errors import InvalidAddress, RomTooLarge

logger = logging.getLogger(__name__)


class Memory:
    """Byte-addressable RAM with bounds-checked accessors."""

    def __init__(self, size: int = MEMORY_SIZE):
        self.size = size
        self.data = bytearray(size)

    def contains(self, address: int) -> bool:
        """Check if address is inside the address space."""
        return 0 <= address < self.size

    def load(self, program: bytes) -> None:
        """Copy a program image to PROGRAM_START.

        Raises ``RomTooLarge`` when the image does not fit in the space above
        the reserved interpreter area. Bytes past the image stay zero.
        """
        limit = self.size - PROGRAM_START
        if len(program) > limit:
            raise RomTooLarge(len(program), limit)

        self.data[PROGRAM_START : PROGRAM_START + len(program)] = program
        logger.debug("Loaded %d-byte program at 0x%03X", len(program), PROGRAM_START)

    def load_font(self, glyphs: Iterable[int], base: int) -> None:
        """Write the built-in glyph set into the reserved area."""
        self.write_block(base, bytes(glyphs))

    def read(self, address: int) -> int:
        if not self.contains(address):
            raise InvalidAddress(address)
        return self.data[address]

    def write(self, address: int, value: int) -> None:
        if not self.contains(address):
            raise InvalidAddress(address)
        self.data[address] = value & BYTE_MASK

    def read_block(self, address: int, length: int) -> bytes:
        """Read ``length`` consecutive bytes starting at ``address``."""
        if length == 0:
            return b""
        self._check_range(address, length)
        return bytes(self.data[address : address + length])

    def write_block(self, address: int, values: Sequence[int]) -> None:
        """Write consecutive bytes; nothing is written if any byte is out of range."""
        if not values:
            return
        self._check_range(address, len(values))
        self.data[address : address + len(values)] = bytes(v & BYTE_MASK for v in values)

    def dump(self) -> bytes:
        """Return an immutable copy of the whole address space."""
        return bytes(self.data)

    def _check_range(self, address: int, length: int) -> None:
        if not self.contains(address):
            raise InvalidAddress(address)
        last = address + length - 1
        if not self.contains(last):
            raise InvalidAddress(last)


__all__ = ["Memory"]
