"""Closed set of interpreter faults.

Every failure the core can report maps to exactly one ``ErrorKind`` so hosts
can branch on ``exc.kind`` instead of parsing messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Tag identifying the kind of a ``Chip8Error``."""

    ROM_TOO_LARGE = "rom_too_large"
    INVALID_ADDRESS = "invalid_address"
    INVALID_KEY = "invalid_key"
    STACK_OVERFLOW = "stack_overflow"
    STACK_UNDERFLOW = "stack_underflow"
    UNDEFINED_OPCODE = "undefined_opcode"


class Chip8Error(Exception):
    """Base class for all interpreter faults."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)


class RomTooLarge(Chip8Error):
    kind = ErrorKind.ROM_TOO_LARGE

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Program size {size} exceeds maximum {limit}")
        self.size = size
        self.limit = limit


class InvalidAddress(Chip8Error):
    kind = ErrorKind.INVALID_ADDRESS

    def __init__(self, address: int) -> None:
        super().__init__(f"Cannot access address 0x{address:X}")
        self.address = address


class InvalidKey(Chip8Error):
    kind = ErrorKind.INVALID_KEY

    def __init__(self, key: int) -> None:
        super().__init__(f"Cannot access key 0x{key:X}")
        self.key = key


class StackOverflow(Chip8Error):
    kind = ErrorKind.STACK_OVERFLOW

    def __init__(self, depth: int) -> None:
        super().__init__(f"Stack overflow: {depth} return addresses already pushed")
        self.depth = depth


class StackUnderflow(Chip8Error):
    kind = ErrorKind.STACK_UNDERFLOW

    def __init__(self) -> None:
        super().__init__("Stack underflow: tried to pop without pushing")


class UndefinedOpcode(Chip8Error):
    kind = ErrorKind.UNDEFINED_OPCODE

    def __init__(self, word: int, pc: Optional[int] = None) -> None:
        location = f" at 0x{pc:03X}" if pc is not None else ""
        super().__init__(f"Undefined opcode {word:04X}{location}")
        self.word = word
        self.pc = pc


__all__ = [
    "ErrorKind",
    "Chip8Error",
    "RomTooLarge",
    "InvalidAddress",
    "InvalidKey",
    "StackOverflow",
    "StackUnderflow",
    "UndefinedOpcode",
]
