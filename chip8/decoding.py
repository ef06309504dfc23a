"""Instruction word decoding.

Every CHIP-8 instruction is a big-endian 16-bit word. The operand fields
overlap, so all of them are extracted once and the dispatcher picks the ones
the instruction class needs::

    op   x    y    n
    ---- ---- ---- ----
              kk-------
         nnn------------
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import ADDRESS_MASK, WORD_MASK


@dataclass(frozen=True, slots=True)
class Instruction:
    word: int
    op: int  # instruction class (high nibble)
    x: int
    y: int
    n: int
    kk: int
    nnn: int

    def __post_init__(self) -> None:
        if not 0 <= self.word <= WORD_MASK:
            raise ValueError(f"Instruction word out of range: {self.word:#x}")

    def __str__(self) -> str:
        return f"{self.word:04X}"


def combine(high: int, low: int) -> int:
    """Join two bytes into a big-endian word."""
    return ((high & 0xFF) << 8) | (low & 0xFF)


def decode(word: int) -> Instruction:
    return Instruction(
        word=word,
        op=(word >> 12) & 0xF,
        x=(word >> 8) & 0xF,
        y=(word >> 4) & 0xF,
        n=word & 0xF,
        kk=word & 0xFF,
        nnn=word & ADDRESS_MASK,
    )


__all__ = ["Instruction", "combine", "decode"]
