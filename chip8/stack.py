"""Fixed-depth return-address stack used by CALL/RET."""

from __future__ import annotations

from typing import List, Tuple

from .constants import STACK_DEPTH, WORD_MASK
from .errors import StackOverflow, StackUnderflow


class Stack:
    """LIFO store of 16-bit return addresses.

    ``pointer`` always equals the number of pushed entries, so it ranges
    over [0, depth].
    """

    def __init__(self, depth: int = STACK_DEPTH):
        self.depth = depth
        self._slots: List[int] = [0] * depth
        self._pointer = 0

    @property
    def pointer(self) -> int:
        return self._pointer

    def __len__(self) -> int:
        return self._pointer

    def push(self, value: int) -> None:
        if self._pointer >= self.depth:
            raise StackOverflow(self._pointer)
        self._slots[self._pointer] = value & WORD_MASK
        self._pointer += 1

    def pop(self) -> int:
        if self._pointer == 0:
            raise StackUnderflow()
        self._pointer -= 1
        return self._slots[self._pointer]

    def peek(self) -> int:
        if self._pointer == 0:
            raise StackUnderflow()
        return self._slots[self._pointer - 1]

    def entries(self) -> Tuple[int, ...]:
        """Return pushed addresses, bottom of the stack first."""
        return tuple(self._slots[: self._pointer])


__all__ = ["Stack"]
