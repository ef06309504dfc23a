"""Register file: V0-VF, index register, program counter and timers."""

from __future__ import annotations

from typing import List, Tuple

from .constants import (
    BYTE_MASK,
    FLAG_REGISTER,
    INSTRUCTION_SIZE,
    PROGRAM_START,
    REGISTER_COUNT,
    WORD_MASK,
)


class RegisterFile:
    """Architectural registers. All writes are masked to the register width."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._v: List[int] = [0] * REGISTER_COUNT
        self._i = 0
        self._pc = PROGRAM_START
        self._delay = 0
        self._sound = 0

    # General-purpose registers

    def get_v(self, index: int) -> int:
        return self._v[index & 0xF]

    def set_v(self, index: int, value: int) -> None:
        self._v[index & 0xF] = value & BYTE_MASK

    def set_flag(self, value: bool) -> None:
        self._v[FLAG_REGISTER] = 1 if value else 0

    @property
    def v(self) -> Tuple[int, ...]:
        return tuple(self._v)

    # Address registers

    @property
    def i(self) -> int:
        return self._i

    @i.setter
    def i(self, value: int) -> None:
        self._i = value & WORD_MASK

    @property
    def pc(self) -> int:
        return self._pc

    @pc.setter
    def pc(self, value: int) -> None:
        self._pc = value & WORD_MASK

    def advance(self, instructions: int = 1) -> None:
        self.pc = self._pc + INSTRUCTION_SIZE * instructions

    # Timers

    @property
    def delay(self) -> int:
        return self._delay

    @delay.setter
    def delay(self, value: int) -> None:
        self._delay = value & BYTE_MASK

    @property
    def sound(self) -> int:
        return self._sound

    @sound.setter
    def sound(self, value: int) -> None:
        self._sound = value & BYTE_MASK

    def tick_timers(self) -> None:
        """Decrement both timers by one, stopping at zero."""
        if self._delay > 0:
            self._delay -= 1
        if self._sound > 0:
            self._sound -= 1


__all__ = ["RegisterFile"]
