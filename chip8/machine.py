"""Host-facing CHIP-8 machine."""

from __future__ import annotations

import logging
import random
from typing import Optional, Tuple

import numpy as np

from .config import MachineConfig
from .interpreter import Interpreter, StepResult

logger = logging.getLogger(__name__)


class Machine:
    """Builds an interpreter from a program image and forwards stepping.

    The host drives everything: it calls ``step`` (or ``run_frame``) at its
    chosen instruction rate, ``tick_timers`` at the timer rate, reports key
    transitions through ``set_key`` and reads the display between steps.
    """

    def __init__(
        self,
        program: bytes,
        *,
        config: Optional[MachineConfig] = None,
        seed: Optional[int] = None,
    ):
        self.config = config if config is not None else MachineConfig()
        self._program = bytes(program)
        self._seed = seed
        self.interpreter = self._build_interpreter()

    def _build_interpreter(self) -> Interpreter:
        return Interpreter(
            self._program,
            quirks=self.config.quirks,
            rng=random.Random(self._seed),
        )

    def reset(self) -> None:
        """Restore the freshly constructed state for the loaded program."""
        self.interpreter = self._build_interpreter()
        logger.debug("Machine reset (%d-byte program)", len(self._program))

    # ------------------------------------------------------------------ #
    # Execution
    # ------------------------------------------------------------------ #

    def step(self) -> StepResult:
        return self.interpreter.step()

    def tick_timers(self) -> None:
        self.interpreter.tick_timers()

    def run_frame(self, cycles: Optional[int] = None) -> int:
        """Execute one timer period worth of instructions, then tick timers.

        Stops early while a key wait is pending. Returns the number of
        instructions that completed.
        """
        budget = self.config.cycles_per_frame if cycles is None else cycles
        executed = 0
        for _ in range(budget):
            if self.step() is StepResult.WAITING_FOR_KEY:
                break
            executed += 1
        self.tick_timers()
        return executed

    # ------------------------------------------------------------------ #
    # Host accessors
    # ------------------------------------------------------------------ #

    @property
    def display(self) -> np.ndarray:
        """Flat, row-major, read-only copy of the 2048 pixels."""
        return self.interpreter.display.snapshot()

    def frame(self) -> np.ndarray:
        """Read-only ``(32, 64)`` copy of the pixel grid."""
        return self.interpreter.display.frame()

    def set_key(self, key: int, pressed: bool) -> None:
        self.interpreter.keypad.set_key(key, pressed)

    def is_key_pressed(self, key: int) -> bool:
        return self.interpreter.keypad.is_pressed(key)

    @property
    def registers(self) -> Tuple[int, ...]:
        return self.interpreter.registers.v

    @property
    def index(self) -> int:
        return self.interpreter.registers.i

    @property
    def pc(self) -> int:
        return self.interpreter.registers.pc

    @property
    def sp(self) -> int:
        return self.interpreter.stack.pointer

    @property
    def delay_timer(self) -> int:
        return self.interpreter.registers.delay

    @property
    def sound_timer(self) -> int:
        return self.interpreter.registers.sound

    @property
    def sound_active(self) -> bool:
        """True while the sound timer is running (the host should beep)."""
        return self.interpreter.registers.sound > 0

    @property
    def waiting_for_key(self) -> bool:
        return self.interpreter.waiting_for_key


__all__ = ["Machine"]
