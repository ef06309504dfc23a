"""Fetch/decode/execute engine for the CHIP-8 instruction set."""

from __future__ import annotations

from enum import Enum, auto
import logging
import random
from typing import Callable, Dict, Optional, Tuple, Union

from .config import QuirkConfig
from .constants import FONT_BASE, INSTRUCTION_SIZE
from .decoding import Instruction, combine, decode
from .display import Framebuffer, font_bytes, glyph_address
from .errors import UndefinedOpcode
from .keypad import Keypad
from .memory import Memory
from .registers import RegisterFile
from .stack import Stack

logger = logging.getLogger(__name__)

# A handler returns True when it has already set the program counter.
Handler = Callable[[Instruction], Optional[bool]]
FieldSelector = Callable[[Instruction], int]


class StepResult(Enum):
    """Outcome of a successful step."""

    EXECUTED = auto()
    WAITING_FOR_KEY = auto()


class Interpreter:
    """Owns the machine state and executes one instruction per ``step``."""

    def __init__(
        self,
        program: bytes,
        *,
        quirks: Optional[QuirkConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.quirks = quirks if quirks is not None else QuirkConfig()
        self.memory = Memory()
        self.memory.load_font(font_bytes(), FONT_BASE)
        self.memory.load(program)
        self.registers = RegisterFile()
        self.stack = Stack()
        self.display = Framebuffer(clip_sprites=self.quirks.clip_sprites)
        self.keypad = Keypad()
        self.rng = rng if rng is not None else random.Random()

        # Register index a pending Fx0A will store the key into.
        self.waiting_register: Optional[int] = None
        self.instruction_count = 0

        # Classes identified by the high nibble alone.
        self._opcodes: Dict[int, Handler] = {
            0x1: self._jump,
            0x2: self._call,
            0x3: self._skip_if_equal_imm,
            0x4: self._skip_if_not_equal_imm,
            0x6: self._load_imm,
            0x7: self._add_imm,
            0xA: self._set_index,
            0xB: self._jump_with_offset,
            0xC: self._randomize,
            0xD: self._draw,
        }

        # Classes that need a second field to pick the operation.
        self._groups: Dict[int, Tuple[FieldSelector, Dict[int, Handler]]] = {
            0x0: (
                lambda instr: instr.nnn,
                {
                    0x0E0: self._clear_screen,
                    0x0EE: self._return,
                },
            ),
            0x5: (lambda instr: instr.n, {0x0: self._skip_if_regs_equal}),
            0x8: (
                lambda instr: instr.n,
                {
                    0x0: self._copy,
                    0x1: self._or,
                    0x2: self._and,
                    0x3: self._xor,
                    0x4: self._add,
                    0x5: self._sub,
                    0x6: self._shift_right,
                    0x7: self._sub_reverse,
                    0xE: self._shift_left,
                },
            ),
            0x9: (lambda instr: instr.n, {0x0: self._skip_if_regs_not_equal}),
            0xE: (
                lambda instr: instr.kk,
                {
                    0x9E: self._skip_if_key_pressed,
                    0xA1: self._skip_if_key_not_pressed,
                },
            ),
            0xF: (
                lambda instr: instr.kk,
                {
                    0x07: self._read_delay_timer,
                    0x0A: self._wait_for_key,
                    0x15: self._set_delay_timer,
                    0x18: self._set_sound_timer,
                    0x1E: self._add_to_index,
                    0x29: self._sprite_address,
                    0x33: self._store_bcd,
                    0x55: self._store_registers,
                    0x65: self._load_registers,
                },
            ),
        }

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    @property
    def waiting_for_key(self) -> bool:
        return self.waiting_register is not None

    def fetch(self) -> int:
        """Read the big-endian instruction word at the program counter."""
        pc = self.registers.pc
        return combine(self.memory.read(pc), self.memory.read(pc + 1))

    def step(self) -> StepResult:
        """Execute one instruction, or poll a pending key wait."""
        if self.waiting_register is not None:
            return self._poll_key_wait()
        return self.execute(decode(self.fetch()))

    def execute(self, instruction: Union[Instruction, int]) -> StepResult:
        """Run a single decoded instruction against the current state.

        Raises ``UndefinedOpcode`` before touching any state when the word
        matches no entry of the instruction table.
        """
        if isinstance(instruction, int):
            instruction = decode(instruction)

        handler = self._resolve(instruction)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%03X: %s %s", self.registers.pc, instruction, handler.__name__
            )

        redirected = handler(instruction)
        self.instruction_count += 1

        if self.waiting_register is not None:
            return StepResult.WAITING_FOR_KEY
        if not redirected:
            self.registers.advance()
        return StepResult.EXECUTED

    def tick_timers(self) -> None:
        self.registers.tick_timers()

    # ------------------------------------------------------------------ #
    # Dispatch helpers
    # ------------------------------------------------------------------ #

    def _resolve(self, instr: Instruction) -> Handler:
        handler = self._opcodes.get(instr.op)
        if handler is not None:
            return handler

        group = self._groups.get(instr.op)
        if group is not None:
            selector, table = group
            handler = table.get(selector(instr))
            if handler is not None:
                return handler

        logger.debug("Undefined opcode %04X at 0x%03X", instr.word, self.registers.pc)
        raise UndefinedOpcode(instr.word, self.registers.pc)

    def _skip_if(self, condition: bool) -> bool:
        self.registers.advance(2 if condition else 1)
        return True

    def _poll_key_wait(self) -> StepResult:
        key = self.keypad.take_press()
        if key is None:
            return StepResult.WAITING_FOR_KEY

        register = self.waiting_register
        assert register is not None
        self.registers.set_v(register, key)
        self.waiting_register = None
        self.registers.advance()
        logger.debug("Key 0x%X stored in V%X", key, register)
        return StepResult.EXECUTED

    def _v(self, index: int) -> int:
        return self.registers.get_v(index)

    # ------------------------------------------------------------------ #
    # Flow control
    # ------------------------------------------------------------------ #

    def _clear_screen(self, instr: Instruction) -> None:
        self.display.clear()

    def _return(self, instr: Instruction) -> bool:
        self.registers.pc = self.stack.pop()
        return True

    def _jump(self, instr: Instruction) -> bool:
        self.registers.pc = instr.nnn
        return True

    def _call(self, instr: Instruction) -> bool:
        self.stack.push(self.registers.pc + INSTRUCTION_SIZE)
        self.registers.pc = instr.nnn
        return True

    def _jump_with_offset(self, instr: Instruction) -> bool:
        self.registers.pc = instr.nnn + self._v(0)
        return True

    def _skip_if_equal_imm(self, instr: Instruction) -> bool:
        return self._skip_if(self._v(instr.x) == instr.kk)

    def _skip_if_not_equal_imm(self, instr: Instruction) -> bool:
        return self._skip_if(self._v(instr.x) != instr.kk)

    def _skip_if_regs_equal(self, instr: Instruction) -> bool:
        return self._skip_if(self._v(instr.x) == self._v(instr.y))

    def _skip_if_regs_not_equal(self, instr: Instruction) -> bool:
        return self._skip_if(self._v(instr.x) != self._v(instr.y))

    # ------------------------------------------------------------------ #
    # Register arithmetic
    # ------------------------------------------------------------------ #

    def _load_imm(self, instr: Instruction) -> None:
        self.registers.set_v(instr.x, instr.kk)

    def _add_imm(self, instr: Instruction) -> None:
        self.registers.set_v(instr.x, self._v(instr.x) + instr.kk)

    def _copy(self, instr: Instruction) -> None:
        self.registers.set_v(instr.x, self._v(instr.y))

    def _logic(self, instr: Instruction, result: int) -> None:
        self.registers.set_v(instr.x, result)
        if self.quirks.logic_resets_vf:
            self.registers.set_flag(False)

    def _or(self, instr: Instruction) -> None:
        self._logic(instr, self._v(instr.x) | self._v(instr.y))

    def _and(self, instr: Instruction) -> None:
        self._logic(instr, self._v(instr.x) & self._v(instr.y))

    def _xor(self, instr: Instruction) -> None:
        self._logic(instr, self._v(instr.x) ^ self._v(instr.y))

    def _add(self, instr: Instruction) -> None:
        total = self._v(instr.x) + self._v(instr.y)
        self.registers.set_v(instr.x, total)
        self.registers.set_flag(total > 0xFF)

    def _sub(self, instr: Instruction) -> None:
        vx, vy = self._v(instr.x), self._v(instr.y)
        self.registers.set_v(instr.x, vx - vy)
        self.registers.set_flag(vx >= vy)

    def _sub_reverse(self, instr: Instruction) -> None:
        vx, vy = self._v(instr.x), self._v(instr.y)
        self.registers.set_v(instr.x, vy - vx)
        self.registers.set_flag(vy >= vx)

    def _shift_source(self, instr: Instruction) -> int:
        return self._v(instr.y) if self.quirks.shift_uses_vy else self._v(instr.x)

    def _shift_right(self, instr: Instruction) -> None:
        source = self._shift_source(instr)
        self.registers.set_v(instr.x, source >> 1)
        self.registers.set_flag(bool(source & 0x01))

    def _shift_left(self, instr: Instruction) -> None:
        source = self._shift_source(instr)
        self.registers.set_v(instr.x, source << 1)
        self.registers.set_flag(bool(source & 0x80))

    def _randomize(self, instr: Instruction) -> None:
        self.registers.set_v(instr.x, self.rng.getrandbits(8) & instr.kk)

    # ------------------------------------------------------------------ #
    # Index register, memory and display
    # ------------------------------------------------------------------ #

    def _set_index(self, instr: Instruction) -> None:
        self.registers.i = instr.nnn

    def _add_to_index(self, instr: Instruction) -> None:
        self.registers.i = self.registers.i + self._v(instr.x)

    def _sprite_address(self, instr: Instruction) -> None:
        self.registers.i = glyph_address(self._v(instr.x), FONT_BASE)

    def _draw(self, instr: Instruction) -> None:
        rows = self.memory.read_block(self.registers.i, instr.n)
        collision = self.display.draw(self._v(instr.x), self._v(instr.y), rows)
        self.registers.set_flag(collision)

    def _store_bcd(self, instr: Instruction) -> None:
        value = self._v(instr.x)
        self.memory.write_block(
            self.registers.i, (value // 100, (value // 10) % 10, value % 10)
        )

    def _store_registers(self, instr: Instruction) -> None:
        values = [self._v(index) for index in range(instr.x + 1)]
        self.memory.write_block(self.registers.i, values)
        if self.quirks.memory_increments_index:
            self.registers.i = self.registers.i + instr.x + 1

    def _load_registers(self, instr: Instruction) -> None:
        values = self.memory.read_block(self.registers.i, instr.x + 1)
        for index, value in enumerate(values):
            self.registers.set_v(index, value)
        if self.quirks.memory_increments_index:
            self.registers.i = self.registers.i + instr.x + 1

    # ------------------------------------------------------------------ #
    # Keypad and timers
    # ------------------------------------------------------------------ #

    def _skip_if_key_pressed(self, instr: Instruction) -> bool:
        return self._skip_if(self.keypad.is_pressed(self._v(instr.x)))

    def _skip_if_key_not_pressed(self, instr: Instruction) -> bool:
        return self._skip_if(not self.keypad.is_pressed(self._v(instr.x)))

    def _wait_for_key(self, instr: Instruction) -> bool:
        # Only presses that happen after the wait starts count.
        self.keypad.clear_press()
        self.waiting_register = instr.x
        logger.debug("Waiting for key press into V%X", instr.x)
        return True

    def _read_delay_timer(self, instr: Instruction) -> None:
        self.registers.set_v(instr.x, self.registers.delay)

    def _set_delay_timer(self, instr: Instruction) -> None:
        self.registers.delay = self._v(instr.x)

    def _set_sound_timer(self, instr: Instruction) -> None:
        self.registers.sound = self._v(instr.x)


__all__ = ["Interpreter", "StepResult"]
