"""Immutable machine state snapshots and diff utilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from .machine import Machine


@dataclass(frozen=True)
class CPUState:
    """Registers, stack and timers captured from the interpreter."""

    v: Tuple[int, ...]
    i: int
    pc: int
    sp: int
    stack: Tuple[int, ...]
    delay: int
    sound: int
    waiting_register: Optional[int]
    instruction_count: int


@dataclass(frozen=True)
class KeypadState:
    pressed_keys: Tuple[int, ...]
    latched_press: Optional[int]


@dataclass(frozen=True)
class MachineState:
    """Composite snapshot of every interpreter subsystem."""

    cpu: CPUState
    keypad: KeypadState
    display: bytes  # packed, row-major, MSB first
    memory: bytes


@dataclass(frozen=True)
class FieldDiff:
    """Difference for a single named field."""

    name: str
    before: object
    after: object


@dataclass(frozen=True)
class StateDiff:
    """Aggregated differences between two machine states."""

    cpu: Tuple[FieldDiff, ...] = field(default_factory=tuple)
    keypad: Tuple[FieldDiff, ...] = field(default_factory=tuple)
    memory: Tuple[FieldDiff, ...] = field(default_factory=tuple)
    display_changed: bool = False

    def is_empty(self) -> bool:
        """Return True when no differences were recorded."""

        return (
            not self.cpu
            and not self.keypad
            and not self.memory
            and not self.display_changed
        )


def empty_state_diff() -> StateDiff:
    return StateDiff()


def capture_state(machine: Machine) -> MachineState:
    interp = machine.interpreter
    regs = interp.registers
    cpu = CPUState(
        v=regs.v,
        i=regs.i,
        pc=regs.pc,
        sp=interp.stack.pointer,
        stack=interp.stack.entries(),
        delay=regs.delay,
        sound=regs.sound,
        waiting_register=interp.waiting_register,
        instruction_count=interp.instruction_count,
    )
    keypad = KeypadState(
        pressed_keys=interp.keypad.pressed_keys(),
        latched_press=interp.keypad.latched_press,
    )
    return MachineState(
        cpu=cpu,
        keypad=keypad,
        display=interp.display.to_bytes(),
        memory=interp.memory.dump(),
    )


def _diff_fields(
    before: object, after: object, names: Iterable[str], prefix: str = ""
) -> Tuple[FieldDiff, ...]:
    diffs = []
    for name in names:
        old = getattr(before, name)
        new = getattr(after, name)
        if old != new:
            diffs.append(FieldDiff(f"{prefix}{name}", old, new))
    return tuple(diffs)


def _diff_registers(before: CPUState, after: CPUState) -> Tuple[FieldDiff, ...]:
    return tuple(
        FieldDiff(f"v{index:x}", old, new)
        for index, (old, new) in enumerate(zip(before.v, after.v))
        if old != new
    )


def _diff_memory(before: bytes, after: bytes) -> Tuple[FieldDiff, ...]:
    return tuple(
        FieldDiff(f"0x{address:03X}", old, new)
        for address, (old, new) in enumerate(zip(before, after))
        if old != new
    )


def diff_states(before: MachineState, after: MachineState) -> StateDiff:
    cpu_fields = (
        "i",
        "pc",
        "sp",
        "stack",
        "delay",
        "sound",
        "waiting_register",
        "instruction_count",
    )
    return StateDiff(
        cpu=_diff_registers(before.cpu, after.cpu)
        + _diff_fields(before.cpu, after.cpu, cpu_fields),
        keypad=_diff_fields(
            before.keypad, after.keypad, ("pressed_keys", "latched_press")
        ),
        memory=_diff_memory(before.memory, after.memory),
        display_changed=before.display != after.display,
    )


__all__ = [
    "CPUState",
    "KeypadState",
    "MachineState",
    "FieldDiff",
    "StateDiff",
    "capture_state",
    "diff_states",
    "empty_state_diff",
]
