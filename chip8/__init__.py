"""CHIP-8 interpreter core."""

from .config import MachineConfig, QuirkConfig, load_quirk_config
from .decoding import Instruction, decode
from .errors import (
    Chip8Error,
    ErrorKind,
    InvalidAddress,
    InvalidKey,
    RomTooLarge,
    StackOverflow,
    StackUnderflow,
    UndefinedOpcode,
)
from .interpreter import Interpreter, StepResult
from .machine import Machine
from .state_model import (
    CPUState,
    FieldDiff,
    KeypadState,
    MachineState,
    StateDiff,
    capture_state,
    diff_states,
    empty_state_diff,
)

__all__ = [
    "Machine",
    "Interpreter",
    "StepResult",
    "Instruction",
    "decode",
    "MachineConfig",
    "QuirkConfig",
    "load_quirk_config",
    "Chip8Error",
    "ErrorKind",
    "RomTooLarge",
    "InvalidAddress",
    "InvalidKey",
    "StackOverflow",
    "StackUnderflow",
    "UndefinedOpcode",
    "CPUState",
    "KeypadState",
    "MachineState",
    "FieldDiff",
    "StateDiff",
    "capture_state",
    "diff_states",
    "empty_state_diff",
]
