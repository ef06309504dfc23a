from __future__ import annotations

import pytest

from chip8.constants import MAX_PROGRAM_SIZE, MEMORY_SIZE, PROGRAM_START
from chip8.errors import ErrorKind, InvalidAddress, RomTooLarge
from chip8.memory import Memory


def test_load_copies_program_at_program_start() -> None:
    mem = Memory()
    mem.load(b"\x12\x34\x56")

    assert mem.read(PROGRAM_START) == 0x12
    assert mem.read(PROGRAM_START + 2) == 0x56
    assert mem.read(PROGRAM_START + 3) == 0x00
    assert mem.read(PROGRAM_START - 1) == 0x00


def test_load_accepts_exact_maximum_size() -> None:
    mem = Memory()
    mem.load(bytes([0xAB]) * MAX_PROGRAM_SIZE)
    assert mem.read(MEMORY_SIZE - 1) == 0xAB


def test_load_rejects_one_byte_too_many() -> None:
    mem = Memory()
    with pytest.raises(RomTooLarge) as excinfo:
        mem.load(bytes(MAX_PROGRAM_SIZE + 1))

    assert excinfo.value.kind is ErrorKind.ROM_TOO_LARGE
    assert excinfo.value.size == 3585
    assert excinfo.value.limit == 3584


def test_read_write_bounds() -> None:
    mem = Memory()
    mem.write(0xFFF, 0x1FF)
    assert mem.read(0xFFF) == 0xFF

    with pytest.raises(InvalidAddress) as excinfo:
        mem.read(0x1000)
    assert excinfo.value.address == 0x1000

    with pytest.raises(InvalidAddress):
        mem.write(0x1000, 1)

    with pytest.raises(InvalidAddress):
        mem.read(-1)


def test_write_block_is_all_or_nothing() -> None:
    mem = Memory()
    with pytest.raises(InvalidAddress) as excinfo:
        mem.write_block(0xFFE, [1, 2, 3])

    assert excinfo.value.address == 0x1000
    assert mem.read(0xFFE) == 0
    assert mem.read(0xFFF) == 0


def test_read_block_bounds() -> None:
    mem = Memory()
    mem.write_block(0xFFD, [7, 8, 9])
    assert mem.read_block(0xFFD, 3) == bytes([7, 8, 9])
    assert mem.read_block(0x1000, 0) == b""

    with pytest.raises(InvalidAddress):
        mem.read_block(0xFFD, 4)


def test_dump_is_a_copy() -> None:
    mem = Memory()
    snapshot = mem.dump()
    mem.write(0x300, 0x42)
    assert snapshot[0x300] == 0
    assert len(snapshot) == MEMORY_SIZE
