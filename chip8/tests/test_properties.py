"""Property-based checks of interpreter invariants."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from chip8.display import Framebuffer
from chip8.machine import Machine

byte = st.integers(min_value=0, max_value=0xFF)
sprites = st.lists(byte, min_size=1, max_size=15)


@given(st.integers(min_value=0x200, max_value=0xFFE).filter(lambda a: a % 2 == 0), byte, byte)
def test_fetch_reads_high_then_low(address: int, high: int, low: int) -> None:
    machine = Machine(b"")
    interp = machine.interpreter
    interp.memory.write(address, high)
    interp.memory.write(address + 1, low)
    interp.registers.pc = address

    assert interp.fetch() == (high << 8) | low


@given(byte, byte, sprites)
def test_double_draw_restores_display(x: int, y: int, rows: list[int]) -> None:
    fb = Framebuffer()
    before = fb.snapshot()

    fb.draw(x, y, rows)
    collided = fb.draw(x, y, rows)

    assert (fb.snapshot() == before).all()
    assert collided == any(rows)


@given(st.lists(st.tuples(byte, byte, sprites), max_size=5))
def test_clear_always_blanks(draws: list[tuple[int, int, list[int]]]) -> None:
    fb = Framebuffer()
    for x, y, rows in draws:
        fb.draw(x, y, rows)
    fb.clear()
    assert fb.lit_count() == 0


@given(byte, byte)
def test_add_sets_carry_exactly(vx: int, vy: int) -> None:
    machine = Machine(bytes([0x80, 0x14]))
    regs = machine.interpreter.registers
    regs.set_v(0, vx)
    regs.set_v(1, vy)

    machine.step()

    assert machine.registers[0] == (vx + vy) & 0xFF
    assert machine.registers[0xF] == int(vx + vy > 0xFF)


@given(byte)
def test_bcd_digits(value: int) -> None:
    machine = Machine(bytes([0xF0, 0x33]))
    interp = machine.interpreter
    interp.registers.set_v(0, value)
    interp.registers.i = 0x400

    machine.step()

    hundreds, tens, ones = interp.memory.read_block(0x400, 3)
    assert hundreds * 100 + tens * 10 + ones == value


@given(byte, byte, sprites)
def test_xor_is_self_inverse_over_existing_pixels(x: int, y: int, rows: list[int]) -> None:
    fb = Framebuffer()
    fb.draw(5, 7, [0xFF, 0x81, 0xFF])
    before = fb.snapshot()

    fb.draw(x, y, rows)
    fb.draw(x, y, rows)

    assert (fb.snapshot() == before).all()
