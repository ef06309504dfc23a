"""Unit tests for the monochrome framebuffer."""

import numpy as np
import pytest

from . import Framebuffer


class TestClear:
    def test_clear_turns_every_pixel_off(self):
        fb = Framebuffer()
        fb.draw(0, 0, [0xFF] * 15)
        fb.draw(40, 20, [0xAA, 0x55])
        assert fb.lit_count() > 0

        fb.clear()

        assert fb.lit_count() == 0
        assert not fb.snapshot().any()

    def test_clear_on_blank_display_is_noop(self):
        fb = Framebuffer()
        fb.clear()
        assert fb.lit_count() == 0


class TestDraw:
    def test_msb_is_leftmost_pixel(self):
        fb = Framebuffer()
        fb.draw(0, 0, [0b1000_0001])
        assert fb.get_pixel(0, 0)
        assert fb.get_pixel(7, 0)
        assert not fb.get_pixel(1, 0)
        assert fb.lit_count() == 2

    def test_rows_stack_downwards(self):
        fb = Framebuffer()
        fb.draw(10, 5, [0x80, 0x40])
        assert fb.get_pixel(10, 5)
        assert fb.get_pixel(11, 6)
        assert fb.lit_count() == 2

    def test_draw_without_overlap_reports_no_collision(self):
        fb = Framebuffer()
        assert fb.draw(0, 0, [0xF0]) is False
        assert fb.draw(0, 0, [0x0F]) is False
        assert fb.lit_count() == 8

    def test_redraw_erases_and_reports_collision(self):
        fb = Framebuffer()
        sprite = [0x3C, 0x42, 0x81]
        assert fb.draw(20, 10, sprite) is False
        assert fb.draw(20, 10, sprite) is True
        assert fb.lit_count() == 0

    def test_origin_wraps_modulo_screen(self):
        fb = Framebuffer()
        fb.draw(64 + 3, 32 + 2, [0x80])
        assert fb.get_pixel(3, 2)

    def test_pixels_past_edge_wrap_by_default(self):
        fb = Framebuffer()
        fb.draw(60, 31, [0xFF, 0xFF])
        # Right half of each row lands in columns 0-3, second row on line 0.
        assert fb.get_pixel(63, 31)
        assert fb.get_pixel(0, 31)
        assert fb.get_pixel(3, 0)
        assert fb.lit_count() == 16

    def test_clip_sprites_drops_offscreen_pixels(self):
        fb = Framebuffer(clip_sprites=True)
        fb.draw(60, 31, [0xFF, 0xFF])
        assert fb.get_pixel(63, 31)
        assert not fb.get_pixel(0, 31)
        assert not fb.get_pixel(0, 0)
        assert fb.lit_count() == 4

    def test_empty_sprite_draws_nothing(self):
        fb = Framebuffer()
        assert fb.draw(0, 0, b"") is False
        assert fb.lit_count() == 0


class TestSnapshot:
    def test_snapshot_is_row_major_and_flat(self):
        fb = Framebuffer()
        fb.set_pixel(5, 1, True)
        snap = fb.snapshot()
        assert snap.shape == (2048,)
        assert snap.dtype == np.bool_
        assert snap[1 * 64 + 5]
        assert snap.sum() == 1

    def test_snapshot_is_read_only_copy(self):
        fb = Framebuffer()
        snap = fb.snapshot()
        with pytest.raises(ValueError):
            snap[0] = True

        fb.set_pixel(0, 0, True)
        assert not snap[0]

    def test_frame_shape(self):
        fb = Framebuffer()
        fb.set_pixel(63, 31, True)
        frame = fb.frame()
        assert frame.shape == (32, 64)
        assert frame[31, 63]
        assert not frame.flags.writeable

    def test_to_bytes_packs_msb_first(self):
        fb = Framebuffer()
        fb.set_pixel(0, 0, True)
        packed = fb.to_bytes()
        assert len(packed) == 256
        assert packed[0] == 0x80
