"""Hexadecimal keypad model with a press latch for key-wait instructions."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .constants import KEY_COUNT
from .errors import InvalidKey

# COSMAC VIP keypad layout, top row first.
KEYPAD_LAYOUT: Tuple[Tuple[int, ...], ...] = (
    (0x1, 0x2, 0x3, 0xC),
    (0x4, 0x5, 0x6, 0xD),
    (0x7, 0x8, 0x9, 0xE),
    (0xA, 0x0, 0xB, 0xF),
)


class Keypad:
    """Current pressed/released state of the 16 keys.

    Only the latest state is kept. A released->pressed transition is also
    latched so a pending key-wait can pick it up on its next step.
    """

    def __init__(self, key_count: int = KEY_COUNT):
        self.key_count = key_count
        self._keys: List[bool] = [False] * key_count
        self._latched_press: Optional[int] = None

    def set_key(self, key: int, pressed: bool) -> None:
        self._check_key(key)
        was_pressed = self._keys[key]
        self._keys[key] = bool(pressed)
        if pressed and not was_pressed:
            self._latched_press = key

    def is_pressed(self, key: int) -> bool:
        self._check_key(key)
        return self._keys[key]

    def pressed_keys(self) -> Tuple[int, ...]:
        return tuple(key for key, pressed in enumerate(self._keys) if pressed)

    def release_all(self) -> None:
        self._keys = [False] * self.key_count
        self._latched_press = None

    def take_press(self) -> Optional[int]:
        """Return and clear the most recent key press transition."""
        key = self._latched_press
        self._latched_press = None
        return key

    def clear_press(self) -> None:
        self._latched_press = None

    @property
    def latched_press(self) -> Optional[int]:
        return self._latched_press

    def _check_key(self, key: int) -> None:
        if not 0 <= key < self.key_count:
            raise InvalidKey(key)


__all__ = ["Keypad", "KEYPAD_LAYOUT"]
