"""Shared pytest fixtures for interpreter tests."""

from __future__ import annotations

from typing import Callable, Optional

import pytest

from chip8.config import MachineConfig, QuirkConfig
from chip8.machine import Machine


def _assemble(*words: int) -> bytes:
    out = bytearray()
    for word in words:
        out += word.to_bytes(2, "big")
    return bytes(out)


@pytest.fixture
def assemble() -> Callable[..., bytes]:
    """Turn instruction words into a big-endian program image."""
    return _assemble


@pytest.fixture
def make_machine() -> Callable[..., Machine]:
    def _make(*words: int, quirks: Optional[QuirkConfig] = None, seed: int = 0) -> Machine:
        config = MachineConfig(quirks=quirks) if quirks is not None else None
        return Machine(_assemble(*words), config=config, seed=seed)

    return _make
