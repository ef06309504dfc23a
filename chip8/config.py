"""Interpreter quirks and machine configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import os
from typing import Any, Dict


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().casefold()
    return normalized not in {"0", "false", "off", ""}


@dataclass(frozen=True)
class QuirkConfig:
    """Behavioural variants between historical interpreters.

    All flags default to off, which gives the classic reference semantics:
    shifts operate on Vx, Fx55/Fx65 leave I unchanged, OR/AND/XOR leave VF
    alone and sprites wrap at the screen edges.
    """

    shift_uses_vy: bool = False
    memory_increments_index: bool = False
    logic_resets_vf: bool = False
    clip_sprites: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuirkConfig":
        return cls(
            shift_uses_vy=bool(data.get("shift_uses_vy", False)),
            memory_increments_index=bool(data.get("memory_increments_index", False)),
            logic_resets_vf=bool(data.get("logic_resets_vf", False)),
            clip_sprites=bool(data.get("clip_sprites", False)),
        )


def load_quirk_config() -> QuirkConfig:
    return QuirkConfig(
        shift_uses_vy=_env_flag("CHIP8_SHIFT_USES_VY"),
        memory_increments_index=_env_flag("CHIP8_MEMORY_INCREMENTS_INDEX"),
        logic_resets_vf=_env_flag("CHIP8_LOGIC_RESETS_VF"),
        clip_sprites=_env_flag("CHIP8_CLIP_SPRITES"),
    )


@dataclass
class MachineConfig:
    """Host-facing machine configuration."""

    name: str = "CHIP-8"
    cycles_per_frame: int = 10  # instructions per timer tick
    timer_hz: int = 60
    quirks: QuirkConfig = field(default_factory=QuirkConfig)

    def __post_init__(self) -> None:
        if self.cycles_per_frame < 1:
            raise ValueError(f"cycles_per_frame must be positive: {self.cycles_per_frame}")
        if self.timer_hz < 1:
            raise ValueError(f"timer_hz must be positive: {self.timer_hz}")

    @property
    def instructions_per_second(self) -> int:
        return self.cycles_per_frame * self.timer_hz

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "cycles_per_frame": self.cycles_per_frame,
            "timer_hz": self.timer_hz,
            "quirks": self.quirks.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MachineConfig":
        return cls(
            name=data.get("name", "CHIP-8"),
            cycles_per_frame=int(data.get("cycles_per_frame", 10)),
            timer_hz=int(data.get("timer_hz", 60)),
            quirks=QuirkConfig.from_dict(data.get("quirks", {})),
        )

    @classmethod
    def from_env(cls) -> "MachineConfig":
        return cls(quirks=load_quirk_config())

    @classmethod
    def for_variant(cls, variant: str) -> "MachineConfig":
        """Get configuration for a known interpreter variant."""
        configs = {
            "chip8": cls(),
            "cosmac-vip": cls(
                name="COSMAC VIP",
                quirks=QuirkConfig(
                    shift_uses_vy=True,
                    memory_increments_index=True,
                    logic_resets_vf=True,
                    clip_sprites=True,
                ),
            ),
            "schip": cls(
                name="SUPER-CHIP",
                cycles_per_frame=30,
                quirks=QuirkConfig(clip_sprites=True),
            ),
        }

        return configs.get(variant, configs["chip8"])


__all__ = ["QuirkConfig", "MachineConfig", "load_quirk_config"]
