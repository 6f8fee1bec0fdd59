"""
Terminal Rat - Rat Model

This module contains the Skin enumeration and the Rat dataclass holding the pet's state.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .utils import (
    ENERGY_DECAY_PER_S,
    HAPPINESS_DECAY_PER_S,
    PET_ENERGY_BUMP,
    PET_FLASH_S,
    PET_HAPPINESS_BUMP,
    START_ENERGY,
    START_HAPPINESS,
    STAT_MAX,
    STAT_MIN,
    TAIL_WAG_MAX_HZ,
    TAIL_WAG_MIN_HZ,
    clamp,
    now,
)


class Skin(Enum):
    """ASCII-art styles, in cycling order."""

    CLASSIC = "classic"
    LONG_TAIL = "long tail"
    CHUBBY = "chubby"


SKINS = tuple(Skin)


def random_skin() -> Skin:
    """Pick a skin for a fresh rat."""
    return random.choice(SKINS)


@dataclass
class Rat:
    """Represents the rat with its stats and current look."""

    name: str = "Rat"
    happiness: float = START_HAPPINESS  # 0..100
    energy: float = START_ENERGY        # 0..100
    skin: Skin = field(default_factory=random_skin)

    last_pet: float = 0.0
    last_tick: float = 0.0
    vibe: float = 0.0
    squeaks: int = 0
    last_event: str = "Sniffing around..."

    def init_if_needed(self) -> None:
        """Initialize timestamps if they haven't been set."""
        t = now()
        if self.last_pet <= 0:
            self.last_pet = t
        if self.last_tick <= 0:
            self.last_tick = t

    def mood(self) -> str:
        """Describe the rat's mood from its happiness."""
        if self.happiness >= 80:
            return "blissful"
        if self.happiness >= 50:
            return "content"
        if self.happiness >= 20:
            return "lonely"
        return "grumpy"

    def pet(self, at: Optional[float] = None) -> None:
        """Pet the rat: bumps happiness and energy up to the cap."""
        self.happiness = clamp(self.happiness + PET_HAPPINESS_BUMP, STAT_MIN, STAT_MAX)
        self.energy = clamp(self.energy + PET_ENERGY_BUMP, STAT_MIN, STAT_MAX)
        self.last_pet = now() if at is None else at
        self.squeaks += 1
        self.last_event = "Squeak!"

    def just_petted(self, t: float) -> bool:
        """True while the pet reaction should still be shown."""
        return self.squeaks > 0 and 0 <= t - self.last_pet < PET_FLASH_S

    def decay(self, dt: float) -> None:
        """Let happiness and energy drain over dt seconds, down to the floor."""
        if dt <= 0:
            return
        self.happiness = clamp(self.happiness - HAPPINESS_DECAY_PER_S * dt, STAT_MIN, STAT_MAX)
        self.energy = clamp(self.energy - ENERGY_DECAY_PER_S * dt, STAT_MIN, STAT_MAX)

    def tick(self, dt: float) -> None:
        """Advance the tail animation and decay stats."""
        if dt <= 0:
            return
        wag_hz = TAIL_WAG_MIN_HZ + (TAIL_WAG_MAX_HZ - TAIL_WAG_MIN_HZ) * (self.energy / STAT_MAX)
        self.vibe = (self.vibe + dt * wag_hz) % 1.0
        self.decay(dt)

    def set_skin(self, skin: Skin) -> None:
        self.skin = skin
        self.last_event = f"Now {skin.value}."

    def cycle_skin(self) -> Skin:
        """Switch to the next skin, wrapping around after the last one."""
        index = SKINS.index(self.skin)
        self.set_skin(SKINS[(index + 1) % len(SKINS)])
        return self.skin

    def select_skin(self, slot: int) -> bool:
        """Select a skin by its 1-based slot; out-of-range slots are ignored."""
        if not 1 <= slot <= len(SKINS):
            return False
        self.set_skin(SKINS[slot - 1])
        return True
