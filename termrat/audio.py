"""
Terminal Rat - Squeaks

Synthesizes a small bank of squeak clips with numpy and plays them through pygame's mixer.
Audio is optional: if the mixer can't start, the rat just squeaks silently.
"""

import logging
import os
import random
from typing import List, Optional, Tuple

# pygame prints a banner on import, which would land on top of the curses screen
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pygame
import pygame.sndarray

from .utils import AUDIO_BUFFER, AUDIO_CHANNELS, AUDIO_FREQ, AUDIO_SIZE

logger = logging.getLogger(__name__)

# (base Hz, Hz added per step, duration ms)
SQUEAKS: Tuple[Tuple[float, float, int], ...] = (
    (1600.0, 450.0, 140),
    (1900.0, 380.0, 110),
    (1400.0, 520.0, 170),
)

SQUEAK_STEPS = 6
FADE_IN_S = 0.008


def squeak_wave(base_hz: float, step_hz: float, duration_ms: int, sample_rate: int, steps: int = SQUEAK_STEPS) -> np.ndarray:
    """
    Build a rising, slightly louder-per-step sine chirp.

    Args:
        base_hz: Frequency of the first step
        step_hz: Frequency added for each following step
        duration_ms: Total clip length in milliseconds
        sample_rate: Output sample rate in Hz
        steps: Number of pitch steps

    Returns:
        Mono float32 samples in [-1, 1]
    """
    seg = int(sample_rate * duration_ms / 1000.0 / steps)
    if seg <= 0:
        return np.zeros(0, dtype=np.float32)
    t = np.arange(seg, dtype=np.float64) / sample_rate
    fade = min(seg, int(sample_rate * FADE_IN_S))
    ramp = np.linspace(0.0, 1.0, fade, dtype=np.float64)
    parts = []
    for i in range(steps):
        wave = np.sin(2.0 * np.pi * (base_hz + i * step_hz) * t) * (0.25 + 0.12 * i)
        wave[:fade] *= ramp
        parts.append(wave)
    return np.concatenate(parts).astype(np.float32)


def to_pcm(wave: np.ndarray, channels: int) -> np.ndarray:
    """Convert float samples to signed 16-bit PCM shaped for the mixer."""
    pcm = (np.clip(wave, -1.0, 1.0) * 32767).astype(np.int16)
    if channels > 1:
        pcm = np.repeat(pcm[:, np.newaxis], channels, axis=1)
    return np.ascontiguousarray(pcm)


class SqueakPlayer:
    """
    Plays a random squeak per pet.

    Intended behavior:
      - Try to start the mixer and synthesize the clip bank; mark `enabled` accordingly
      - `squeak()` picks a clip and plays it without waiting for it to finish
      - Never raises: a missing device or a playback error just means silence
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.enabled = False
        self.error = ""
        self.last_played: Optional[int] = None
        self.sounds: List["pygame.mixer.Sound"] = []
        self.mixer_started = False
        try:
            pygame.mixer.init(frequency=AUDIO_FREQ, size=AUDIO_SIZE, channels=AUDIO_CHANNELS, buffer=AUDIO_BUFFER)
            self.mixer_started = True
            freq, _, channels = pygame.mixer.get_init()
            for base_hz, step_hz, duration_ms in SQUEAKS:
                wave = squeak_wave(base_hz, step_hz, duration_ms, freq)
                self.sounds.append(pygame.sndarray.make_sound(to_pcm(wave, channels)))
            self.enabled = True
        except (pygame.error, ValueError, TypeError) as e:
            self.error = str(e) or e.__class__.__name__
            self.sounds = []
            logger.debug(f"Audio disabled: {self.error}")
            self.close()

    def squeak(self) -> int:
        """
        Play one clip, chosen at random.

        Returns:
            Index of the chosen clip (recorded even when audio is off)
        """
        index = self.rng.randrange(len(SQUEAKS))
        self.last_played = index
        if not self.enabled:
            return index
        try:
            self.sounds[index].play()
        except pygame.error as e:
            logger.debug(f"Squeak playback failed: {e}")
        return index

    def close(self) -> None:
        """Shut the mixer down if we started it."""
        self.enabled = False
        if not self.mixer_started:
            return
        self.mixer_started = False
        pygame.mixer.quit()
