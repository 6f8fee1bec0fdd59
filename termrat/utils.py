"""
Terminal Rat - Utilities and Constants

This module contains utility functions and tuning constants used throughout the toy.
"""

import locale
import time

# Set locale for better character support
locale.setlocale(locale.LC_ALL, "")

# Stat bounds
STAT_MIN = 0.0
STAT_MAX = 100.0

# Starting stats for a fresh rat
START_HAPPINESS = 50.0
START_ENERGY = 50.0

# Per-pet bumps
PET_HAPPINESS_BUMP = 8.0
PET_ENERGY_BUMP = 5.0

# Decay per real second
HAPPINESS_DECAY_PER_S = 1.5
ENERGY_DECAY_PER_S = 1.0

# Tail animation speed (cycles per second) at zero and full energy
TAIL_WAG_MIN_HZ = 0.4
TAIL_WAG_MAX_HZ = 1.4

# How long the pet reaction stays on screen
PET_FLASH_S = 0.6

# Loop timing
TICK_S = 0.02
RENDER_EVERY_S = 0.033

# Smallest terminal we draw the full frame in
MIN_COLS = 60
MIN_ROWS = 17

# Console messages kept on screen
CONSOLE_LINES = 6

# Mixer settings (Hz, signed 16-bit, channels, buffer samples)
AUDIO_FREQ = 22050
AUDIO_SIZE = -16
AUDIO_CHANNELS = 2
AUDIO_BUFFER = 512


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a value between lo and hi bounds."""
    return lo if value < lo else hi if value > hi else value


def now() -> float:
    """Get current time in seconds since epoch."""
    return time.time()
