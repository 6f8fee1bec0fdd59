"""
Pytest fixtures for Terminal Rat tests.

Nothing here needs a real terminal or sound card: curses windows are mocks
and SDL is pointed at its dummy audio driver.
"""

import curses
import os
from unittest.mock import MagicMock

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from termrat.audio import SqueakPlayer
from termrat.pet import Rat, Skin


@pytest.fixture
def rat():
    """A rat with a fixed skin and default stats."""
    return Rat(skin=Skin.CLASSIC)


@pytest.fixture
def stdscr():
    """Mock curses window: 80x24, no pending input."""
    win = MagicMock()
    win.getmaxyx.return_value = (24, 80)
    win.getch.return_value = -1
    return win


@pytest.fixture
def player():
    """Squeak player stand-in with audio 'working'."""
    fake = MagicMock(spec=SqueakPlayer)
    fake.enabled = True
    fake.error = ""
    fake.squeak.return_value = 0
    return fake


@pytest.fixture
def no_colors(monkeypatch):
    """Pretend the terminal has no colors so render() skips color pairs."""
    monkeypatch.setattr(curses, "has_colors", lambda: False)
