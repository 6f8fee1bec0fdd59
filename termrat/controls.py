"""
Terminal Rat - Controls

Maps raw curses key and mouse events onto the small set of commands the game understands.
"""

import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Screen rectangle as (y, x, height, width)
Area = Tuple[int, int, int, int]

ESC = 27
ENTER_KEYS = (10, 13, curses.KEY_ENTER)

PET_BUTTONS = curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED | curses.BUTTON1_DOUBLE_CLICKED


class Action(Enum):
    PET = "pet"
    CYCLE_SKIN = "cycle_skin"
    SELECT_SKIN = "select_skin"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    """An action plus its argument (the 1-based skin slot for SELECT_SKIN)."""

    action: Action
    slot: int = 0


def key_command(ch: int) -> Optional[Command]:
    """
    Map a key code to a command.

    Args:
        ch: Key code as returned by getch()

    Returns:
        Command, or None for keys the toy doesn't use
    """
    if ch in (ord("q"), ord("Q"), ESC):
        return Command(Action.QUIT)
    if ch in (ord("p"), ord("P"), ord(" ")) or ch in ENTER_KEYS:
        return Command(Action.PET)
    if ch in (ord("s"), ord("S")):
        return Command(Action.CYCLE_SKIN)
    if ord("1") <= ch <= ord("3"):
        return Command(Action.SELECT_SKIN, ch - ord("0"))
    return None


def in_area(x: int, y: int, area: Optional[Area]) -> bool:
    """True if screen cell (x, y) lies inside a (y, x, h, w) area."""
    if area is None:
        return False
    top, left, h, w = area
    return top <= y < top + h and left <= x < left + w


def mouse_command(bstate: int, x: int, y: int, rat_area: Optional[Area]) -> Optional[Command]:
    """Left clicks on the rat pet it; every other mouse event is ignored."""
    if bstate & PET_BUTTONS and in_area(x, y, rat_area):
        return Command(Action.PET)
    return None


def read_command(stdscr: "curses._CursesWindow", rat_area: Optional[Area] = None) -> Optional[Command]:
    """
    Poll the (non-blocking) window for one input event and translate it.

    Args:
        stdscr: Curses window
        rat_area: Last drawn rat box as (y, x, h, w); clicks outside it are ignored

    Returns:
        Command, or None when there is nothing to do
    """
    ch = stdscr.getch()
    if ch == -1:
        return None
    if ch == curses.KEY_MOUSE:
        try:
            _, x, y, _, bstate = curses.getmouse()
        except curses.error:
            return None
        return mouse_command(bstate, x, y, rat_area)
    return key_command(ch)
