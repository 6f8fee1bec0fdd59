"""
Terminal Rat - User Interface

This module handles all curses-based rendering.
"""

import curses
from collections import deque
from typing import Deque, Optional

from .controls import Area
from .pet import Rat, Skin
from .utils import CONSOLE_LINES, MIN_COLS, MIN_ROWS, clamp, now

# Happiness above which each skin's eyes light up
BRIGHT_EYES_AT = {
    Skin.CLASSIC: 66.0,
    Skin.LONG_TAIL: 50.0,
    Skin.CHUBBY: 70.0,
}

HELP_LINE = "p/space/enter/click pet  s switch skin  1-3 pick skin  q/esc quit"
HEADER_HINT = "click or press p to pet, s to switch skins, q to quit"


def pad_block(lines: list[str]) -> list[str]:
    """Right-pad art lines to a common width so the block centers cleanly."""
    width = max((len(line) for line in lines), default=0)
    return [line.ljust(width) for line in lines]


class UI:
    """Manages the terminal UI for the rat."""

    def __init__(self, stdscr: "curses._CursesWindow", rat: Rat) -> None:
        """
        Initialize the UI.

        Args:
            stdscr: Curses window
            rat: Rat instance to display
        """
        self.stdscr = stdscr
        self.rat = rat
        self.messages: Deque[str] = deque(maxlen=CONSOLE_LINES)
        self.rat_box: Optional[Area] = None

    def log(self, message: str) -> None:
        """Add a message to the console log."""
        self.messages.appendleft(message)

    def init_curses(self) -> None:
        """Initialize curses settings, mouse reporting and color pairs."""
        curses.curs_set(0)
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)
        curses.mousemask(curses.ALL_MOUSE_EVENTS)
        curses.mouseinterval(0)
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(1, curses.COLOR_CYAN, -1)    # title
            curses.init_pair(2, curses.COLOR_GREEN, -1)   # good
            curses.init_pair(3, curses.COLOR_YELLOW, -1)  # warn
            curses.init_pair(4, curses.COLOR_RED, -1)     # bad
            curses.init_pair(5, curses.COLOR_MAGENTA, -1) # accent

    def color_for_pct(self, pct: float) -> int:
        """Get color attribute for a percentage value."""
        if not curses.has_colors():
            return 0
        if pct >= 70:
            return curses.color_pair(2)
        if pct >= 35:
            return curses.color_pair(3)
        return curses.color_pair(4)

    def accent(self) -> int:
        return curses.color_pair(5) if curses.has_colors() else 0

    def bar(self, label: str, value: float, width: int = 22) -> str:
        """
        Create a text progress bar.

        Args:
            label: Label for the bar
            value: Value (0-100)
            width: Width of the bar in characters

        Returns:
            Formatted bar string
        """
        v = clamp(value, 0, 100)
        filled = int(round((v / 100.0) * width))
        filled = int(clamp(filled, 0, width))
        return f"{label:<9} " + ("█" * filled) + ("░" * (width - filled)) + f" {int(v):>3d}"

    def sprite(self, t: Optional[float] = None) -> list[str]:
        """
        Get the ASCII art for the rat's current skin.

        The first line is reserved for the pet reaction so every skin keeps
        a steady height while the hearts come and go.

        Args:
            t: Current time, used to decide whether the pet reaction shows

        Returns:
            List of equal-width strings representing the sprite lines
        """
        rat = self.rat
        t = now() if t is None else t
        petted = rat.just_petted(t)
        bright = rat.happiness > BRIGHT_EYES_AT[rat.skin]
        wag = rat.vibe < 0.5

        if rat.skin is Skin.LONG_TAIL:
            tail = "~~" if wag else "≈≈"
            eye = "^" if petted else "•" if bright else "."
            art = [
                "  (\\_/)      " + tail * 4,
                f"  ({eye} .)     ",
                "  (   )      ",
                "   v v       ",
            ]
        elif rat.skin is Skin.CHUBBY:
            tail = "~" if wag else "≈"
            eye = "^" if petted else "•" if bright else "o"
            art = [
                "  (\\_/)    " + tail * 3,
                f" ( {eye} {eye} )   ",
                " (  -  )   ",
                " (     )   ",
                "  \"   \"    ",
            ]
        else:
            tail = "~" if wag else "≈"
            eye = "^" if petted else "•" if bright else "."
            blush = "˘" if bright or petted else " "
            art = [
                "  (\\_/)     " + tail * 3,
                f"  ({eye}{blush}{eye})     ",
                "  (   )     ",
                "  (   )     ",
                "   \" \"      ",
            ]

        top = "    <3 <3" if petted else ""
        return pad_block([top] + art)

    def draw_box(self, y: int, x: int, h: int, w: int, title: Optional[str] = None) -> None:
        """
        Draw a box with optional title.

        Args:
            y: Y coordinate
            x: X coordinate
            h: Height
            w: Width
            title: Optional title for the box
        """
        if h < 2 or w < 2:
            return
        try:
            self.stdscr.addstr(y, x, "┌" + "─" * (w - 2) + "┐")
            for i in range(1, h - 1):
                self.stdscr.addstr(y + i, x, "│" + " " * (w - 2) + "│")
            self.stdscr.addstr(y + h - 1, x, "└" + "─" * (w - 2) + "┘")
            if title:
                t = f" {title} "
                t = t[: max(0, w - 4)]
                self.stdscr.addstr(y, x + 2, t, self.accent())
        except curses.error:
            return

    def status_lines(self, width: int) -> list[tuple[str, int]]:
        """Lines for the stats panel, each with its curses attribute."""
        rat = self.rat
        bar_w = int(clamp(width - 14, 4, 22))
        return [
            (self.bar("Happy", rat.happiness, bar_w), self.color_for_pct(rat.happiness)),
            (self.bar("Energy", rat.energy, bar_w), self.color_for_pct(rat.energy)),
            (f"{'Squeaks':<9} {rat.squeaks}", 0),
            (f"{'Skin':<9} {rat.skin.value}", 0),
            (f"{'Mood':<9} {rat.mood()}", 0),
            (f"{'Last':<9} {rat.last_event}", 0),
        ]

    def render(self) -> None:
        """Render the main UI frame."""
        self.stdscr.erase()
        h, w = self.stdscr.getmaxyx()
        if h < MIN_ROWS or w < MIN_COLS:
            self.rat_box = None
            msg = f"Resize terminal to at least {MIN_COLS}x{MIN_ROWS}"
            try:
                self.stdscr.addstr(0, 0, msg[: max(0, w - 1)])
                self.stdscr.addstr(2, 0, "Press q to quit."[: max(0, w - 1)])
            except curses.error:
                pass
            self.stdscr.refresh()
            return

        title = "Terminal Rat"
        subtitle = f"{self.rat.name} · {self.rat.skin.value} · mood: {self.rat.mood()} · squeaks: {self.rat.squeaks}"
        try:
            self.stdscr.addstr(0, 2, title, curses.color_pair(1) | curses.A_BOLD if curses.has_colors() else curses.A_BOLD)
            self.stdscr.addstr(0, 2 + len(title), f" - {HEADER_HINT}"[: max(0, w - 4 - len(title))], curses.A_DIM)
            self.stdscr.addstr(1, 2, subtitle[: (w - 4)])
        except curses.error:
            pass

        top = 2
        footer_h = 1
        gap_h = 1
        console_h = 5
        main_h = h - top - gap_h - console_h - footer_h
        main_w = w - 4
        rat_w = (main_w * 3) // 5
        stats_w = main_w - rat_w
        self.draw_box(top, 2, main_h, rat_w, "Your Rat")
        self.rat_box = (top, 2, main_h, rat_w)
        self.draw_box(top, 2 + rat_w, main_h, stats_w, "Stats")

        art = self.sprite()
        art_y = top + 1 + max(0, (main_h - 2 - len(art)) // 2)
        art_x = 2 + max(1, (rat_w - len(art[0])) // 2)
        for i, line in enumerate(art[: main_h - 2]):
            try:
                self.stdscr.addstr(art_y + i, art_x, line[: rat_w - 2], self.accent())
            except curses.error:
                pass

        status_x = 2 + rat_w + 2
        inner_w = stats_w - 4
        for i, (line, attr) in enumerate(self.status_lines(inner_w)[: main_h - 2]):
            try:
                self.stdscr.addstr(top + 1 + i, status_x, line[:inner_w], attr)
            except curses.error:
                pass

        msg_box_y = top + main_h + gap_h
        self.draw_box(msg_box_y, 2, console_h, main_w, "Console")

        max_msgs = max(1, console_h - 2)
        for i, message in enumerate(list(self.messages)[:max_msgs]):
            try:
                self.stdscr.addstr(msg_box_y + 1 + i, 4, f"• {message}"[: (w - 8)])
            except curses.error:
                pass

        try:
            self.stdscr.addstr(h - 1, 2, HELP_LINE[: (w - 4)], curses.A_DIM)
        except curses.error:
            pass

        self.stdscr.refresh()
