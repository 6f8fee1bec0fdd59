"""
Terminal Rat - Game Loop

This module contains the main loop that ties input, state, audio and rendering together.
"""

import time
from typing import Optional

from .audio import SqueakPlayer
from .controls import Action, Command, read_command
from .pet import Rat
from .ui import UI
from .utils import RENDER_EVERY_S, TICK_S, now


def apply(command: Command, rat: Rat, ui: UI, player: SqueakPlayer) -> bool:
    """
    Apply one command to the rat.

    Args:
        command: Command read from the terminal
        rat: Rat to mutate
        ui: UI whose console gets the feedback
        player: Squeak player fired on pets

    Returns:
        False when the loop should stop, True otherwise
    """
    if command.action is Action.QUIT:
        return False
    if command.action is Action.PET:
        rat.pet()
        player.squeak()
        ui.log(f"Squeak! ({rat.squeaks})")
    elif command.action is Action.CYCLE_SKIN:
        skin = rat.cycle_skin()
        ui.log(f"Switched to the {skin.value} look.")
    elif command.action is Action.SELECT_SKIN:
        if rat.select_skin(command.slot):
            ui.log(f"Picked the {rat.skin.value} look.")
    return True


def run(stdscr: "curses._CursesWindow", player: Optional[SqueakPlayer] = None) -> int:
    """
    Main loop.

    Args:
        stdscr: Curses window
        player: Squeak player to use (one is created if omitted)

    Returns:
        Exit code (0 for normal exit)
    """
    rat = Rat()
    rat.init_if_needed()

    ui = UI(stdscr, rat)
    ui.init_curses()
    ui.log("Click the rat or press p to pet it.")

    if player is None:
        player = SqueakPlayer()
    if not player.enabled:
        ui.log(f"No sound ({player.error or 'audio unavailable'}); squeaking silently.")

    last_render = 0.0

    try:
        while True:
            t = now()
            dt = t - rat.last_tick
            rat.last_tick = t
            rat.tick(dt)

            command = read_command(stdscr, ui.rat_box)
            while command is not None:
                if not apply(command, rat, ui, player):
                    return 0
                command = read_command(stdscr, ui.rat_box)

            if t - last_render > RENDER_EVERY_S:
                ui.render()
                last_render = t

            time.sleep(TICK_S)
    finally:
        player.close()
