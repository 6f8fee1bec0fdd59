#!/usr/bin/env python3
"""
Terminal Rat - Main Entry Point

Run:
  python -m termrat

Keys:
  p / space / enter / click  pet       s  switch skin
  1 2 3                      pick skin  q / esc  quit
"""

import argparse
import curses
import os
import sys
from typing import Optional, Sequence

from .game import run


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="terminal-rat",
        description="A pettable ASCII rat in the terminal. Pet it, it squeaks.",
    )
    parser.parse_args(argv)
    # curses waits a full second after Esc by default
    os.environ.setdefault("ESCDELAY", "25")
    try:
        return curses.wrapper(run)
    except curses.error as e:
        print(f"terminal-rat: could not start the terminal UI ({e}).", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
