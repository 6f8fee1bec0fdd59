"""
Terminal Rat

A pettable ASCII-art rat for the terminal: it perks up when petted, squeaks,
and slowly gets lonely when ignored. Three skins to switch between.
"""

__version__ = "1.0.0"

import logging

from .pet import Rat, Skin
from .ui import UI
from .__main__ import main

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["Rat", "Skin", "UI", "main", "__version__"]
