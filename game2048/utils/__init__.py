# -*- coding: utf-8 -*-
"""
This module provides the `WindowBoard` class, which draws the game board and its controls with Matplotlib.
"""

from .windows import BUTTONS, WindowBoard

__all__ = ["BUTTONS", "WindowBoard"]
