# -*- coding: utf-8 -*-
"""
Interactive 2048 game session.

This module provides the `GameSession` class, which holds the board, the score and the game status.
"""

from .session import SHARE_TEMPLATE, GameSession, GameStatus

__all__ = ["GameSession", "GameStatus", "SHARE_TEMPLATE"]
