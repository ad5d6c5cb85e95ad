"""
Pure game logic for 2048: board creation, rotation, sliding and merging, tile spawning and end of game detection.
"""

from .gameboard import (
    SIZE,
    TILE_SPAWN_PROBS,
    can_move,
    empty_board,
    is_done,
    make_generator,
    merge_row,
    new_board,
    rotate,
    slide_and_merge,
    spawn_tile,
)
from .gamemove import KEY_BINDINGS, ROTATIONS, Direction, board_changed, legal_directions, move

__all__ = [
    "SIZE",
    "TILE_SPAWN_PROBS",
    "KEY_BINDINGS",
    "ROTATIONS",
    "Direction",
    "board_changed",
    "can_move",
    "empty_board",
    "is_done",
    "legal_directions",
    "make_generator",
    "merge_row",
    "move",
    "new_board",
    "rotate",
    "slide_and_merge",
    "spawn_tile",
]
