"""
Move orchestration for the 2048 game: directions, rotation to the canonical slide and change detection.
"""

from enum import Enum

from numpy import array_equal, ndarray

from game2048.core.gameboard import rotate, slide_and_merge


class Direction(Enum):
    """The four move directions."""

    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """
        Look up a direction by its name, case insensitive.

        Raises
        ------
        ValueError
            If the name is not one of left, up, right or down.
        """
        return cls(name.strip().lower())


# ##: Clockwise quarter turns bringing each direction to a slide to the left.
ROTATIONS = {
    Direction.LEFT: 0,
    Direction.DOWN: 1,
    Direction.RIGHT: 2,
    Direction.UP: 3,
}

# ##: Matplotlib key names of the arrow keys.
KEY_BINDINGS = {
    "left": Direction.LEFT,
    "up": Direction.UP,
    "right": Direction.RIGHT,
    "down": Direction.DOWN,
}


def move(board: ndarray, direction: Direction) -> tuple[ndarray, int]:
    """
    Apply a move to the board, without adding a new tile.

    Parameters
    ----------
    board : ndarray
        The current board. Not modified.
    direction : Direction
        The direction to slide the tiles to.

    Returns
    -------
    new_board : ndarray
        The board after the move.
    score : int
        Sum of the tiles created by merges during the move.

    Notes
    -----
    The caller decides whether the move was effective with ``board_changed``.
    """
    times = ROTATIONS[direction]
    score, updated_board = slide_and_merge(rotate(board, times))
    return rotate(updated_board, (4 - times) % 4), score


def board_changed(before: ndarray, after: ndarray) -> bool:
    """Return True when at least one cell differs between the two boards."""
    return not array_equal(before, after)


def legal_directions(board: ndarray) -> list[Direction]:
    """
    List the directions whose move changes the board.

    Parameters
    ----------
    board : ndarray
        The current board.

    Returns
    -------
    list[Direction]
        Directions in the order left, up, right, down.
    """
    return [direction for direction in Direction if board_changed(board, move(board, direction)[0])]
