"""
Core board functions for the 2048 game: creation, rotation, sliding, merging and tile spawning.

Every function here is pure: the input board is never modified and a new array is returned.
"""

from numpy import argwhere, array, int64, ndarray, rot90, zeros
from numpy.random import Generator, default_rng

# ##: The board is always a 4x4 grid.
SIZE = 4

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())


def make_generator(seed: int | None = None) -> Generator:
    """
    Build the random generator used to spawn tiles.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible games. A fresh entropy source is used when omitted.

    Returns
    -------
    Generator
        A NumPy random generator.
    """
    return default_rng(seed)


def empty_board() -> ndarray:
    """Return a board with every cell empty."""
    return zeros((SIZE, SIZE), dtype=int64)


def rotate(board: ndarray, times: int) -> ndarray:
    """
    Rotate the board clockwise by 90 degrees, ``times`` times.

    Parameters
    ----------
    board : ndarray
        The game board.
    times : int
        Number of quarter turns. Taken modulo 4.

    Returns
    -------
    ndarray
        A new rotated board. Cell ``(r, c)`` moves to ``(c, N - 1 - r)`` on each quarter turn.

    Examples
    --------
    >>> rotate(np.array([[1, 2], [3, 4]]), 1)
    array([[3, 1],
           [4, 2]])
    """
    # ##>: rot90 turns counter-clockwise for positive k.
    return rot90(board, k=-(times % 4)).copy()


def merge_row(row: ndarray) -> tuple[int, ndarray]:
    """
    Slide a single row to the left and merge adjacent equal values.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one row of the board.

    Returns
    -------
    score : int
        Sum of the values created by merges.
    merged_row : ndarray
        The row after sliding and merging, padded with zeros to its original length.

    Notes
    -----
    - Zeros are dropped before merging, preserving the order of the tiles.
    - The row is scanned left to right and a merged tile never merges again in the same move,
      so ``[2, 2, 2, 2]`` becomes ``[4, 4, 0, 0]`` and not ``[8, 0, 0, 0]``.

    Examples
    --------
    >>> merge_row(np.array([2, 2, 4, 4]))
    (12, array([4, 8, 0, 0]))

    >>> merge_row(np.array([2, 0, 2, 2]))
    (4, array([4, 2, 0, 0]))
    """
    non_zero = row[row != 0]
    merged = []
    score = 0

    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            value = int(non_zero[i]) * 2
            merged.append(value)
            score += value
            i += 2
        else:
            merged.append(int(non_zero[i]))
            i += 1

    result = zeros(len(row), dtype=row.dtype)
    result[: len(merged)] = array(merged, dtype=row.dtype)
    return score, result


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the whole board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board, already rotated so that the move is a slide to the left.

    Returns
    -------
    score : int
        Total score gained over all rows.
    updated_board : ndarray
        The board after sliding and merging, still in the rotated orientation.
    """
    result = zeros(board.shape, dtype=board.dtype)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_row(row)
        score += score_row
        result[i] = merged_row

    return score, result


def spawn_tile(board: ndarray, rng: Generator) -> ndarray:
    """
    Place a new tile (2 or 4) in a random empty cell.

    Parameters
    ----------
    board : ndarray
        The current board. Not modified.
    rng : Generator
        Random source used to pick the cell and the tile value.

    Returns
    -------
    ndarray
        A new board with exactly one more tile, or an unchanged copy when the board is full.

    Notes
    -----
    The cell is chosen uniformly among the empty ones; the value is 2 with probability 0.9
    and 4 with probability 0.1.
    """
    state = board.copy()
    available_cells = argwhere(state == 0)

    # ##: A full board is not an error, nothing to place.
    if len(available_cells) == 0:
        return state

    cell = available_cells[rng.integers(len(available_cells))]
    state[tuple(cell)] = rng.choice(_TILE_VALUES, p=_TILE_PROBS)
    return state


def new_board(rng: Generator) -> ndarray:
    """Create a fresh board holding two random tiles."""
    return spawn_tile(spawn_tile(empty_board(), rng), rng)


def can_move(board: ndarray) -> bool:
    """
    Check whether at least one move is still possible.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    bool
        True if a cell is empty or two horizontally or vertically adjacent cells share a value.
    """
    if not board.all():
        return True

    # ##>: The board is full, so every compared value is non-zero.
    horizontal = board[:, :-1] == board[:, 1:]
    vertical = board[:-1, :] == board[1:, :]
    return bool(horizontal.any() or vertical.any())


def is_done(board: ndarray) -> bool:
    """Return True when no move remains and the game is over."""
    return not can_move(board)
