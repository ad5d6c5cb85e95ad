"""2048 game session: owns the board, the score and the game status."""

import logging
import threading
from enum import Enum
from typing import Callable, Optional

from numpy import ndarray, reshape
from numpy.random import Generator

from game2048.config import DEFAULT_SHARE_LINK
from game2048.core.gameboard import is_done, make_generator, new_board, spawn_tile
from game2048.core.gamemove import KEY_BINDINGS, Direction, board_changed, legal_directions, move

logger = logging.getLogger(__name__)

SHARE_TEMPLATE = "I scored {score} in 2048! {link}"


class GameStatus(Enum):
    """States of a game session."""

    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameSession:
    """
    Single player 2048 game.

    The session is the only owner of the game state. It dispatches directional commands to the pure
    board functions, spawns a tile after every effective move and switches to game over when no move
    remains. Once over, directional commands are ignored until ``restart`` is called.
    """

    # ##: Current game state.
    _board: Optional[ndarray] = None
    _score: int = 0
    _status: GameStatus = GameStatus.PLAYING

    def __init__(
        self,
        rng: Optional[Generator] = None,
        share_link: str = DEFAULT_SHARE_LINK,
        share_handler: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize a new game with two random tiles.

        Parameters
        ----------
        rng : Generator, optional
            Random source for tile spawns. A fresh unseeded generator is used when omitted.
        share_link : str, optional
            Link appended to the share text.
        share_handler : Callable[[str], None], optional
            Called once with the share text when the game ends.
        """
        self._rng = rng if rng is not None else make_generator()
        self._share_link = share_link
        self._share_handler = share_handler
        self._lock = threading.Lock()

        self.restart()

    @property
    def board(self) -> ndarray:
        """A copy of the current board."""
        return self._board.copy()

    @property
    def cells(self) -> list[str]:
        """
        Flattened labels of the sixteen cells, row by row.

        Returns
        -------
        list[str]
            An empty string for an empty cell, the tile value otherwise.
        """
        return [str(int(value)) if value else "" for value in reshape(self._board, -1)]

    @property
    def score(self) -> int:
        """Cumulative score of the game."""
        return self._score

    @property
    def status(self) -> GameStatus:
        """Current status of the game."""
        return self._status

    @property
    def is_over(self) -> bool:
        """True once no move remains."""
        return self._status is GameStatus.GAME_OVER

    @property
    def share_text(self) -> str:
        """Message handed to the sharing collaborator."""
        return SHARE_TEMPLATE.format(score=self._score, link=self._share_link)

    def restart(self) -> None:
        """Start a new game with a fresh board and a zero score."""
        with self._lock:
            self._board = new_board(self._rng)
            self._score = 0
            self._status = GameStatus.PLAYING
        logger.debug("New game started")

    def handle_move(self, direction: Direction) -> bool:
        """
        Apply a directional command.

        Parameters
        ----------
        direction : Direction
            Direction of the move.

        Returns
        -------
        bool
            True if the state changed, False for an ignored command or a move that changes nothing.
        """
        with self._lock:
            if self._status is GameStatus.GAME_OVER:
                return False

            updated_board, score = move(self._board, direction)
            if not board_changed(self._board, updated_board):
                logger.debug("Move %s changes nothing", direction.value)
                return False

            self._board = spawn_tile(updated_board, self._rng)
            self._score += score
            logger.debug("Move %s scored %d, total %d", direction.value, score, self._score)

            finished = is_done(self._board)
            if finished:
                self._status = GameStatus.GAME_OVER
            share_text = self.share_text

        if finished:
            logger.info("Game over with a score of %d", self._score)
            if self._share_handler is not None:
                self._share_handler(share_text)
        return True

    def handle_key(self, key: Optional[str]) -> bool:
        """
        Apply the command bound to a keyboard key.

        Parameters
        ----------
        key : str
            Key name, as reported by Matplotlib.

        Returns
        -------
        bool
            True if the state changed. Keys other than the arrows are ignored.
        """
        direction = KEY_BINDINGS.get(key)
        if direction is None:
            return False
        return self.handle_move(direction)

    def legal_directions(self) -> list[Direction]:
        """Directions that would change the board."""
        if self.is_over:
            return []
        return legal_directions(self._board)

    def render(self) -> None:
        """
        Render the game board. This method prints the current board and score to the console.
        """
        for row in self._board.tolist():
            print(" \t".join(map(str, row)))
        print(f"Score: {self._score}")
