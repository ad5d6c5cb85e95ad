# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from typing import Any, Callable, Optional, Sequence

from game2048.config import GameConfig
from game2048.core.gameboard import make_generator
from game2048.core.gamemove import Direction
from game2048.envs import GameSession
from game2048.utils import WindowBoard

logger = logging.getLogger(__name__)


def redraw(window: WindowBoard, session: GameSession):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    session: GameSession
        Game to draw
    """
    window.show_board(session.cells, session.score)
    if session.is_over:
        window.show_game_over(session.share_text)


def reset(session: GameSession, window: WindowBoard):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    session.restart()
    redraw(window, session)


def step(session: GameSession, window: WindowBoard, direction: Direction):
    """
    Apply a move to the game and redraw it when it changed.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board

    direction: Direction
        Move to apply
    """
    if session.handle_move(direction):
        redraw(window, session)


def key_handler(session: GameSession, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(session, window)
        return None

    if session.handle_key(event.key):
        redraw(window, session)


def bind_controls(session: GameSession, window: WindowBoard):
    """
    Connect the keyboard and the buttons of the window to the game.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    window.register_key_handler(lambda event: key_handler(session, window, event))
    for direction in Direction:
        window.register_button_handler(direction.value, lambda d=direction: step(session, window, d))
    window.register_button_handler("restart", lambda: reset(session, window))


def play_console(session: GameSession, read: Callable[[str], str] = input):
    """
    Play in the terminal: type a direction, ``new`` to restart or ``quit`` to leave.

    Parameters
    ----------
    session: GameSession
        The game session

    read: Callable
        Prompt function returning the typed command
    """
    session.render()
    while True:
        try:
            command = read("> ").strip().lower()
        except EOFError:
            break

        if command in ("q", "quit"):
            break
        if command in ("n", "new"):
            session.restart()
        else:
            try:
                direction = Direction.from_name(command)
            except ValueError:
                print("Unknown command, use left, up, right, down, new or quit.")
                continue
            session.handle_move(direction)

        session.render()
        if session.is_over:
            print("Game Over!")
            print(session.share_text)


def share(text: str):
    """Default sharing collaborator: publish the message in the logs."""
    logger.info("Share: %s", text)


def main(argv: Optional[Sequence[str]] = None):
    config = GameConfig.from_args(argv)
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    session = GameSession(rng=make_generator(config.seed), share_link=config.share_link, share_handler=share)
    if config.console:
        play_console(session)
        return

    window_board = WindowBoard(title=config.title)
    bind_controls(session, window_board)
    redraw(window_board, session)

    # Blocking event loop
    window_board.show(block=True)


if __name__ == "__main__":
    main()
