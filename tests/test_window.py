"""
Tests for the Matplotlib window and the control bindings, with a non interactive backend.
"""

from types import SimpleNamespace
from unittest import TestCase, main

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
from matplotlib import pyplot as plt  # noqa: E402

from game2048.core.gameboard import make_generator  # noqa: E402
from game2048.envs import GameSession  # noqa: E402
from game2048.play import bind_controls, key_handler, play_console, redraw  # noqa: E402
from game2048.utils import BUTTONS, WindowBoard  # noqa: E402


def click(window: WindowBoard, name: str):
    """Fire the clicked callbacks of a button."""
    window.buttons[name]._observers.process("clicked", None)


class TestWindowBoard(TestCase):
    def setUp(self):
        self.window = WindowBoard(title="2048 test")

    def tearDown(self):
        plt.close("all")

    def test_layout(self):
        self.assertEqual(len(self.window.axes), 16)
        self.assertEqual(set(self.window.buttons), {name for name, _ in BUTTONS})

    def test_show_board(self):
        cells = [""] * 16
        cells[0], cells[5] = "2", "131072"
        self.window.show_board(cells, 12)
        self.assertEqual(self.window.textes[0].get_text(), "2")
        self.assertEqual(self.window.textes[1].get_text(), "")
        self.assertEqual(self.window.textes[5].get_text(), "131072")
        self.assertEqual(self.window.score_text.get_text(), "Score: 12")

    def test_game_over_message(self):
        self.window.show_game_over("I scored 8 in 2048! https://example.org")
        self.assertIn("Game Over!", self.window.message_text.get_text())
        self.assertIn("I scored 8 in 2048!", self.window.message_text.get_text())

    def test_close(self):
        self.window.close()
        self.assertTrue(self.window.closed)


class TestControls(TestCase):
    def setUp(self):
        self.session = GameSession(rng=make_generator(3))
        self.session._board = np.zeros((4, 4), dtype=np.int64)
        self.session._board[0] = [0, 0, 2, 2]
        self.window = WindowBoard(title="2048 test")
        bind_controls(self.session, self.window)
        redraw(self.window, self.session)

    def tearDown(self):
        plt.close("all")

    def test_arrow_key(self):
        key_handler(self.session, self.window, SimpleNamespace(key="left"))
        self.assertEqual(self.session.board[0, 0], 4)
        self.assertEqual(self.window.textes[0].get_text(), "4")
        self.assertEqual(self.window.score_text.get_text(), "Score: 4")

    def test_button_matches_key(self):
        click(self.window, "left")
        self.assertEqual(self.session.board[0, 0], 4)
        self.assertEqual(self.session.score, 4)

    def test_each_direction_button(self):
        click(self.window, "right")
        self.assertEqual(self.session.board[0, 3], 4)

        self.session._board = np.zeros((4, 4), dtype=np.int64)
        self.session._board[:, 1] = [2, 2, 0, 0]
        click(self.window, "down")
        self.assertEqual(self.session.board[3, 1], 4)

        self.session._board = np.zeros((4, 4), dtype=np.int64)
        self.session._board[:, 2] = [0, 0, 8, 8]
        click(self.window, "up")
        self.assertEqual(self.session.board[0, 2], 16)

    def test_restart_button(self):
        click(self.window, "left")
        click(self.window, "restart")
        self.assertEqual(self.session.score, 0)
        self.assertEqual(np.count_nonzero(self.session.board), 2)

    def test_backspace_restarts(self):
        key_handler(self.session, self.window, SimpleNamespace(key="left"))
        key_handler(self.session, self.window, SimpleNamespace(key="backspace"))
        self.assertEqual(self.session.score, 0)

    def test_escape_closes(self):
        key_handler(self.session, self.window, SimpleNamespace(key="escape"))
        self.assertTrue(self.window.closed)


class TestConsole(TestCase):
    def test_console_game(self):
        session = GameSession(rng=make_generator(3))
        session._board = np.zeros((4, 4), dtype=np.int64)
        session._board[0] = [2, 2, 0, 0]
        commands = iter(["left", "diagonal", "quit"])
        play_console(session, read=lambda prompt: next(commands))
        self.assertEqual(session.score, 4)

    def test_console_eof(self):
        session = GameSession(rng=make_generator(3))

        def read(prompt):
            raise EOFError

        play_console(session, read=read)
        self.assertEqual(session.score, 0)


if __name__ == "__main__":
    main()
