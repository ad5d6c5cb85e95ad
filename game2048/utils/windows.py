# -*- coding: utf-8 -*-
"""
Display the game in a window.
"""
from typing import Any, Callable, Sequence

from matplotlib import pyplot as plt
from matplotlib.widgets import Button

from game2048.core.gameboard import SIZE

# ##: Names and labels of the buttons, left to right.
BUTTONS = (("up", "Up"), ("left", "Left"), ("right", "Right"), ("down", "Down"), ("restart", "New game"))


class WindowBoard:
    """
    Window to draw the 2048 board using Matplotlib.
    Inspired by @Farama-Foundation (Minigrid).
    """

    # ##: Colors
    COLORS = {
        0: "#CDC1B4",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
        4096: "#00A2D8",
        8192: "#9ED682",
    }
    OTHER_COLOR = "#3C3A32"

    def __init__(self, title: str, size: int = SIZE):
        # ## ----> Create support.
        self.fig = plt.figure(figsize=(5, 6.5))
        self.fig.patch.set_facecolor("#BBADA0")
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(title)

        # ## ----> Add cell for board, row by row.
        self.axes = []
        self.textes = []
        width, height = 0.9 / size, 0.65 / size
        for r in range(size):
            for c in range(size):
                left, bottom = 0.05 + c * width, 0.95 - (r + 1) * height
                _ax = self.fig.add_axes([left + 0.01, bottom + 0.01, width - 0.02, height - 0.02])
                _ax.set_xticks([])
                _ax.set_yticks([])
                text = _ax.text(
                    0.5,
                    0.5,
                    "",
                    horizontalalignment="center",
                    verticalalignment="center",
                    fontsize="x-large",
                    fontweight="demibold",
                )
                self.axes.append(_ax)
                self.textes.append(text)

        # ## ----> Score and end of game messages.
        self.score_text = self.fig.text(0.5, 0.2, "Score: 0", ha="center", fontsize="large", fontweight="bold")
        self.message_text = self.fig.text(0.5, 0.13, "", ha="center", fontsize="medium")

        # ## ----> Directional and restart buttons.
        self.buttons = {}
        width = 0.9 / len(BUTTONS)
        for index, (name, label) in enumerate(BUTTONS):
            button_ax = self.fig.add_axes([0.05 + index * width + 0.005, 0.02, width - 0.01, 0.07])
            self.buttons[name] = Button(button_ax, label)

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    def show_board(self, cells: Sequence[str], score: int):
        """
        Update the cells and the score being shown.

        Parameters
        ----------
        cells: Sequence[str]
            Labels of the cells, row by row; an empty string for an empty cell

        score: int
            Cumulative score
        """
        # ## ----> Update the cells.
        for _ax, text, label in zip(self.axes, self.textes, cells):
            text.set_text(label)
            _ax.set_facecolor(self.COLORS.get(int(label) if label else 0, self.OTHER_COLOR))

        self.score_text.set_text(f"Score: {score}")
        self.message_text.set_text("")

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()

    def show_game_over(self, share_text: str):
        """
        Show the end of game message.

        Parameters
        ----------
        share_text: str
            Message offered for sharing
        """
        self.message_text.set_text(f"Game Over!\n{share_text}")
        self.fig.canvas.draw_idle()

    def register_key_handler(self, key_handler: Callable[[Any], Any]):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Callable
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_button_handler(self, name: str, handler: Callable[[], Any]):
        """
        Register the handler of a button.

        Parameters
        ----------
        name: str
            Button name: up, left, right, down or restart

        handler: Callable
            Called without argument when the button is clicked
        """
        self.buttons[name].on_clicked(lambda event: handler())

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
