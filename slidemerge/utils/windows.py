# -*- coding: utf-8 -*-
"""
Graphical window for the 2048 game.

This module draws the game board with Matplotlib: one subplot per cell, tinted by tile value, the score in the
header and a message once the target tile is reached. Keyboard events of the window are forwarded to a handler.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event

from slidemerge.core.gameboard import Grid


class WindowBoard:
    """
    A class for rendering the 2048 game board using Matplotlib.

    Methods
    -------
    show_image(board: Grid, score: int)
        Update the display with the current game board and score.
    show_overlay(show: bool)
        Show or hide the end of game message.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        None: "#CCC0B3",
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
    }

    def __init__(self, title: str, rows: int, columns: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        rows : int
            Number of rows of the board.
        columns : int
            Number of columns of the board.
        """
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(rows, columns)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, rows: int, columns: int):
        """
        Create one subplot per cell of the board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_axis_off()

        self.header = self.fig.suptitle("", fontweight="demibold")
        self.texts = []
        self.axes = [self.fig.add_subplot(rows, columns, r * columns + c + 1) for r in range(rows) for c in range(columns)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        """
        Set the closed flag when the window is closed.
        """
        self.closed = True

    def show_image(self, board: Grid, score: int):
        """
        Show or update the game board.

        Parameters
        ----------
        board : Grid
            The current game board, read in the same orientation as it is stored.
        score : int
            The current score.
        """
        cells = [cell for row in board for cell in row]
        for ax, text, value in zip(self.axes, self.texts, cells):
            text.set_text("" if value is None else str(value))
            ax.set_facecolor(self.COLORS.get(value, "#3C3A32"))

        self.header.set_text(f"Score: {score}")
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def show_overlay(self, show: bool, message: str = "Target reached!"):
        """
        Show or hide the end of game message over the board.
        """
        if show:
            self.header.set_text(f"{self.header.get_text()} - {message}")
        self.fig.canvas.draw_idle()

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function called with the event whenever a key is pressed in the window.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
