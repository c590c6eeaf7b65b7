"""Render sinks that display a board."""

import sys
from typing import Optional, TextIO

from ..core.board import Board

ALIVE_CLASS = "alive"
DEAD_CLASS = "dead"


class TextRenderer:
    """Writes boards as rows of '*' (alive) and '.' (dead)."""

    # ANSI: clear screen and move the cursor home
    CLEAR_SEQUENCE = "\x1b[2J\x1b[H"

    def __init__(self, stream: Optional[TextIO] = None, clear_screen: bool = False) -> None:
        """Initialize the renderer.

        Args:
            stream: Output stream (defaults to stdout at render time)
            clear_screen: Clear the terminal before each board
        """
        self.stream = stream
        self.clear_screen = clear_screen

    def __call__(self, board: Board) -> None:
        stream = self.stream or sys.stdout
        if self.clear_screen:
            stream.write(self.CLEAR_SEQUENCE)
        stream.write(str(board))
        stream.write("\n\n")
        stream.flush()


def render_html(board: Board) -> str:
    """Render a board as an HTML table.

    Each row becomes ``<tr class="gol-row">`` and each cell a
    ``<td class="gol-cell alive">`` or ``<td class="gol-cell dead">``.
    """
    parts = ['<table class="gol-board">']
    for row in board:
        parts.append('<tr class="gol-row">')
        for cell in row:
            status = ALIVE_CLASS if cell else DEAD_CLASS
            parts.append(f'<td class="gol-cell {status}"></td>')
        parts.append("</tr>")
    parts.append("</table>")
    return "".join(parts)


class HtmlTableRenderer:
    """Renders boards as HTML tables, replacing the previous markup each time."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream
        self.html = ""

    def __call__(self, board: Board) -> None:
        self.html = render_html(board)
        if self.stream is not None:
            self.stream.write(self.html)
            self.stream.write("\n")
            self.stream.flush()
