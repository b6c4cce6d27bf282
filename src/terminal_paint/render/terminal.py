"""Project canvas cells onto terminal positions."""

from __future__ import annotations

from typing import Protocol

from terminal_paint.core.canvas import Canvas
from terminal_paint.core.cell import Cell
from terminal_paint.core.color import cell_sgr
from terminal_paint.core.constants import CSI, RESET, STATUS_LINES_TOP
from terminal_paint.core.state import CursorState


class Screen(Protocol):
    """Anything the renderer can draw on."""

    def move_to(self, row: int, col: int) -> None:
        """Move to position (1-indexed)."""
        ...

    def write(self, text: str) -> None:
        ...


def cell_sequence(cell: Cell, reverse: bool = False) -> str:
    """Escape sequence that draws one cell in place."""
    return f"{CSI}{cell_sgr(cell.color, reverse)}m{cell.display_char}{RESET}"


class Renderer:
    """
    Draw a Canvas on a terminal screen.

    Canvas (x, y) lands on terminal row ``y + top_reserved_rows`` and
    column ``x`` (both 0-based). Only cells that changed need drawing;
    ``draw_all`` is for bulk changes like clear and load.
    """

    def __init__(
        self,
        canvas: Canvas,
        cursor: CursorState,
        screen: Screen,
        top_reserved_rows: int = STATUS_LINES_TOP,
    ) -> None:
        self.canvas = canvas
        self.cursor = cursor
        self.screen = screen
        self.top_reserved_rows = top_reserved_rows

    def screen_position(self, x: int, y: int) -> tuple[int, int]:
        """Terminal (row, col), 0-based, for a canvas position."""
        return y + self.top_reserved_rows, x

    def _put(self, x: int, y: int, cell: Cell, reverse: bool = False) -> None:
        row, col = self.screen_position(x, y)
        self.screen.move_to(row + 1, col + 1)
        self.screen.write(cell_sequence(cell, reverse))

    def draw_cell(self, x: int, y: int) -> None:
        """Draw one cell; out-of-bounds positions are ignored."""
        cell = self.canvas.get(x, y)
        if cell is None:
            return
        self._put(x, y, cell)

    def draw_all(self) -> None:
        """Draw every cell, row by row."""
        for y in range(self.canvas.height):
            for x in range(self.canvas.width):
                self.draw_cell(x, y)

    def set_cursor_highlight(self, show: bool) -> None:
        """
        Show or hide the cursor highlight.

        Hide before anything that may change the cursor cell or move
        the cursor, show again afterwards.
        """
        x, y = self.cursor.x, self.cursor.y
        cell = self.canvas.get(x, y)
        if cell is None:
            return
        if show:
            self._put(x, y, cell, reverse=True)
        else:
            self.draw_cell(x, y)

    def flush(self) -> None:
        flush = getattr(self.screen, "flush", None)
        if flush is not None:
            flush()
