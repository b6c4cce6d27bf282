"""Canvas - fixed-size 2D grid of cells."""

from __future__ import annotations

from typing import Iterator

from terminal_paint.core.cell import Cell
from terminal_paint.core.constants import (
    DEFAULT_COLOR,
    MAX_CANVAS_HEIGHT,
    MAX_CANVAS_WIDTH,
    MIN_TERMINAL_COLS,
    MIN_TERMINAL_LINES,
    STATUS_LINES_BOTTOM,
    STATUS_LINES_TOP,
)


class TerminalTooSmallError(ValueError):
    """Raised when the terminal cannot host a canvas."""

    def __init__(self, cols: int, lines: int) -> None:
        super().__init__(
            f"Terminal too small ({cols}x{lines}, minimum "
            f"{MIN_TERMINAL_COLS}x{MIN_TERMINAL_LINES})"
        )
        self.cols = cols
        self.lines = lines


class Canvas:
    """
    A rectangular grid of Cells, addressed by (x, y).

    The grid is allocated once at construction and never resized.
    Cells live in a flat row-major list, so ``len(buffer) == width * height``
    always holds. Coordinates outside ``[0, width) x [0, height)`` are
    ignored by every accessor rather than raising.
    """

    def __init__(self, width: int, height: int, fill_color: int = DEFAULT_COLOR) -> None:
        if not 0 < width <= MAX_CANVAS_WIDTH:
            raise ValueError(f"width={width} out of range (1-{MAX_CANVAS_WIDTH})")
        if not 0 < height <= MAX_CANVAS_HEIGHT:
            raise ValueError(f"height={height} out of range (1-{MAX_CANVAS_HEIGHT})")
        self._width = width
        self._height = height
        self._buffer: list[Cell] = [Cell(' ', fill_color) for _ in range(width * height)]

    @classmethod
    def for_terminal(cls, cols: int, lines: int) -> Canvas:
        """
        Size a canvas to the usable area of a terminal.

        Rows are reserved for the status lines above and below the
        canvas. Raises TerminalTooSmallError when the terminal is
        below the minimum usable size.
        """
        if cols < MIN_TERMINAL_COLS or lines < MIN_TERMINAL_LINES:
            raise TerminalTooSmallError(cols, lines)
        available_height = lines - (STATUS_LINES_TOP + STATUS_LINES_BOTTOM)
        return cls(
            width=min(cols, MAX_CANVAS_WIDTH),
            height=min(available_height, MAX_CANVAS_HEIGHT),
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"

    def contains(self, x: int, y: int) -> bool:
        """Check if (x, y) is inside the canvas."""
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Cell | None:
        """Get the cell at (x, y), or None when out of bounds."""
        if not self.contains(x, y):
            return None
        return self._buffer[y * self._width + x]

    def paint(self, x: int, y: int, glyph: str, color: int) -> bool:
        """
        Overwrite the character and color of one cell.

        Returns False (and changes nothing) when (x, y) is out of
        bounds. Redrawing the cell is up to the caller.
        """
        cell = self.get(x, y)
        if cell is None:
            return False
        cell.char = glyph
        cell.color = color
        return True

    def clear(self, fill_color: int = DEFAULT_COLOR) -> None:
        """Reset every cell to a space in fill_color."""
        for cell in self._buffer:
            cell.char = ' '
            cell.color = fill_color

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows, top to bottom."""
        for y in range(self._height):
            start = y * self._width
            yield self._buffer[start:start + self._width]

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples in row-major order."""
        for i, cell in enumerate(self._buffer):
            y, x = divmod(i, self._width)
            yield x, y, cell

    def snapshot(self) -> list[tuple[str, int]]:
        """Return (char, color) for every cell, row-major."""
        return [(cell.char, cell.color) for cell in self._buffer]
