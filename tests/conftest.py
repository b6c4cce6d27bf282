"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from terminal_paint.core.canvas import Canvas


class FakeScreen:
    """
    Records what a renderer draws.

    Each write lands at the last position given to move_to; positions
    are kept 1-indexed, exactly as received.
    """

    def __init__(self) -> None:
        self.row = 1
        self.col = 1
        self.cells: dict[tuple[int, int], str] = {}
        self.writes: list[tuple[int, int, str]] = []
        self.flushes = 0

    def move_to(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def write(self, text: str) -> None:
        self.cells[(self.row, self.col)] = text
        self.writes.append((self.row, self.col, text))

    def flush(self) -> None:
        self.flushes += 1

    def at_canvas(self, x: int, y: int, top: int = 2) -> str | None:
        """What was last drawn for canvas cell (x, y)."""
        return self.cells.get((y + top + 1, x + 1))

    def reset(self) -> None:
        self.cells.clear()
        self.writes.clear()


@pytest.fixture
def screen() -> FakeScreen:
    return FakeScreen()


@pytest.fixture
def canvas() -> Canvas:
    """A blank 5x5 canvas."""
    return Canvas(5, 5)


@pytest.fixture
def example_canvas() -> Canvas:
    """3x2 canvas with '#' (red) at (0,0) and '*' (yellow) at (2,1)."""
    canvas = Canvas(3, 2)
    canvas.paint(0, 0, '#', 1)
    canvas.paint(2, 1, '*', 3)
    return canvas


@pytest.fixture
def example_text() -> str:
    """Saved form of example_canvas."""
    return "3 2\n1,35 7,32 7,32\n7,32 7,32 3,42\n"
