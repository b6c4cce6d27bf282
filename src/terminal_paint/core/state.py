"""Cursor and tool state, kept apart from canvas content."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from terminal_paint.core.canvas import Canvas
from terminal_paint.core.constants import BRUSH_CHARS, COLOR_COUNT, DEFAULT_COLOR


@dataclass(frozen=True)
class Brush:
    """Paints with a glyph."""
    glyph: str


@dataclass(frozen=True)
class Eraser:
    """Paints blank space."""

    @property
    def glyph(self) -> str:
        return ' '


Tool = Union[Brush, Eraser]


@dataclass
class CursorState:
    """Logical cursor position on the canvas."""
    x: int = 0
    y: int = 0
    pen_down: bool = False

    @classmethod
    def centered(cls, canvas: Canvas) -> CursorState:
        """Place a cursor in the middle of the canvas."""
        return cls(x=canvas.width // 2, y=canvas.height // 2)

    def move(self, dx: int, dy: int, canvas: Canvas) -> bool:
        """
        Move by (dx, dy), clamped to the canvas.

        Returns True if the position actually changed.
        """
        new_x = min(max(self.x + dx, 0), canvas.width - 1)
        new_y = min(max(self.y + dy, 0), canvas.height - 1)
        if (new_x, new_y) == (self.x, self.y):
            return False
        self.x = new_x
        self.y = new_y
        return True


@dataclass
class ToolState:
    """Current paint parameters."""
    tool: Tool = field(default_factory=lambda: Brush(BRUSH_CHARS[0]))
    brush_index: int = 0
    color: int = DEFAULT_COLOR

    @property
    def glyph(self) -> str:
        """Glyph the current tool paints with."""
        return self.tool.glyph

    @property
    def is_eraser(self) -> bool:
        return isinstance(self.tool, Eraser)

    def next_brush(self) -> None:
        """Switch to the next brush glyph, leaving eraser mode."""
        self.brush_index = (self.brush_index + 1) % len(BRUSH_CHARS)
        self.tool = Brush(BRUSH_CHARS[self.brush_index])

    def use_eraser(self) -> None:
        """Switch to the eraser; the brush cycle restarts from the first glyph."""
        self.brush_index = 0
        self.tool = Eraser()

    def next_color(self) -> None:
        self.color = (self.color + 1) % COLOR_COUNT

    def set_color(self, index: int) -> None:
        """Select a color by index (0-7)."""
        if not 0 <= index < COLOR_COUNT:
            raise ValueError(f"color index must be 0-{COLOR_COUNT - 1}, got {index}")
        self.color = index
