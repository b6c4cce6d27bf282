"""Core data structures for the paint surface."""

from terminal_paint.core.cell import Cell
from terminal_paint.core.canvas import Canvas, TerminalTooSmallError
from terminal_paint.core.color import PaletteColor
from terminal_paint.core.state import Brush, CursorState, Eraser, Tool, ToolState

__all__ = [
    "Cell",
    "Canvas",
    "TerminalTooSmallError",
    "PaletteColor",
    "Brush",
    "Eraser",
    "Tool",
    "CursorState",
    "ToolState",
]
